"""
GitHub access module.

This module handles all GitHub API interactions needed to stamp READMEs:
listing the authenticated user's repositories page by page, fetching a
repository's README and committing a new version of it, using PyGithub.
"""

import logging
from typing import List

from .errors import DocumentFetchError, DocumentNotFound, DocumentWriteError, ListingError
from .models import ReadmeDocument, RepositoryRef

# External libs
try:
    from github import Auth, Github, GithubException, UnknownObjectException
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("readme-stamp.fetcher")

DEFAULT_PAGE_SIZE = 100
# GitHub caps per_page at 100
MAX_PAGE_SIZE = 100


class GitHubClient:
    """
    Thin wrapper around PyGithub for the three calls a run needs.

    Args:
        token: Personal access token with read/write access to repository contents.
        page_size: Number of repositories requested per listing page (max 100).
    """

    def __init__(self, token: str, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
        self.page_size = page_size
        try:
            self._g = Github(auth=Auth.Token(token), per_page=page_size)
            logger.debug("GitHub client initialized (page_size=%d)", page_size)
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise RuntimeError(f"GitHub client initialization failed: {e}") from e

    def list_repositories(self) -> List[RepositoryRef]:
        """
        Fetch every repository visible to the token.

        Pages are requested one after another until a page comes back with
        fewer than ``page_size`` items.

        Returns:
            RepositoryRef list in the order GitHub returned them

        Raises:
            ListingError: If any page request fails
        """
        paginated = self._g.get_user().get_repos()
        result: List[RepositoryRef] = []
        page = 1

        while True:
            try:
                # PaginatedList pages are 0-based
                batch = paginated.get_page(page - 1)
            except GithubException as e:
                logger.error("Listing repositories failed on page %d: %s", page, e.status)
                raise ListingError(page, e.status, e.data) from e

            logger.debug("Page %d returned %d repositories", page, len(batch))
            result.extend(RepositoryRef(owner_login=r.owner.login, name=r.name) for r in batch)

            if len(batch) < self.page_size:
                break
            page += 1

        logger.info("Found %d repositories", len(result))
        return result

    def fetch_readme(self, repo: RepositoryRef) -> ReadmeDocument:
        """
        Fetch and decode the README of a repository.

        Raises:
            DocumentNotFound: If the repository has no README
            DocumentFetchError: If the request fails for any other reason
        """
        try:
            contents = self._g.get_repo(repo.full_name, lazy=True).get_readme()
        except UnknownObjectException as e:
            raise DocumentNotFound(repo.full_name) from e
        except GithubException as e:
            raise DocumentFetchError(repo.full_name, e.status, e.data) from e

        try:
            text = contents.decoded_content.decode("utf-8")
        except (ValueError, UnicodeDecodeError) as e:
            raise DocumentFetchError(repo.full_name, None, f"undecodable content: {e}") from e

        logger.debug("Fetched %s from %s (sha=%s)", contents.path, repo.full_name, contents.sha)
        return ReadmeDocument(path=contents.path, sha=contents.sha, text=text)

    def write_readme(self, repo: RepositoryRef, document: ReadmeDocument, text: str, message: str) -> None:
        """
        Commit ``text`` as the new content of ``document``.

        The document's sha is sent along, so GitHub rejects the write if the
        file changed since it was fetched.

        Raises:
            DocumentWriteError: If the commit is rejected
        """
        try:
            self._g.get_repo(repo.full_name, lazy=True).update_file(
                document.path,
                message,
                text.encode("utf-8"),
                document.sha,
            )
        except GithubException as e:
            raise DocumentWriteError(repo.full_name, e.status, e.data) from e

        logger.debug("Committed %s to %s", document.path, repo.full_name)
