"""
Exceptions raised while stamping READMEs.

`ConfigurationError` and `ListingError` abort a run. Subclasses of
`UpdateError` concern a single repository and are turned into a failed
outcome by the runner. `DocumentNotFound` is not a failure at all.
"""

from typing import Any, Optional


class StampError(Exception):
    """Base class for all errors raised by readme_stamp."""


class ConfigurationError(StampError):
    """Raised when the GitHub token is missing."""


class ListingError(StampError):
    """Raised when a page of the repository listing cannot be retrieved."""

    def __init__(self, page: int, status: Optional[int], body: Any) -> None:
        self.page = page
        self.status = status
        self.body = body
        super().__init__(f"Failed to list repositories (page {page}): {status} {body}")


class DocumentNotFound(StampError):
    """The repository has no README."""

    def __init__(self, repo: str) -> None:
        self.repo = repo
        super().__init__(f"No README found for {repo}")


class UpdateError(StampError):
    """A failure confined to one repository."""

    def __init__(self, repo: str, message: str) -> None:
        self.repo = repo
        super().__init__(message)


class DocumentFetchError(UpdateError):
    def __init__(self, repo: str, status: Optional[int], body: Any) -> None:
        self.status = status
        self.body = body
        super().__init__(repo, f"Failed to fetch README for {repo}: {status} {body}")


class DocumentWriteError(UpdateError):
    """Also raised when the README changed between read and write (409)."""

    def __init__(self, repo: str, status: Optional[int], body: Any) -> None:
        self.status = status
        self.body = body
        super().__init__(repo, f"Failed to update README for {repo}: {status} {body}")
