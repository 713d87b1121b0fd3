import datetime

import pytest

from readme_stamp.errors import DocumentNotFound
from readme_stamp.models import ReadmeDocument, RepositoryRef
from readme_stamp.stamp import compute_week_stamp


class FakeClient:
    """In-memory stand-in for GitHubClient."""

    def __init__(self, readmes=None, repos=None):
        # full_name -> README text (None means no README)
        self.readmes = dict(readmes or {})
        self.repos = repos if repos is not None else [
            RepositoryRef(*name.split("/")) for name in self.readmes
        ]
        self.fetch_errors = {}
        self.write_errors = {}
        self.writes = []

    def list_repositories(self):
        return list(self.repos)

    def fetch_readme(self, repo):
        if repo.full_name in self.fetch_errors:
            raise self.fetch_errors[repo.full_name]
        text = self.readmes.get(repo.full_name)
        if text is None:
            raise DocumentNotFound(repo.full_name)
        return ReadmeDocument(path="README.md", sha=f"sha-{repo.name}", text=text)

    def write_readme(self, repo, document, text, message):
        if repo.full_name in self.write_errors:
            raise self.write_errors[repo.full_name]
        self.writes.append((repo.full_name, document.sha, text, message))
        self.readmes[repo.full_name] = text


@pytest.fixture
def stamp():
    return compute_week_stamp(datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc))


@pytest.fixture
def now():
    return datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
