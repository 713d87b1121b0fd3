"""
Per-repository README update.
"""

import logging

from .errors import DocumentNotFound
from .fetcher import GitHubClient
from .models import RepositoryRef, UpdateOutcome, WeekStamp
from .patcher import apply_stamp
from .stamp import MARKER_PREFIX

logger = logging.getLogger("readme-stamp.updater")


class ReadmeUpdater:
    """
    Bring one repository's README up to date with the week label.

    Args:
        client: GitHub client used to read and write the README.
        prefix: Marker token identifying the stamp line.
        dry_run: Compute outcomes without committing anything.
    """

    def __init__(self, client: GitHubClient, prefix: str = MARKER_PREFIX, dry_run: bool = False) -> None:
        self.client = client
        self.prefix = prefix
        self.dry_run = dry_run

    def update(self, repo: RepositoryRef, stamp: WeekStamp) -> UpdateOutcome:
        """
        Stamp the README of ``repo``.

        Returns:
            ``Skipped`` when there is no README or it already carries the
            label, ``Updated`` once the new version is committed.

        Raises:
            DocumentFetchError: If the README cannot be read
            DocumentWriteError: If the commit is rejected, including when the
                README changed after it was read
        """
        try:
            document = self.client.fetch_readme(repo)
        except DocumentNotFound:
            logger.debug("%s has no README, skipping", repo.full_name)
            return UpdateOutcome.skipped("no README")

        new_text = apply_stamp(document.text, stamp.label_text, prefix=self.prefix)
        if new_text == document.text:
            return UpdateOutcome.skipped("already stamped")

        if self.dry_run:
            logger.info("[dry run] would update %s in %s", document.path, repo.full_name)
            return UpdateOutcome.updated("dry run")

        message = f"chore: update weekly stamp ({stamp.sunday_date:%Y-%m-%d})"
        self.client.write_readme(repo, document, new_text, message)
        return UpdateOutcome.updated()
