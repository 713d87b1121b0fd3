"""
Run orchestration: stamp every repository the token can see.
"""

import datetime
import logging
from typing import Iterable, Optional

from .errors import ConfigurationError
from .fetcher import DEFAULT_PAGE_SIZE, GitHubClient
from .models import RunSummary, UpdateOutcome, UpdateStatus
from .stamp import MARKER_PREFIX, compute_week_stamp
from .updater import ReadmeUpdater

logger = logging.getLogger("readme-stamp.runner")


def run_weekly_stamp(
    token: Optional[str],
    *,
    now: Optional[datetime.datetime] = None,
    client: Optional[GitHubClient] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    prefix: str = MARKER_PREFIX,
    roll_forward: bool = True,
    dry_run: bool = False,
    include: Optional[Iterable[str]] = None,
) -> RunSummary:
    """
    Stamp the README of every repository visible to ``token``.

    Repositories are processed one after another. A failure in one of them,
    whatever its cause, is recorded in the summary and the loop moves on;
    only a missing token or a failed listing aborts the run.

    Args:
        token: GitHub token. Required even when ``client`` is given.
        now: Reference instant for the week label (defaults to now, UTC).
        client: Pre-built GitHub client; created from ``token`` if omitted.
        page_size: Listing page size when building the client.
        prefix: Marker token of the stamp line.
        roll_forward: Label the upcoming Sunday rather than the previous one.
        dry_run: Do not commit anything.
        include: Optional ``owner/name`` values restricting the run.

    Returns:
        RunSummary with one entry per processed repository

    Raises:
        ConfigurationError: If ``token`` is missing
        ListingError: If the repositories cannot be listed
    """
    if not token or not token.strip():
        raise ConfigurationError("GITHUB_TOKEN is not set; provide a token with repository contents access")

    stamp = compute_week_stamp(now, prefix=prefix, roll_forward=roll_forward)
    logger.info("Week stamp: %s", stamp.label_text)

    if client is None:
        client = GitHubClient(token, page_size=page_size)
    repos = client.list_repositories()

    if include is not None:
        wanted = set(include)
        repos = [r for r in repos if r.full_name in wanted]
        logger.info("Restricted to %d selected repositories", len(repos))

    updater = ReadmeUpdater(client, prefix=prefix, dry_run=dry_run)
    summary = RunSummary(week_stamp=stamp)

    for repo in repos:
        try:
            outcome = updater.update(repo, stamp)
        except Exception as e:
            logger.warning("%s: %s", repo.full_name, e)
            outcome = UpdateOutcome.failed(str(e) or type(e).__name__)
        else:
            logger.info("%s: %s", repo.full_name, outcome.status.value)
        summary.add(repo, outcome)

    counts = summary.counts()
    logger.info(
        "Done: %d updated, %d skipped, %d failed",
        counts[UpdateStatus.UPDATED.value],
        counts[UpdateStatus.SKIPPED.value],
        counts[UpdateStatus.FAILED.value],
    )
    return summary
