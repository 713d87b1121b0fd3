"""
README Stamper - keeps a weekly stamp line at the end of every repository README.
"""

from .models import ReadmeDocument, RepositoryRef, RunSummary, UpdateOutcome, UpdateStatus, WeekStamp
from .errors import (
    ConfigurationError,
    DocumentFetchError,
    DocumentNotFound,
    DocumentWriteError,
    ListingError,
    StampError,
    UpdateError,
)
from .stamp import MARKER_PREFIX, compute_week_stamp, iso_week
from .patcher import apply_stamp
from .fetcher import GitHubClient
from .updater import ReadmeUpdater
from .runner import run_weekly_stamp

__all__ = [
    'WeekStamp',
    'RepositoryRef',
    'ReadmeDocument',
    'UpdateStatus',
    'UpdateOutcome',
    'RunSummary',
    'StampError',
    'ConfigurationError',
    'ListingError',
    'DocumentNotFound',
    'UpdateError',
    'DocumentFetchError',
    'DocumentWriteError',
    'MARKER_PREFIX',
    'compute_week_stamp',
    'iso_week',
    'apply_stamp',
    'GitHubClient',
    'ReadmeUpdater',
    'run_weekly_stamp',
]
