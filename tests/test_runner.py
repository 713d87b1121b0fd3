import json

import pytest
import requests
from github import GithubException

from conftest import FakeClient
from readme_stamp.errors import ConfigurationError, DocumentWriteError, ListingError
from readme_stamp.models import UpdateStatus
from readme_stamp.runner import run_weekly_stamp


def test_missing_token_aborts_before_listing(now):
    client = FakeClient({"me/a": "x\n"})
    client.list_repositories = None  # would fail if called

    for token in (None, "", "   "):
        with pytest.raises(ConfigurationError):
            run_weekly_stamp(token, now=now, client=client)


def test_listing_error_aborts(now):
    class Failing(FakeClient):
        def list_repositories(self):
            raise ListingError(1, 401, "Bad credentials")

    with pytest.raises(ListingError):
        run_weekly_stamp("t", now=now, client=Failing())


def test_partial_failure_is_isolated(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n", "me/c": None})
    client.write_errors["me/b"] = DocumentWriteError("me/b", 409, "conflict")

    summary = run_weekly_stamp("t", now=now, client=client)

    assert [(r.full_name, o.status) for r, o in summary.results] == [
        ("me/a", UpdateStatus.UPDATED),
        ("me/b", UpdateStatus.FAILED),
        ("me/c", UpdateStatus.SKIPPED),
    ]
    assert "409" in summary.results[1][1].reason
    assert [w[0] for w in client.writes] == ["me/a"]


def test_unexpected_github_error_is_isolated(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n"})
    client.fetch_errors["me/a"] = GithubException(500, {"message": "oops"})

    summary = run_weekly_stamp("t", now=now, client=client)

    assert [o.status for _, o in summary.results] == [UpdateStatus.FAILED, UpdateStatus.UPDATED]


def test_summary_serialization(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n"})
    client.write_errors["me/b"] = DocumentWriteError("me/b", 409, "conflict")

    data = run_weekly_stamp("t", now=now, client=client).to_dict()

    assert data["weekStamp"] == {"sundayDate": "2024-01-07", "isoYear": 2024, "isoWeek": 1}
    assert data["summary"][0] == {"repo": "me/a", "status": "updated"}
    assert data["summary"][1]["status"] == "error"
    assert "conflict" in data["summary"][1]["error"]
    json.dumps(data, ensure_ascii=False)


def test_counts(now):
    client = FakeClient({"me/a": "a\n", "me/b": None, "me/c": None})
    assert run_weekly_stamp("t", now=now, client=client).counts() == {
        "updated": 1, "skipped": 2, "error": 0,
    }


def test_include_filter(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n"})

    summary = run_weekly_stamp("t", now=now, client=client, include=["me/b"])

    assert [r.full_name for r, _ in summary.results] == ["me/b"]


def test_week_stamp_computed_once_for_all_repos(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n"})

    run_weekly_stamp("t", now=now, client=client)

    labels = {w[2].splitlines()[-1] for w in client.writes}
    assert labels == {"本周记录: 2024-01-07 · 2024年第1周"}


def test_transport_error_on_one_repo_is_isolated(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n", "me/c": "c\n"})
    client.fetch_errors["me/b"] = requests.exceptions.ConnectionError("reset by peer")

    summary = run_weekly_stamp("t", now=now, client=client)

    assert [(r.full_name, o.status) for r, o in summary.results] == [
        ("me/a", UpdateStatus.UPDATED),
        ("me/b", UpdateStatus.FAILED),
        ("me/c", UpdateStatus.UPDATED),
    ]
    assert summary.results[1][1].reason == "reset by peer"


def test_malformed_response_is_isolated(now):
    client = FakeClient({"me/a": "a\n", "me/b": "b\n"})
    client.fetch_errors["me/a"] = AttributeError()

    summary = run_weekly_stamp("t", now=now, client=client)

    assert summary.results[0][1].status is UpdateStatus.FAILED
    assert summary.results[0][1].reason == "AttributeError"
    assert summary.results[1][1].status is UpdateStatus.UPDATED


def test_dry_run_reason_is_serialized(now):
    client = FakeClient({"me/a": "a\n", "me/b": None})

    data = run_weekly_stamp("t", now=now, client=client, dry_run=True).to_dict()

    assert data["summary"] == [
        {"repo": "me/a", "status": "updated", "reason": "dry run"},
        {"repo": "me/b", "status": "skipped", "reason": "no README"},
    ]
    assert client.writes == []
