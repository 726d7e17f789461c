"""Unit tests for the tagged service results."""

import dataclasses

import pytest

from sysroles.application.results import (
    Conflict,
    Created,
    NotFound,
    ResultStatus,
    ServerError,
    Success,
)


@pytest.mark.parametrize(
    ("result", "status"),
    [
        (Success(data={"id": "1"}), ResultStatus.SUCCESS),
        (Created(data={"id": "1"}), ResultStatus.CREATED),
        (NotFound(error="missing"), ResultStatus.NOT_FOUND),
        (Conflict(error="duplicate"), ResultStatus.CONFLICT),
        (ServerError(error="boom"), ResultStatus.SERVER_ERROR),
    ],
)
def test_tag_determines_status_and_populated_side(result, status) -> None:
    """Exactly one of data/error is set, and the status says which."""
    assert result.status is status
    if status.is_failure:
        assert result.data is None
        assert result.error is not None
    else:
        assert result.error is None
        assert result.data is not None


def test_failure_statuses() -> None:
    failures = {s for s in ResultStatus if s.is_failure}
    assert failures == {
        ResultStatus.NOT_FOUND,
        ResultStatus.CONFLICT,
        ResultStatus.SERVER_ERROR,
    }


def test_status_is_not_an_instance_field() -> None:
    """status lives on the class, so it cannot disagree with the tag."""
    assert "status" not in {f.name for f in dataclasses.fields(Success)}
    with pytest.raises(TypeError):
        Success(data=[], status=ResultStatus.NOT_FOUND)


def test_results_are_frozen() -> None:
    result = NotFound(error="missing")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.error = "other"


def test_empty_list_is_valid_success_data() -> None:
    assert Success(data=[]).data == []
