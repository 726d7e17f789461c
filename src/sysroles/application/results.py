"""Tagged results returned by every persistence service operation.

A service call never raises past its boundary. It returns one of the
result types below; success-class results carry ``data``, failure-class
results carry ``error``, and the class itself is the status tag.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar


class ResultStatus(StrEnum):
    """Closed set of outcomes shared with the HTTP layer."""

    SUCCESS = "success"
    CREATED = "created"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"

    @property
    def is_failure(self) -> bool:
        return self in (
            ResultStatus.NOT_FOUND,
            ResultStatus.CONFLICT,
            ResultStatus.SERVER_ERROR,
        )


@dataclass(frozen=True)
class Success:
    """Operation succeeded; data is a document or a list of documents."""

    status: ClassVar[ResultStatus] = ResultStatus.SUCCESS

    data: Any
    error: None = None


@dataclass(frozen=True)
class Created:
    """New record persisted; data is its document."""

    status: ClassVar[ResultStatus] = ResultStatus.CREATED

    data: Any
    error: None = None


@dataclass(frozen=True)
class NotFound:
    """No record for the identifier, or the identifier is malformed."""

    status: ClassVar[ResultStatus] = ResultStatus.NOT_FOUND

    error: str
    data: None = None


@dataclass(frozen=True)
class Conflict:
    """Storage rejected a duplicate unique field."""

    status: ClassVar[ResultStatus] = ResultStatus.CONFLICT

    error: str
    data: None = None


@dataclass(frozen=True)
class ServerError:
    """Unclassified storage or service failure; error carries backend detail."""

    status: ClassVar[ResultStatus] = ResultStatus.SERVER_ERROR

    error: str
    data: None = None


Result = Success | Created | NotFound | Conflict | ServerError
