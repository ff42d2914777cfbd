"""Error taxonomy shared by builders, conversion and transports.

Capability errors (:class:`ValidationError` subclasses) are raised by the
builder method that performs the check. Everything that can come out of an
awaited :class:`~ravenhttp.response.ResponseFuture` is an :class:`HttpError`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

AUDIT_REASON_MAX_LENGTH = 512


class ErrorKind(str, Enum):
    BUILDING_REQUEST = "building_request"
    BUILDER_CONSUMED = "builder_consumed"
    CREATING_HEADER = "creating_header"
    VALIDATION = "validation"
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    PROTOCOL = "protocol"
    RESPONSE = "response"
    UNAUTHORIZED = "unauthorized"
    PARSING = "parsing"


_CONVERSION_KINDS = frozenset(
    {
        ErrorKind.BUILDING_REQUEST,
        ErrorKind.BUILDER_CONSUMED,
        ErrorKind.CREATING_HEADER,
        ErrorKind.VALIDATION,
    }
)


class HttpError(Exception):
    """Request failed before or during dispatch."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status: Optional[int] = None,
        body: Optional[bytes] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.body = body

    @property
    def source(self) -> Optional[BaseException]:
        """Underlying exception, when this error wraps one."""
        return self.__cause__

    @property
    def is_conversion_error(self) -> bool:
        return self.kind in _CONVERSION_KINDS

    @property
    def is_transport_error(self) -> bool:
        return not self.is_conversion_error

    def __repr__(self) -> str:
        status = f" status={self.status}" if self.status is not None else ""
        return f"HttpError(kind={self.kind.value}{status}, message={str(self)!r})"


class ValidationError(ValueError):
    """Base class for errors raised by builder capability methods."""


class AuditLogReasonErrorKind(str, Enum):
    EMPTY = "empty"
    TOO_LONG = "too_long"
    NOT_ENCODABLE = "not_encodable"


class AuditLogReasonError(ValidationError):
    def __init__(self, kind: AuditLogReasonErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def validate(cls, reason: str) -> str:
        """Return ``reason`` unchanged when it can be sent as an audit log reason.

        Raises:
            AuditLogReasonError: When the reason is empty, longer than
                ``AUDIT_REASON_MAX_LENGTH`` characters, or not UTF-8 encodable.
        """
        if not isinstance(reason, str):
            raise TypeError(f"audit log reason must be a str, got {type(reason).__name__}")
        if not reason:
            raise cls(AuditLogReasonErrorKind.EMPTY, "audit log reason must not be empty")
        if len(reason) > AUDIT_REASON_MAX_LENGTH:
            raise cls(
                AuditLogReasonErrorKind.TOO_LONG,
                f"audit log reason is {len(reason)} characters; the limit is {AUDIT_REASON_MAX_LENGTH}",
            )
        try:
            reason.encode("utf-8")
        except UnicodeEncodeError as err:
            raise cls(
                AuditLogReasonErrorKind.NOT_ENCODABLE,
                f"audit log reason is not UTF-8 encodable: {err.reason}",
            ) from err
        return reason


class CreateBanErrorKind(str, Enum):
    DELETE_MESSAGE_DAYS_INVALID = "delete_message_days_invalid"


class CreateBanError(ValidationError):
    def __init__(self, kind: CreateBanErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


__all__ = [
    "AUDIT_REASON_MAX_LENGTH",
    "ErrorKind",
    "HttpError",
    "ValidationError",
    "AuditLogReasonError",
    "AuditLogReasonErrorKind",
    "CreateBanError",
    "CreateBanErrorKind",
]
