"""Audit log reason header support.

Endpoints whose remote operation records an audit log entry accept a
human-readable reason. Builders opt in by implementing :class:`AuditLogReason`;
the reason is validated when it is set and encoded when the request is built.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from ravenhttp.error import AUDIT_REASON_MAX_LENGTH, AuditLogReasonError, ErrorKind, HttpError

AUDIT_REASON_HEADER = "X-Audit-Log-Reason"

_T = TypeVar("_T", bound="AuditLogReason")


@runtime_checkable
class AuditLogReason(Protocol):
    def reason(self: _T, reason: str) -> _T:
        """Attach an audit log reason, replacing any previous one.

        Raises:
            AuditLogReasonError: The reason was rejected. The builder keeps
                its previous state, including an earlier accepted reason.
        """
        ...


def encode_reason(reason: str) -> str:
    """Percent-encode every UTF-8 byte that is not an ASCII letter or digit."""
    encoded = []
    for byte in reason.encode("utf-8"):
        char = chr(byte)
        if char.isascii() and char.isalnum():
            encoded.append(char)
        else:
            encoded.append(f"%{byte:02X}")
    return "".join(encoded)


def audit_header(reason: str) -> tuple[tuple[str, str], ...]:
    try:
        value = encode_reason(reason)
    except UnicodeEncodeError as err:
        raise HttpError(ErrorKind.CREATING_HEADER, f"cannot encode {AUDIT_REASON_HEADER} header: {err.reason}") from err
    return ((AUDIT_REASON_HEADER, value),)


__all__ = [
    "AUDIT_REASON_HEADER",
    "AUDIT_REASON_MAX_LENGTH",
    "AuditLogReason",
    "AuditLogReasonError",
    "audit_header",
    "encode_reason",
]
