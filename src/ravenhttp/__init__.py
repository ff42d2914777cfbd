"""Public package entrypoints for ravenhttp.

This module defines the stable, top-level APIs intended for external callers.
"""

from __future__ import annotations

from ravenhttp.client import Client
from ravenhttp.config import ClientConfig, load_config
from ravenhttp.error import AuditLogReasonError, CreateBanError, ErrorKind, HttpError, ValidationError
from ravenhttp.request import AuditLogReason, Request, TryIntoRequest
from ravenhttp.response import Response, ResponseFuture
from ravenhttp.routing import Method, ResponseShape, Route

__all__ = [
    "Client",
    "ClientConfig",
    "load_config",
    "AuditLogReason",
    "AuditLogReasonError",
    "CreateBanError",
    "ErrorKind",
    "HttpError",
    "ValidationError",
    "Request",
    "TryIntoRequest",
    "Response",
    "ResponseFuture",
    "Method",
    "ResponseShape",
    "Route",
]
__version__ = "0.1.0"
