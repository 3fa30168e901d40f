"""EmailListVerify Python SDK for email verification."""

import logging

from .bulk import BulkVerificationManager
from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, EmailListVerify, decode_body
from .exceptions import (
    ConfigurationError,
    EmailListVerifyError,
    NotFoundError,
    ProtocolError,
    RequestError,
    TimeoutError,
    ValidationError,
)
from .types import (
    BatchErrorEntry,
    BulkJob,
    BulkStatus,
    JobState,
    ResultType,
    VerificationResult,
    VerificationStatus,
)
from .validator import DISPOSABLE_DOMAINS, EmailValidator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Clients
    "EmailListVerify",
    "BulkVerificationManager",
    "EmailValidator",
    "decode_body",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DISPOSABLE_DOMAINS",
    # Types
    "VerificationResult",
    "VerificationStatus",
    "BatchErrorEntry",
    "BulkJob",
    "BulkStatus",
    "JobState",
    "ResultType",
    # Exceptions
    "EmailListVerifyError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "RequestError",
    "ProtocolError",
    "TimeoutError",
]
