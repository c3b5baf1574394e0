"""Error codes and structured error model for the ingestkit-address package.

``ErrorCode`` contains every address-specific error/warning code.
``AddressError`` is the structured record returned alongside decoded text
and attached to :class:`AddressArchiveError`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for ingestkit-address.

    Fatal codes use an ``E_`` prefix; warnings use ``W_``.
    Values equal their names for stable metric/alerting strings.
    """

    # Archive errors
    E_ADDRESS_ARCHIVE_FIELD_INVALID = "E_ADDRESS_ARCHIVE_FIELD_INVALID"

    # Warnings (non-fatal)
    W_ADDRESS_UNKNOWN_CHARSET = "W_ADDRESS_UNKNOWN_CHARSET"
    W_ADDRESS_MALFORMED_WORD = "W_ADDRESS_MALFORMED_WORD"
    W_ADDRESS_ARCHIVE_FIELD_MISSING = "W_ADDRESS_ARCHIVE_FIELD_MISSING"


class AddressError(BaseModel):
    """Structured error with code, message, and context.

    ``token`` holds the raw encoded-word that triggered a decode warning,
    or the archive key for archive errors.
    """

    code: ErrorCode
    message: str
    stage: str | None = None
    recoverable: bool = False
    token: str | None = None


class AddressArchiveError(ValueError):
    """Raised when an archive holds a value that cannot restore an address."""

    def __init__(self, error: AddressError) -> None:
        super().__init__(error.message)
        self.error = error
