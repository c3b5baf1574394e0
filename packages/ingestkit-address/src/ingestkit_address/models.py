"""Pydantic model for a single email participant.

Contains ``Address`` (display name + address-spec) and the
``dedupe_addresses`` helper for address lists.
"""

from __future__ import annotations

import hashlib
import logging
from email.utils import formataddr
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from ingestkit_address.archive import Archiver, Unarchiver
from ingestkit_address.config import AddressConfig
from ingestkit_address.encoded_words import decode_encoded_words
from ingestkit_address.errors import AddressArchiveError, AddressError, ErrorCode

__all__ = ["Address", "dedupe_addresses"]

logger = logging.getLogger("ingestkit_address")

_DEFAULT_CONFIG = AddressConfig()

# Archive field names, in write order.
_ARCHIVE_FIELDS = ("name", "email")


class Address(BaseModel):
    """An email address paired with an optional display name.

    Both fields are stored verbatim: ``name`` may still contain RFC 2047
    encoded-words and ``email`` is never validated.  ``None`` is stored as
    an empty string.

    Identity is the ``email`` field alone: two addresses with the same
    ``email`` and different names compare equal and hash alike.  Changing
    ``email`` on an address that is already in a set or dict key is not
    supported.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    email: str = ""

    @field_validator("name", "email", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    # -- Construction --

    @classmethod
    def create_empty(cls) -> Address:
        """Return an address with empty name and email."""
        return cls()

    @classmethod
    def create(cls, name: str | None, email: str | None) -> Address:
        """Return an address holding *name* and *email* unchanged."""
        return cls(name=name, email=email)

    @classmethod
    def from_pair(cls, pair: tuple[str | None, str | None]) -> Address:
        """Build from a ``(name, email)`` tuple as produced by
        :func:`email.utils.parseaddr` or :func:`email.utils.getaddresses`."""
        name, email = pair
        return cls.create(name, email)

    def as_pair(self) -> tuple[str, str]:
        return (self.name, self.email)

    # -- Accessors --

    def get_name(self) -> str:
        return self.name

    def set_name(self, value: str) -> None:
        self.name = value

    def get_email(self) -> str:
        return self.email

    def set_email(self, value: str) -> None:
        self.email = value

    # -- Derived values --

    def decoded_name(self, config: AddressConfig | None = None) -> str:
        """Return the display name with all encoded-words decoded.

        Never raises: tokens with an unknown charset or a broken payload
        are left in place as literal text.
        """
        return decode_encoded_words(self.name, config).text

    @property
    def fingerprint(self) -> str:
        """SHA-256 hex digest of the email, stable across processes."""
        return hashlib.sha256(
            self.email.encode("utf-8", errors="surrogatepass")
        ).hexdigest()

    def describe(self, config: AddressConfig | None = None) -> str:
        """Human-readable ``Name <email>`` summary for logs.

        Falls back to the bare email when there is no name.  Not a valid
        header value; use :meth:`formatted` for that.
        """
        config = config or _DEFAULT_CONFIG
        display = self.decoded_name(config) if config.describe_decoded_name else self.name
        if display:
            return f"{display} <{self.email}>"
        return self.email

    def formatted(self, config: AddressConfig | None = None) -> str:
        """Header-ready rendering of the decoded name and email.

        Quoting and re-encoding of non-ASCII names are done by
        :func:`email.utils.formataddr`.
        """
        return formataddr((self.decoded_name(config), self.email))

    # -- Equality --

    def equals(self, other: object) -> bool:
        return isinstance(other, Address) and self.email == other.email

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.email == other.email

    def __hash__(self) -> int:
        return hash(self.email)

    def __str__(self) -> str:
        return self.describe()

    # -- Persistence --

    def encode_with(self, archiver: Archiver) -> None:
        """Write ``name`` and ``email`` as two raw text fields."""
        archiver.encode_text("name", self.name)
        archiver.encode_text("email", self.email)

    @classmethod
    def decode_with(cls, unarchiver: Unarchiver) -> Address:
        """Restore an address written by :meth:`encode_with`.

        Values are restored exactly as stored; encoded-words stay encoded.
        A missing field is restored as an empty string.

        Raises
        ------
        AddressArchiveError
            If a stored field is not text.
        """
        values: dict[str, str] = {}
        for key in _ARCHIVE_FIELDS:
            if not unarchiver.contains_key(key):
                logger.warning(
                    "ingestkit_address | code=%s | detail=%s",
                    ErrorCode.W_ADDRESS_ARCHIVE_FIELD_MISSING.value,
                    f"Archive has no '{key}' field; restored as empty",
                )
                values[key] = ""
                continue

            value = unarchiver.decode_text(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise AddressArchiveError(
                    AddressError(
                        code=ErrorCode.E_ADDRESS_ARCHIVE_FIELD_INVALID,
                        message=(
                            f"Archive field '{key}' holds "
                            f"{type(value).__name__}, expected str"
                        ),
                        stage="decode_archive",
                        token=key,
                    )
                )
            values[key] = value

        return cls(**values)


def dedupe_addresses(addresses: Iterable[Address]) -> list[Address]:
    """Drop repeated addresses, keeping the first occurrence of each email."""
    seen: set[Address] = set()
    unique: list[Address] = []
    for address in addresses:
        if address in seen:
            continue
        seen.add(address)
        unique.append(address)
    return unique
