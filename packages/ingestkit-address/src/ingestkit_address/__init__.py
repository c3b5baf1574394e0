"""ingestkit-address -- Email participant value object for ingestkit pipelines.

Re-exports all public types: the ``Address`` model, encoded-word decoder,
archive protocols, config, and errors.
"""

from ingestkit_address.archive import Archiver, KeyedArchive, Unarchiver
from ingestkit_address.config import AddressConfig
from ingestkit_address.encoded_words import DecodeResult, decode_encoded_words
from ingestkit_address.errors import AddressArchiveError, AddressError, ErrorCode
from ingestkit_address.models import Address, dedupe_addresses

__all__ = [
    # Models
    "Address",
    "dedupe_addresses",
    # Decoding
    "DecodeResult",
    "decode_encoded_words",
    # Archive
    "Archiver",
    "Unarchiver",
    "KeyedArchive",
    # Config
    "AddressConfig",
    # Errors
    "ErrorCode",
    "AddressError",
    "AddressArchiveError",
]
