"""RFC 2047 encoded-word decoding for display names.

Decodes ``=?charset?Q?text?=`` and ``=?charset?B?text?=`` tokens found
anywhere in a header fragment.  Unlike :func:`email.header.decode_header`,
a bad token never aborts the whole value: it is passed through literally
and reported as a ``W_`` warning while the remaining tokens still decode.
"""

from __future__ import annotations

import base64
import binascii
import codecs
import logging
import re

from pydantic import BaseModel

from ingestkit_address.config import AddressConfig
from ingestkit_address.errors import AddressError, ErrorCode

logger = logging.getLogger("ingestkit_address")

_DEFAULT_CONFIG = AddressConfig()

_ENCODED_WORD = re.compile(
    r"""
    =\?
    (?P<charset>[^?*\s]+)       # charset
    (?:\*[^?\s]*)?              # optional RFC 2231 language tag
    \?
    (?P<encoding>[QqBb])
    \?
    (?P<payload>[^?\s]*)
    \?=
    """,
    re.VERBOSE,
)

# Every "=" must start a two-digit hex escape.
_Q_PAYLOAD = re.compile(r"(?:[^=]|=[0-9A-Fa-f]{2})*")


class DecodeResult(BaseModel):
    """Decoded text plus one warning per token left undecoded."""

    text: str
    warnings: list[AddressError] = []


def _decode_q(payload: str) -> bytes:
    if not _Q_PAYLOAD.fullmatch(payload):
        raise ValueError("invalid Q escape sequence")
    return binascii.a2b_qp(payload.encode("ascii"), header=True)


def _decode_b(payload: str) -> bytes:
    padded = payload + "=" * (-len(payload) % 4)
    return base64.b64decode(padded.encode("ascii"), validate=True)


def _decode_word(
    match: re.Match[str], config: AddressConfig
) -> tuple[str | None, AddressError | None]:
    """Decode one encoded-word.

    Returns ``(text, None)`` on success and ``(None, warning)`` when the
    token has to be passed through as literal text.
    """
    token = match.group(0)
    declared = match.group("charset")
    charset = config.resolve_charset(declared)

    try:
        info = codecs.lookup(charset)
        known = getattr(info, "_is_text_encoding", True)
    except (LookupError, ValueError):
        known = False
    if not known:
        return None, AddressError(
            code=ErrorCode.W_ADDRESS_UNKNOWN_CHARSET,
            message=f"Unknown charset '{declared}' in encoded-word",
            stage="decode",
            recoverable=True,
            token=token,
        )

    payload = match.group("payload")
    try:
        if match.group("encoding").upper() == "Q":
            raw = _decode_q(payload)
        else:
            raw = _decode_b(payload)
        return raw.decode(charset), None
    except (binascii.Error, UnicodeError, LookupError, ValueError) as exc:
        return None, AddressError(
            code=ErrorCode.W_ADDRESS_MALFORMED_WORD,
            message=f"Cannot decode encoded-word as {declared}: {exc}",
            stage="decode",
            recoverable=True,
            token=token,
        )


def decode_encoded_words(
    text: str, config: AddressConfig | None = None
) -> DecodeResult:
    """Decode every encoded-word in *text*.

    Parameters
    ----------
    text:
        Raw header fragment, e.g. a display name as received.
    config:
        Charset aliases and logging switches.  Uses defaults when *None*.

    Returns
    -------
    DecodeResult
        The decoded text.  Literal text around tokens is kept verbatim;
        whitespace separating two decoded tokens is dropped.  Tokens that
        cannot be decoded are kept as-is and listed in ``warnings``.
    """
    if "=?" not in text:
        return DecodeResult(text=text)

    config = config or _DEFAULT_CONFIG
    pieces: list[str] = []
    warnings: list[AddressError] = []
    position = 0
    previous_decoded = False

    for match in _ENCODED_WORD.finditer(text):
        literal = text[position : match.start()]
        decoded, warning = _decode_word(match, config)

        # RFC 2047 section 6.2: folding whitespace between adjacent words
        if literal and not (
            previous_decoded and decoded is not None and literal.isspace()
        ):
            pieces.append(literal)

        if decoded is None:
            pieces.append(match.group(0))
            warnings.append(warning)
            if config.log_decode_failures:
                logger.warning(
                    "ingestkit_address | code=%s | detail=%s",
                    warning.code.value,
                    warning.message,
                )
        else:
            pieces.append(decoded)
        previous_decoded = decoded is not None
        position = match.end()

    pieces.append(text[position:])
    return DecodeResult(text="".join(pieces), warnings=warnings)
