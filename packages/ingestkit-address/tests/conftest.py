"""Shared fixtures for ingestkit-address tests."""

from __future__ import annotations

import pytest

from ingestkit_address.archive import KeyedArchive
from ingestkit_address.models import Address


# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------

ENCODED_Q_NAME = "=?UTF-8?Q?Jos=C3=A9?="
PLAIN_NAME = "Plain Name"


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


@pytest.fixture
def encoded_address() -> Address:
    """Address whose display name is a Q-encoded word."""
    return Address.create(ENCODED_Q_NAME, "jose@example.com")


@pytest.fixture
def plain_address() -> Address:
    """Address with an ASCII display name."""
    return Address.create(PLAIN_NAME, "a@b.com")


@pytest.fixture
def empty_archive() -> KeyedArchive:
    return KeyedArchive()
