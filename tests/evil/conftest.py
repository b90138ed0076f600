"""Shared fixtures for the villain test-suite."""

import pytest
from unittest.mock import create_autospec

from evil import EvilConfig, ListingStore, SuperVillain

from villain_names import PRIMARY_FIRST_NAME, PRIMARY_LAST_NAME


@pytest.fixture
def listing_store():
    """A ListingStore double; tests configure open/read_all per case."""
    return create_autospec(ListingStore, instance=True)


@pytest.fixture
def villain(listing_store):
    """Lex Luthor, no sidekick, fast planning."""
    return SuperVillain(
        first_name=PRIMARY_FIRST_NAME,
        last_name=PRIMARY_LAST_NAME,
        listing_store=listing_store,
        config=EvilConfig(plan_delay_seconds=0.1),
    )
