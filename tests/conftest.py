"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from ryandata_address_metadata.service import AddressService
from tests.fakes import SAMPLE_RECORDS, FakeClient

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def fake_client() -> FakeClient:
    """Client serving the sample records."""
    return FakeClient(SAMPLE_RECORDS)


@pytest.fixture
def service(fake_client: FakeClient) -> AddressService:
    """Service backed by the sample records and the default validators."""
    return AddressService(client=fake_client)
