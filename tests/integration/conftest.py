"""Shared fixtures for integration tests."""

import pytest

from entrez_records.data_sources.entrez import EntrezClient


@pytest.fixture
async def entrez_client():
    """Create and tear down an EntrezClient using settings from the environment."""
    c = EntrezClient()
    yield c
    await c.close()
