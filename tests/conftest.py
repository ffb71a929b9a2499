from __future__ import annotations

import pytest

from tests.support import FakeHttpClient, build_fixture_site, png_bytes


@pytest.fixture
def fixture_site() -> FakeHttpClient:
    """Hub page, club pages and kit images served from tests/fixtures/pages."""
    return build_fixture_site()


@pytest.fixture
def make_client():
    return FakeHttpClient


@pytest.fixture
def make_png():
    return png_bytes
