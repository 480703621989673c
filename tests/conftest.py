# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Global pytest configuration for mediatree tests."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from mediatree.catalog.client import CatalogClient
from mediatree.models.catalog import CatalogItem, CatalogItemsResult

# Configure pytest-asyncio for all async tests
pytest_plugins = ["pytest_asyncio"]


def pytest_configure(config):
    """Configure pytest with asyncio markers."""
    config.addinivalue_line("markers", "asyncio: mark test as async")


def make_record(item_id: str, name: str | None = None, **fields: Any) -> CatalogItem:
    """Build a catalog record from PascalCase API fields."""
    data: dict[str, Any] = {"Id": item_id, "Name": name or item_id.title()}
    data.update(fields)
    return CatalogItem.from_api(data)


def make_result(*items: CatalogItem) -> CatalogItemsResult:
    """Wrap records in a result page."""
    return CatalogItemsResult(items=list(items), total_record_count=len(items))


@pytest.fixture
def record_factory() -> Callable[..., CatalogItem]:
    """Factory for catalog records."""
    return make_record


@pytest.fixture
def mock_api() -> Mock:
    """Create a mock catalog client with no records."""
    api = Mock(spec=CatalogClient)
    api.get_user_views = AsyncMock(return_value=make_result())
    api.get_items = AsyncMock(return_value=make_result())
    api.get_image_url = Mock(
        side_effect=lambda item_id, image_type, tag: (
            f"https://media.test/Items/{item_id}/Images/{image_type}?tag={tag}"
        )
    )
    api.get_universal_audio_url = Mock(
        side_effect=lambda item_id: f"https://media.test/Audio/{item_id}/universal"
    )
    return api


@pytest.fixture
def result_factory() -> Callable[..., CatalogItemsResult]:
    """Factory for result pages."""
    return make_result
