# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base abstract class for library pages."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Sequence
from typing import ClassVar

from mediatree.browser.exceptions import PageContractError
from mediatree.catalog.client import CatalogClient
from mediatree.models.elements import LibraryPageElement


class LibraryPage(ABC):
    """A stateless provider of one category of catalog content.

    Pages hold no per-request state, so a single instance serves any number
    of concurrent requests.
    """

    name: ClassVar[str]
    required_parameters: ClassVar[int] = 0

    def __init__(self, api: CatalogClient) -> None:
        self.api = api

    @abstractmethod
    def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        """Yield at most ``limit`` elements starting at ``offset``."""
        ...

    def check_parameters(self, parameters: Sequence[str]) -> None:
        """Ensure the route carries the parameters this page needs."""
        if len(parameters) < self.required_parameters:
            msg = (
                f"Page {self.name!r} needs {self.required_parameters} "
                f"parameter(s), got {len(parameters)}"
            )
            raise PageContractError(msg, page=self.name)


def page_slice(offset: int, limit: int) -> slice:
    """Slice for offset/limit pagination over a small local list."""
    return slice(max(offset, 0), max(offset, 0) + max(limit, 0))
