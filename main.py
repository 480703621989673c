# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Main entry point: browse a catalog server from the command line."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mediatree.browser import (
    BrowsingEngine,
    LibraryResult,
    LibrarySessionCallback,
    MediaItem,
    PageRegistry,
)
from mediatree.catalog import CatalogClient, SessionManager
from mediatree.config import MediaTreeConfig

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Browse a media catalog as a tree.")
    parser.add_argument("--config", type=Path, help="TOML or JSON config file")
    parser.add_argument("--node", help="Node id to list (defaults to the root)")
    parser.add_argument("--search", help="Search query instead of browsing")
    parser.add_argument("--page", type=int, default=0, help="Page index")
    parser.add_argument("--page-size", type=int, default=50, help="Page size")
    return parser.parse_args(argv)


def print_nodes(result: LibraryResult[list[MediaItem]]) -> None:
    """Print a node listing."""
    if not result.is_success or result.value is None:
        print(f"Request failed: {result.code.name}")
        return

    for item in result.value:
        kind = "dir " if item.browsable else "play"
        group = f"[{item.group_title}] " if item.group_title else ""
        print(f"{kind}  {group}{item.title}  ->  {item.media_id}")


async def run(args: argparse.Namespace, config: MediaTreeConfig) -> int:
    """Build the browser and serve one request."""
    async with SessionManager(config.http) as session_manager:
        api = CatalogClient(config.server, session_manager)
        engine = BrowsingEngine(PageRegistry.default(api))
        callback = LibrarySessionCallback(
            engine, api, max_page_size=config.browser.max_page_size
        )

        if args.search is not None:
            result = await callback.on_get_search_result(
                args.search, args.page, args.page_size
            )
        else:
            node_id = args.node
            if node_id is None:
                root = await callback.on_get_library_root()
                if not root.is_success or root.value is None:
                    print(f"Root unavailable: {root.code.name}")
                    return 1
                node_id = root.value.media_id
            result = await callback.on_get_children(node_id, args.page, args.page_size)

        print_nodes(result)
        return 0 if result.is_success else 1


def main() -> None:
    """Execute main function to run the mediatree browser."""
    args = parse_args()
    config = MediaTreeConfig()
    if args.config is not None:
        config = MediaTreeConfig.from_file(args.config)

    logging.basicConfig(
        format="%(levelname)s:%(name)s:%(message)s", level=config.log_level
    )

    sys.exit(asyncio.run(run(args, config)))


if __name__ == "__main__":
    main()
