"""Mount the home page once against a running API and print what it renders."""

from __future__ import annotations

import argparse
import asyncio
import logging
import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from greeting_app.config import get_settings  # noqa: E402
from greeting_app.infrastructure.home_api_client import HomeApiClient  # noqa: E402
from greeting_app.interfaces.web import Failed, HomePage  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the page preview."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Load the home page from the greeting API and print it.",
    )
    parser.add_argument(
        "--api-url",
        default=settings.api_url,
        help=f"Base URL of the API (default: {settings.api_url})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every state transition as it happens.",
    )
    return parser.parse_args()


async def show_home(api_url: str, *, verbose: bool = False) -> HomePage:
    """Mount the page, wait for the fetch to settle and return the page."""

    async with HomeApiClient(api_url) as client:
        page = HomePage(client)
        if verbose:
            page.subscribe(lambda state: print(f"-> {type(state).__name__}", file=sys.stderr))
        async with page.mounted() as task:
            await task
            for item in page.render():
                print(item.text)
        return page


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=get_settings().log_level)

    page = asyncio.run(show_home(args.api_url, verbose=args.verbose))
    if isinstance(page.state, Failed):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
