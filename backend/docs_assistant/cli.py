"""Command-line entry point for maintenance jobs.

    docs-assistant seed-faq
    docs-assistant index-docs
    docs-assistant changelog python-agents
"""

import argparse
import asyncio
import logging
import sys

from docs_assistant.domain.entities import SDKName
from docs_assistant.domain.exceptions import ChangelogUnavailableError
from docs_assistant.infrastructure.database import engine
from docs_assistant.infrastructure.database.bootstrap import init_database
from docs_assistant.infrastructure.dependencies import (
    build_docs_crawler,
    get_changelog_service,
    seed_faq,
)
from docs_assistant.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger("docs_assistant.cli")


async def _seed_faq() -> int:
    await init_database()
    try:
        created = await seed_faq()
    finally:
        await engine.dispose()
    print(f"Seeded {created} FAQ entries")
    return 0


async def _index_docs() -> int:
    await init_database()
    try:
        report = await build_docs_crawler().run()
    finally:
        await engine.dispose()
    print(
        f"Indexed {report.indexed} documents "
        f"({len(report.failed)} failed) in {report.duration_seconds}s"
    )
    return 1 if report.indexed == 0 and report.failed else 0


async def _changelog(sdk: str) -> int:
    try:
        changelog = await get_changelog_service().fetch(SDKName.from_identifier(sdk))
    except ChangelogUnavailableError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(f"# {changelog.sdk.value} ({changelog.link})\n")
    print(changelog.content)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-assistant",
        description="Documentation assistant maintenance commands",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("seed-faq", help="Insert curated FAQ entries from the seed file")
    commands.add_parser("index-docs", help="Clear the index and re-crawl the documentation site")

    changelog = commands.add_parser("changelog", help="Print recent release notes for an SDK")
    changelog.add_argument("sdk", choices=[sdk.slug for sdk in SDKName])

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    if args.command == "seed-faq":
        return asyncio.run(_seed_faq())
    if args.command == "index-docs":
        return asyncio.run(_index_docs())
    return asyncio.run(_changelog(args.sdk))


if __name__ == "__main__":
    sys.exit(main())
