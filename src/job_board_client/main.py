"""Command-line entry point for the job board client."""

import argparse
import asyncio
import getpass
import json
import logging
import sys
from collections.abc import Callable, Sequence

import httpx
from pydantic import BaseModel

from job_board_client.app_logging import configure_logging
from job_board_client.containers import AppContainer, build_container
from job_board_client.errors import JobBoardError

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``job-board`` command."""
    parser = argparse.ArgumentParser(
        prog="job-board", description="Job board API client."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Log in and store the session")
    login.add_argument("email")
    login.add_argument("--password", help="Password (prompted when omitted)")

    commands.add_parser("logout", help="Clear the stored session")
    commands.add_parser("whoami", help="Show the stored user profile")
    commands.add_parser("faqs", help="List FAQs")

    interviews = commands.add_parser("interviews", help="List interviews")
    window = interviews.add_mutually_exclusive_group()
    window.add_argument("--upcoming", action="store_true")
    window.add_argument("--past", action="store_true")
    window.add_argument("--today", action="store_true")

    notifications = commands.add_parser("notifications", help="List notifications")
    notifications.add_argument(
        "--unread-count", action="store_true", help="Only print the unread count"
    )
    return parser


async def run_command(args: argparse.Namespace, container: AppContainer) -> object:
    """Execute a parsed command and return its printable result."""
    if args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        response = await container.auth_service.login(args.email, password)
        return {"userId": response.user_id, "role": response.role}
    if args.command == "logout":
        await container.auth_service.logout()
        return {"status": "logged out"}
    if args.command == "whoami":
        return container.session_store.get_user()
    if args.command == "faqs":
        return await container.faq_service.get_all_faqs()
    if args.command == "interviews":
        service = container.interview_service
        if args.upcoming:
            return await service.get_upcoming_interviews()
        if args.past:
            return await service.get_past_interviews()
        if args.today:
            return await service.get_todays_interviews()
        return await service.get_all_interviews()
    if args.command == "notifications":
        if args.unread_count:
            return {"count": await container.notification_service.get_unread_count()}
        return await container.notification_service.get_all_notifications()
    raise ValueError(f"Unknown command: {args.command}")


def main(
    argv: Sequence[str] | None = None,
    container_factory: Callable[[], AppContainer] = build_container,
) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    container = container_factory()

    async def _run() -> object:
        try:
            return await run_command(args, container)
        finally:
            await container.close_resources()

    try:
        result = asyncio.run(_run())
    except (JobBoardError, httpx.HTTPError) as exc:
        _logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(_to_jsonable(result), indent=2))
    return 0


def _to_jsonable(value: object) -> object:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


if __name__ == "__main__":
    sys.exit(main())
