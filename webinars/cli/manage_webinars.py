#!/usr/bin/env python3
"""
CLI tool to manage webinars.

Usage:
    python -m webinars.cli.manage_webinars create --id ID --organizer USER --title TITLE \
        --start 2024-01-01T00:00:00+00:00 --end 2024-01-01T01:00:00+00:00 --seats 100
    python -m webinars.cli.manage_webinars show --id ID
    python -m webinars.cli.manage_webinars change-seats --id ID --user USER --seats 200

Examples:
    # Create a webinar organized by alice
    python -m webinars.cli.manage_webinars create --id webinar-id --organizer alice \
        --title "Webinar title" --start 2024-01-01T00:00:00Z --end 2024-01-01T01:00:00Z --seats 100

    # Raise it to 200 seats as alice
    python -m webinars.cli.manage_webinars change-seats --id webinar-id --user alice --seats 200
"""
import asyncio
import argparse
import sys
from datetime import datetime
from typing import Optional

from webinars.application.change_seats import ChangeSeats
from webinars.config import settings
from webinars.db import connection
from webinars.domain.entities import DomainError, User, Webinar
from webinars.domain.value_objects import UserId, WebinarId
from webinars.repositories.webinar_repository import WebinarRepository


def _parse_datetime(value: str) -> datetime:
    """argparse type for ISO 8601 timestamps (trailing Z accepted)"""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid ISO 8601 timestamp: {value}")


def _webinar_id(value: str) -> str:
    """argparse type for webinar ids (blank rejected)"""
    try:
        return WebinarId(value).value
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _user_id(value: str) -> str:
    """argparse type for user ids (blank rejected)"""
    try:
        return UserId(value).value
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _seat_count(value: str) -> int:
    """argparse type for seat counts (integer >= 0)"""
    try:
        seats = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid seat count: {value}")
    if seats < 0:
        raise argparse.ArgumentTypeError(f"Seat count cannot be negative: {seats}")
    return seats


def _print_webinar(webinar: Webinar):
    print(f"  ID: {webinar.id}")
    print(f"  Organizer: {webinar.organizer_id}")
    print(f"  Title: {webinar.title}")
    print(f"  Start: {webinar.start_date.isoformat()}")
    print(f"  End: {webinar.end_date.isoformat()}")
    print(f"  Seats: {webinar.seats}")


async def create_webinar(webinar: Webinar, database_url: Optional[str] = None) -> int:
    """Create a webinar"""
    await connection.init_db(database_url or settings.database_url)
    try:
        async with connection.async_session_maker() as session:
            await WebinarRepository(session).create(webinar)
            await session.commit()

        print("[SUCCESS] Webinar created")
        _print_webinar(webinar)
        return 0

    except DomainError as e:
        print(f"[ERROR] {e}")
        return 1
    finally:
        await connection.close_db()


async def show_webinar(webinar_id: str, database_url: Optional[str] = None) -> int:
    """Show a webinar"""
    await connection.init_db(database_url or settings.database_url)
    try:
        async with connection.async_session_maker() as session:
            webinar = await WebinarRepository(session).find_by_id(webinar_id)

        if webinar is None:
            print(f"[ERROR] Webinar not found: {webinar_id}")
            return 1

        _print_webinar(webinar)
        return 0
    finally:
        await connection.close_db()


async def change_seats(
    webinar_id: str,
    user_id: str,
    seats: int,
    database_url: Optional[str] = None
) -> int:
    """Change the seat count of a webinar on behalf of a user"""
    await connection.init_db(database_url or settings.database_url)
    try:
        async with connection.async_session_maker() as session:
            webinar = await ChangeSeats(WebinarRepository(session)).execute(
                user=User(id=user_id),
                webinar_id=webinar_id,
                seats=seats,
            )
            await session.commit()

        print(f"[SUCCESS] Webinar {webinar_id} now has {webinar.seats} seats")
        return 0

    except DomainError as e:
        print(f"[ERROR] {e}")
        return 1
    finally:
        await connection.close_db()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Manage webinars',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--database-url', help='Database URL (defaults to DATABASE_URL)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Create webinar command
    create_parser = subparsers.add_parser('create', help='Create a new webinar')
    create_parser.add_argument('--id', required=True, type=_webinar_id, help='Webinar ID')
    create_parser.add_argument('--organizer', required=True, type=_user_id, help='Organizer user ID')
    create_parser.add_argument('--title', required=True, help='Webinar title')
    create_parser.add_argument('--start', required=True, type=_parse_datetime, help='Start date (ISO 8601)')
    create_parser.add_argument('--end', required=True, type=_parse_datetime, help='End date (ISO 8601)')
    create_parser.add_argument('--seats', required=True, type=_seat_count, help='Number of seats')

    # Show webinar command
    show_parser = subparsers.add_parser('show', help='Show a webinar')
    show_parser.add_argument('--id', required=True, type=_webinar_id, help='Webinar ID')

    # Change seats command
    seats_parser = subparsers.add_parser('change-seats', help='Change the number of seats')
    seats_parser.add_argument('--id', required=True, type=_webinar_id, help='Webinar ID')
    seats_parser.add_argument('--user', required=True, type=_user_id, help='ID of the user making the change')
    seats_parser.add_argument('--seats', required=True, type=_seat_count, help='New number of seats')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    if args.command == 'create':
        webinar = Webinar(
            id=args.id,
            organizer_id=args.organizer,
            title=args.title,
            start_date=args.start,
            end_date=args.end,
            seats=args.seats,
        )
        exit_code = asyncio.run(create_webinar(webinar, args.database_url))
    elif args.command == 'show':
        exit_code = asyncio.run(show_webinar(args.id, args.database_url))
    else:
        exit_code = asyncio.run(
            change_seats(args.id, args.user, args.seats, args.database_url)
        )

    sys.exit(exit_code)


if __name__ == '__main__':
    main()
