import argparse
import asyncio
import sys

import uvicorn

from catharsis import load_config
from catharsis.domain.daily_word import word_for_date
from catharsis.main import create_app
from catharsis.services import daily_task
from catharsis.services.ticket_store import TicketStore


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catharsis", description="Daily word tickets")
    parser.add_argument("--database-url", type=str, default=None, help="Database URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", type=str, default=load_config.host, help="Bind address")
    serve.add_argument("--port", type=int, default=load_config.port, help="Port")

    word = subparsers.add_parser("word", help="Print the word for a date")
    word.add_argument("--date", type=str, default=None, help="YYYY-MM-DD, defaults to today (UTC)")

    subparsers.add_parser("stats", help="Print ticket count and current streak")

    reset = subparsers.add_parser("reset", help="Delete every ticket")
    reset.add_argument("--yes", action="store_true", help="Confirm deleting every ticket")
    return parser


async def print_stats(database_url: str) -> None:
    async with TicketStore(database_url) as store:
        stats = await daily_task.get_stats(store, daily_task.today_iso())
    print(f"tickets: {stats.total_tickets}")
    print(f"streak: {stats.streak}")


async def reset_tickets(database_url: str) -> None:
    async with TicketStore(database_url) as store:
        deleted = await daily_task.reset(store)
    print(f"deleted {deleted} tickets")


def main(argv=None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    database_url = args.database_url or load_config.database_url

    if args.command == "serve":
        uvicorn.run(create_app(database_url=database_url), host=args.host, port=args.port)
    elif args.command == "word":
        try:
            print(word_for_date(args.date or daily_task.today_iso()))
        except ValueError as e:
            parser.error(str(e))
    elif args.command == "stats":
        asyncio.run(print_stats(database_url))
    elif args.command == "reset":
        if not args.yes:
            print("Refusing to delete every ticket without --yes", file=sys.stderr)
            return 1
        asyncio.run(reset_tickets(database_url))
    return 0


if __name__ == "__main__":
    sys.exit(main())
