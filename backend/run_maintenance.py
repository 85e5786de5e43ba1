#!/usr/bin/env python
"""
Discover maintenance tasks.

Usage:
    python run_maintenance.py purge-skips          # Delete expired skip entries
    python run_maintenance.py quota <user-id>      # Show a user's swipe status

Uses the same service wiring as the API, so it talks to Supabase when
SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are set.
"""

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.table import Table

from api.config import get_settings
from api.dependencies import get_container
from modules.exclusions.exceptions import ExclusionStoreError

console = Console()


async def purge_skips() -> int:
    deleted = await get_container().exclusions.purge_expired()
    console.print(f"[green]✓[/green] Deleted {deleted} expired skip(s)")
    return deleted


async def show_quota(user_id: str) -> None:
    status = await get_container().quota.get_status(user_id)

    table = Table(title=f"Swipe status for {user_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Swipes used", str(status.swipes_used))
    table.add_row("Daily limit", str(status.daily_limit))
    table.add_row("Remaining", "unlimited" if status.is_premium else str(status.remaining_swipes))
    table.add_row("Can swipe", "[green]yes[/green]" if status.can_swipe else "[red]no[/red]")
    table.add_row("Premium", "yes" if status.is_premium else "no")
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="DramaDeck discover maintenance")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("purge-skips", help="Delete skip entries whose window has ended")
    quota_parser = subparsers.add_parser("quota", help="Show today's swipe status for a user")
    quota_parser.add_argument("user_id", help="Supabase user ID")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level.upper())

    if args.command == "purge-skips":
        try:
            asyncio.run(purge_skips())
        except ExclusionStoreError as e:
            console.print(f"[red]✗[/red] {e.message}")
            sys.exit(1)
    elif args.command == "quota":
        asyncio.run(show_quota(args.user_id))


if __name__ == "__main__":
    main()
