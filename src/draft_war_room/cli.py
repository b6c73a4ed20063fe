"""
Draft War Room CLI

Command-line interface for inspecting draft pick ownership
without running the API server.
"""

import argparse
import asyncio
import sys
import webbrowser
from pathlib import Path
from typing import Any

from draft_war_room.clients.sleeper import LeagueContext, SleeperClient
from draft_war_room.config import get_settings
from draft_war_room.models import DraftBoard, PickStatus, TeamPicks, TradeChain
from draft_war_room.services.draft_picks import DraftPickService
from draft_war_room.services.pick_attribution import PickAttribution
from draft_war_room.visualization import charts


class DraftWarRoom:
    """
    Main class for inspecting draft capital in a Sleeper league.

    Can be used as a library or via CLI.

    Example:
        async with DraftWarRoom() as war_room:
            await war_room.set_league("1127116641403351040")
            board = await war_room.get_board()
            attribution = await war_room.get_attribution()
            mine = attribution.team_picks(roster_id=4)
    """

    def __init__(self, season: int | None = None, draft_id: str | None = None):
        self.season = season or get_settings().default_season
        self.draft_id = draft_id
        self.client: SleeperClient | None = None
        self.ctx: LeagueContext | None = None

    async def __aenter__(self):
        self.client = SleeperClient()
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def get_user_leagues(
        self, username: str, season: int | None = None
    ) -> list[dict[str, Any]]:
        """Get all leagues for a user in a given season."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        user = await self.client.get_user(username)
        if not user:
            return []

        leagues = await self.client.get_user_leagues(user.user_id, season or self.season)
        return [league.model_dump() for league in leagues]

    async def set_league(self, league_id: str) -> dict[str, Any]:
        """Set the active league."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        self.ctx = await LeagueContext.create(self.client, league_id)
        return self.ctx.league.model_dump()

    def _require_league(self):
        """Ensure a league is set."""
        if not self.ctx:
            raise RuntimeError("No league set. Call set_league() first.")
        if not self.client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

    async def get_attribution(self) -> PickAttribution:
        """Build a fresh ownership snapshot for the league's draft."""
        self._require_league()
        service = DraftPickService(self.client, self.ctx)
        return await service.build_attribution(self.draft_id)

    async def get_board(self) -> DraftBoard:
        attribution = await self.get_attribution()
        return attribution.board()

    async def generate_board_html(self, output_path: str | None = None) -> str:
        """
        Generate an HTML page with the draft board and draft capital charts.

        Args:
            output_path: Optional path to save the HTML file

        Returns:
            HTML string
        """
        attribution = await self.get_attribution()
        name = self.ctx.league_name

        board_html = charts.draft_board_chart(
            attribution.board(), title=f"{name} - Draft Board"
        )
        capital_html = charts.pick_capital_chart(
            attribution.all_team_picks(), title=f"{name} - Draft Capital"
        )

        html = (
            "<!DOCTYPE html><html><head><meta charset='utf-8'>"
            f"<title>{name} - Draft War Room</title></head>"
            "<body style='background:#1a1a2e'>"
            f"{board_html}{capital_html}</body></html>"
        )

        if output_path:
            Path(output_path).write_text(html)
            print(f"📊 Draft board saved to: {output_path}")

        return html


def format_team_picks(team_picks: TeamPicks, attribution: PickAttribution) -> list[str]:
    """Render a team's owned and traded-away picks as text lines."""
    lines = [f"{team_picks.team_name} - Picks Owned ({len(team_picks.owned)})"]

    for pick in team_picks.owned:
        if pick.status == PickStatus.ACQUIRED:
            # Last hop names the team the pick actually came from
            sender = (
                pick.trade_chain[-1].from_owner
                if pick.trade_chain
                else pick.original_owner
            )
            note = f"from {attribution.team_name(sender)}"
        elif pick.status == PickStatus.REACQUIRED:
            note = "Original, reacquired"
        else:
            note = "Original"
        lines.append(f"  {pick.label} ({note})")

    if team_picks.sent:
        lines.append(f"{team_picks.team_name} - Picks Traded Away ({len(team_picks.sent)})")
        for pick in team_picks.sent:
            lines.append(
                f"  {pick.label} (to {attribution.team_name(pick.current_owner)})"
            )

    return lines


def format_chain(chain: TradeChain, attribution: PickAttribution) -> list[str]:
    """Render a pick's trade chain as text lines."""
    if not attribution.contains(chain.round, chain.slot):
        return [f"Round {chain.round} • Pick {chain.slot:02d} is not in this draft"]

    lines = [
        f"Round {chain.round} • Pick {chain.slot:02d} - "
        f"originally {attribution.team_name(chain.original_owner)}"
    ]
    if not chain.chain:
        lines.append("  Never traded")
    for step in chain.chain:
        lines.append(
            f"  {attribution.team_name(step.from_owner)} -> "
            f"{attribution.team_name(step.to_owner)}"
        )
    lines.append(f"  Current owner: {attribution.team_name(chain.final_owner)}")
    return lines


async def cli_main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Draft War Room - Sleeper draft pick ownership",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List leagues for a user
  war-room leagues michaelburps --season 2025

  # Show the draft board with current owners
  war-room board 1127116641403351040

  # Show picks owned and traded away by roster 4
  war-room picks 1127116641403351040 --roster 4

  # Show who has held round 2, slot 5
  war-room chain 1127116641403351040 2 5

  # Generate an HTML draft board
  war-room board-html 1127116641403351040 --output board.html --open
        """,
    )

    parser.add_argument(
        "--season",
        type=int,
        default=None,
        help="NFL season year (default: WAR_ROOM_DEFAULT_SEASON)",
    )
    parser.add_argument(
        "--draft-id",
        default=None,
        help="Draft ID (default: the league's current draft)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # leagues command
    leagues_parser = subparsers.add_parser("leagues", help="List user's leagues")
    leagues_parser.add_argument("username", help="Sleeper username")

    # board command
    board_parser = subparsers.add_parser("board", help="Show draft board ownership")
    board_parser.add_argument("league_id", help="Sleeper league ID")

    # picks command
    picks_parser = subparsers.add_parser("picks", help="Show picks owned and traded away")
    picks_parser.add_argument("league_id", help="Sleeper league ID")
    picks_parser.add_argument(
        "--roster", "-r",
        type=int,
        default=None,
        help="Roster ID (default: all teams)",
    )

    # chain command
    chain_parser = subparsers.add_parser("chain", help="Show a pick's trade chain")
    chain_parser.add_argument("league_id", help="Sleeper league ID")
    chain_parser.add_argument("round", type=int, help="Draft round")
    chain_parser.add_argument("slot", type=int, help="Draft slot")

    # trades command
    trades_parser = subparsers.add_parser("trades", help="List traded picks")
    trades_parser.add_argument("league_id", help="Sleeper league ID")

    # board-html command
    html_parser = subparsers.add_parser("board-html", help="Generate HTML draft board")
    html_parser.add_argument("league_id", help="Sleeper league ID")
    html_parser.add_argument(
        "--output", "-o", default="draft_board.html", help="Output file path"
    )
    html_parser.add_argument(
        "--open", action="store_true", help="Open draft board in browser"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    async with DraftWarRoom(season=args.season, draft_id=args.draft_id) as war_room:
        if args.command == "leagues":
            print(f"🔍 Looking up leagues for {args.username} ({war_room.season})...\n")
            leagues = await war_room.get_user_leagues(args.username)

            if not leagues:
                print(f"No leagues found for {war_room.season}.")
                return

            print(f"Found {len(leagues)} league(s):\n")
            for i, league in enumerate(leagues, 1):
                print(f"  {i}. {league['name']}")
                print(f"     ID: {league['league_id']}")
                print(f"     Teams: {league['total_rosters']}")
                print(f"     Draft: {league['draft_id'] or '-'}")
                print()
            return

        await war_room.set_league(args.league_id)
        league_name = war_room.ctx.league_name

        if args.command == "board":
            board = await war_room.get_board()
            print(f"📋 {league_name} - Draft Board ({board.traded_count} traded)\n")

            for round_num in range(1, board.total_rounds + 1):
                print(f"Round {round_num}")
                for cell in board.round_cells(round_num):
                    marker = f" (from {cell.original_team})" if cell.is_traded else ""
                    pick_no = f"#{cell.pick_no:<4}" if cell.pick_no else "     "
                    print(f"  {pick_no} Slot {cell.slot:02d}: {cell.current_team}{marker}")
                print()

        elif args.command == "picks":
            attribution = await war_room.get_attribution()
            print(f"📋 {league_name} - Draft Capital\n")

            if args.roster is not None:
                if args.roster not in attribution.roster_ids():
                    print(f"Roster {args.roster} not found.")
                    sys.exit(1)
                all_picks = [attribution.team_picks(args.roster)]
            else:
                all_picks = attribution.all_team_picks()

            for team_picks in all_picks:
                for line in format_team_picks(team_picks, attribution):
                    print(line)
                print()

        elif args.command == "chain":
            attribution = await war_room.get_attribution()
            chain = attribution.chain(args.round, args.slot)
            for line in format_chain(chain, attribution):
                print(line)
            if not attribution.contains(args.round, args.slot):
                sys.exit(1)

        elif args.command == "trades":
            attribution = await war_room.get_attribution()
            print(f"📋 {league_name} - Traded Picks\n")

            infos = attribution.traded_pick_info()
            if not infos:
                print("No traded picks found.")
                return

            for info in infos:
                pick = f"{info.pick:02d}" if info.pick else "??"
                print(f"  Round {info.round} • Pick {pick}: {info.from_team} -> {info.to_team}")

        elif args.command == "board-html":
            print(f"📊 Generating draft board for {league_name}...")
            await war_room.generate_board_html(args.output)

            if args.open:
                output_path = Path(args.output).absolute()
                webbrowser.open(f"file://{output_path}")
                print(f"🌐 Opened in browser: {output_path}")


def run_cli():
    """Entry point for CLI."""
    asyncio.run(cli_main())


if __name__ == "__main__":
    run_cli()
