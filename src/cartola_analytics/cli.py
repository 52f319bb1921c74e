"""
Cartola Analytics CLI

Command-line interface for analyzing Cartola FC teams
without running the API server.
"""

import argparse
import asyncio
import json
import sys
import webbrowser
from pathlib import Path
from typing import Any

from cartola_analytics.clients.cartola import CartolaClient, CartolaClubDirectory
from cartola_analytics.clients.store import ClubDirectory, SnapshotStore
from cartola_analytics.config import Settings, get_settings
from cartola_analytics.errors import CartolaAnalyticsError
from cartola_analytics.services.dashboard import DashboardService
from cartola_analytics.services.drilldown import DrilldownService
from cartola_analytics.visualization import charts


class CartolaAnalytics:
    """
    Main class for analyzing Cartola FC teams.

    Can be used as a library or via CLI.

    Example:
        async with CartolaAnalytics(data_file="snapshot.json") as analytics:
            dashboard = await analytics.get_dashboard(1234567)
            print(dashboard["totals"]["points_total"])
            html = await analytics.generate_dashboard(1234567, "dashboard.html")
    """

    def __init__(self, data_file: str | Path | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.data_file = data_file or self.settings.data_file
        self.client: CartolaClient | None = None
        self.store: SnapshotStore | None = None
        self.clubs: ClubDirectory | None = None

    async def __aenter__(self):
        self.store = SnapshotStore.from_file(self.data_file) if self.data_file else SnapshotStore()
        self.client = CartolaClient(self.settings)
        await self.client.__aenter__()
        if self.settings.club_source == "cartola":
            self.clubs = CartolaClubDirectory(self.client)
        else:
            self.clubs = self.store
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    def _require_store(self):
        """Ensure the data store is loaded."""
        if not self.store or not self.clubs:
            raise RuntimeError("Store not initialized. Use 'async with' context.")

    async def get_dashboard(self, team_id: int, is_home: bool | None = None) -> dict[str, Any]:
        """Get the full dashboard payload for a team."""
        self._require_store()
        service = DashboardService.from_settings(self.store, self.clubs, self.settings)
        dashboard = await service.get_dashboard(team_id, is_home)
        return dashboard.model_dump()

    async def get_drilldown(
        self, team_id: int, kind: str = "offense", pos: str = "TOT", is_home: bool | None = None
    ) -> dict[str, Any]:
        """Get the picks behind an offensive or clean-sheet card."""
        self._require_store()
        service = DrilldownService(self.store, self.clubs)
        if kind == "sg":
            result = await service.clean_sheets(team_id, pos, is_home)
        else:
            result = await service.offense(team_id, pos, is_home)
        return result.model_dump()

    async def search_teams(self, query: str) -> list[dict[str, Any]]:
        """Search teams on Cartola."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")
        teams = await self.client.search_teams(query)
        return [t.model_dump() for t in teams]

    async def generate_dashboard(
        self, team_id: int, output_path: str | None = None, is_home: bool | None = None
    ) -> str:
        """
        Generate a full HTML dashboard.

        Args:
            team_id: Cartola team id
            output_path: Optional path to save the HTML file
            is_home: Restrict pick metrics to home or away games

        Returns:
            HTML string of the dashboard
        """
        self._require_store()
        service = DashboardService.from_settings(self.store, self.clubs, self.settings)
        dashboard = await service.get_dashboard(team_id, is_home)
        html = charts.generate_dashboard(dashboard)

        if output_path:
            Path(output_path).write_text(html, encoding="utf-8")
            print(f"📊 Dashboard saved to: {output_path}")

        return html


def _fmt(value: float | None, digits: int = 2) -> str:
    return "—" if value is None else f"{value:.{digits}f}"


def _print_dashboard(dashboard: dict[str, Any]) -> None:
    team = dashboard["team"]
    totals = dashboard["totals"]
    metrics = dashboard["metrics"]

    print(f"📊 {team['name'] or dashboard['team_id']}\n")
    print(f"Total points: {_fmt(totals['points_total'])}")
    print(f"Asset value:  {_fmt(totals['asset_value_current'])}\n")

    print(f"{'Pos':<5} {'N':<5} {'Avg':<8}")
    print("-" * 20)
    for row in metrics["avg_points_by_position"]:
        print(f"{row['position']:<5} {row['n']:<5} {_fmt(row['avg_points']):<8}")

    for title, table in (
        ("Clean sheets", metrics["sg_efficiency"]),
        ("Goals / assists", metrics["offensive_efficiency"]),
    ):
        print(f"\n{title}")
        for row in [*table["by_position"], table["total"]]:
            rate = None if row["rate"] is None else row["rate"] * 100
            print(f"  {row['position']:<5} {row['ok']:>3}/{row['n']:<4} {_fmt(rate, 1)}%")

    print("\nPoints by scout")
    for row in metrics["points_by_scout"]:
        print(f"  {row['scout']:<4} {row['points']:>8.2f}")

    print("\nStar players")
    for star in metrics["star_players"]:
        name = star["player_name"] or "—"
        print(f"  {star['position']:<5} {name:<25} {_fmt(star['total_points'])}")


async def cli_main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Cartola FC Team Analytics CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show a team's dashboard from a snapshot
  cartola-cli --data snapshot.json dashboard 1234567

  # Only home games, as JSON
  cartola-cli --data snapshot.json dashboard 1234567 --home --json

  # Offensive drill-down for forwards
  cartola-cli --data snapshot.json drilldown 1234567 --kind offense --pos ATA

  # Search teams on Cartola
  cartola-cli search "galo doido"

  # Generate HTML dashboard
  cartola-cli --data snapshot.json chart 1234567 --output dashboard.html --open
        """,
    )

    parser.add_argument(
        "--data",
        default=None,
        help="Snapshot JSON file (default: CARTOLA_DATA_FILE)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    venue = argparse.ArgumentParser(add_help=False)
    venue_group = venue.add_mutually_exclusive_group()
    venue_group.add_argument(
        "--home", dest="is_home", action="store_const", const=True, help="Home games only"
    )
    venue_group.add_argument(
        "--away", dest="is_home", action="store_const", const=False, help="Away games only"
    )

    # dashboard command
    dashboard_parser = subparsers.add_parser(
        "dashboard", parents=[venue], help="Show a team's dashboard"
    )
    dashboard_parser.add_argument("team_id", help="Cartola team ID")
    dashboard_parser.add_argument("--json", action="store_true", help="Print raw JSON")

    # drilldown command
    drilldown_parser = subparsers.add_parser(
        "drilldown", parents=[venue], help="List the picks behind an efficiency card"
    )
    drilldown_parser.add_argument("team_id", help="Cartola team ID")
    drilldown_parser.add_argument("--kind", choices=["offense", "sg"], default="offense")
    drilldown_parser.add_argument("--pos", default="TOT", help="Position label or TOT")

    # search command
    search_parser = subparsers.add_parser("search", help="Search teams on Cartola")
    search_parser.add_argument("query", help="Team name")

    # chart command
    chart_parser = subparsers.add_parser(
        "chart", parents=[venue], help="Generate HTML dashboard"
    )
    chart_parser.add_argument("team_id", help="Cartola team ID")
    chart_parser.add_argument(
        "--output", "-o", default="dashboard.html", help="Output file path"
    )
    chart_parser.add_argument(
        "--open", action="store_true", help="Open dashboard in browser"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        async with CartolaAnalytics(data_file=args.data) as analytics:
            if args.command == "dashboard":
                dashboard = await analytics.get_dashboard(args.team_id, args.is_home)
                if args.json:
                    print(json.dumps(dashboard, indent=2, ensure_ascii=False))
                else:
                    _print_dashboard(dashboard)

            elif args.command == "drilldown":
                result = await analytics.get_drilldown(
                    args.team_id, args.kind, args.pos, args.is_home
                )
                if not result["rows"]:
                    print("No picks found.")
                    return

                print(f"{'Round':<6} {'Player':<25} {'Club':<20} {'Pts':<8} {'OK':<3}")
                print("-" * 65)
                for row in result["rows"]:
                    print(
                        f"{row['round'] or '—':<6} {row['player_name']:<25} "
                        f"{row['club_name']:<20} {_fmt(row['points']):<8} "
                        f"{'✓' if row['ok'] else '·':<3}"
                    )

            elif args.command == "search":
                print(f"🔍 Searching teams for {args.query!r}...\n")
                teams = await analytics.search_teams(args.query)

                if not teams:
                    print("No teams found.")
                    return

                for i, team in enumerate(teams, 1):
                    print(f"  {i}. {team['name']} ({team['slug']})")
                    print(f"     ID: {team['id']}")
                    if team["cartoleiro"]:
                        print(f"     Cartoleiro: {team['cartoleiro']}")
                    print()

            elif args.command == "chart":
                print(f"📊 Generating dashboard for team {args.team_id}...")
                await analytics.generate_dashboard(args.team_id, args.output, args.is_home)

                if args.open:
                    output_path = Path(args.output).absolute()
                    webbrowser.open(f"file://{output_path}")
                    print(f"🌐 Opened in browser: {output_path}")

    except CartolaAnalyticsError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        sys.exit(2)


def run_cli():
    """Entry point for CLI."""
    asyncio.run(cli_main())


if __name__ == "__main__":
    run_cli()
