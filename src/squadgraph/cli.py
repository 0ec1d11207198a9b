"""Command-line interface for downloading rosters and analysing co-play graphs."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from squadgraph.config import get_team
from squadgraph.config_loader import Settings
from squadgraph.graph import EvolutionGraph, EvolutionGraphBuilder, format_summary
from squadgraph.graph.export import (
    export_evolution_stats,
    export_roster_changes,
    export_top_connected,
)
from squadgraph.ingest import TransfermarktSource, download_rosters, load_folder


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Temporal co-play graphs from football rosters")
    parser.add_argument("--config", type=Path, default=None, help="Load settings JSON")
    parser.add_argument("--data-dir", type=Path, default=None, help="Folder of roster CSVs")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    download = subparsers.add_parser("download", help="Download squad pages to roster CSVs")
    download.add_argument("--teams", nargs="*", default=None, help="Team names to download")
    download.add_argument("--start", type=int, default=None, help="First season to download")
    download.add_argument("--end", type=int, default=None, help="Last season to download")

    subparsers.add_parser("summary", help="Print the season-by-season evolution table")

    export = subparsers.add_parser("export", help="Write statistics CSVs to the output folder")
    export.add_argument("--output-dir", type=Path, default=None, help="Destination folder")
    export.add_argument("--top", type=int, default=5, help="Players per season in top_players.csv")

    serve = subparsers.add_parser("serve", help="Serve the read-only graph API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def _load(settings: Settings) -> EvolutionGraph:
    builder = EvolutionGraphBuilder()
    report = load_folder(builder, settings.data_dir)
    print(f"Loaded {len(report.loaded)} team-season files from {settings.data_dir}")
    if report.skipped:
        print(f"Skipped files with unrecognised names: {', '.join(report.skipped)}")
    if report.failed:
        print(f"Unreadable files: {', '.join(report.failed)}")
    return builder.build()


def _no_data(settings: Settings) -> int:
    print("No data found!")
    print(f"Run 'squadgraph download' first, or make sure CSV files exist in: {settings.data_dir}")
    return 1


def _download(args: argparse.Namespace, settings: Settings) -> int:
    names = args.teams or settings.teams
    try:
        teams = [get_team(name) for name in names]
    except KeyError as exc:
        print(exc.args[0])
        return 2
    if args.start is not None:
        settings.start_season = args.start
    if args.end is not None:
        settings.end_season = args.end
    with TransfermarktSource() as source:
        report = download_rosters(source, teams, settings.seasons, settings.data_dir)
    print(f"Saved {len(report.saved)} roster files to {settings.data_dir}")
    if report.failed:
        preview = ", ".join(f"{key.team} {key.season}" for key in report.failed[:5])
        more = len(report.failed) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Failed downloads: {preview}{suffix}")
    return 0


def _export(args: argparse.Namespace, settings: Settings, graph: EvolutionGraph) -> int:
    output_dir = args.output_dir or settings.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    outputs = {
        "evolution_stats.csv": export_evolution_stats(graph),
        "top_players.csv": export_top_connected(graph, max(1, args.top)),
        "roster_changes.csv": export_roster_changes(graph),
    }
    for filename, content in outputs.items():
        path = output_dir / filename
        path.write_text(content, encoding="utf-8")
        print(f"Wrote {path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env(args.config)
    if args.data_dir:
        settings.data_dir = args.data_dir

    if args.command == "download":
        return _download(args, settings)

    if args.command == "serve":
        import uvicorn

        from squadgraph.api import create_app, load_graph

        app = create_app(load_graph(settings.data_dir), settings=settings)
        uvicorn.run(app, host=args.host, port=args.port)
        return 0

    graph = _load(settings)
    if not graph.has_data:
        return _no_data(settings)

    if args.command == "summary":
        print(format_summary(graph))
        return 0
    return _export(args, settings, graph)


if __name__ == "__main__":
    raise SystemExit(main())
