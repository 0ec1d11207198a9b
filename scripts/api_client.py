"""Lightweight REST client for the squadgraph API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the squadgraph REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--season", type=int, help="Fetch the graph for a season")
    parser.add_argument("--mode", choices=["snapshot", "cumulative"], default="snapshot")
    parser.add_argument("--team", help="Restrict the season graph to one team")
    parser.add_argument("--min-weight", type=int, default=None, help="Minimum edge weight (server default if omitted)")
    parser.add_argument("--max-nodes", type=int, default=None, help="Keep only the N best-connected players")
    parser.add_argument("--player", help="Fetch a player's attributes and exit")
    parser.add_argument("--stats", action="store_true", help="Print season statistics and exit")
    parser.add_argument("--export-path", type=Path, help="Download statistics CSV to this path")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.player:
            resp = client.get(f"/players/{args.player}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.player} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.stats or args.export_path:
            if args.export_path:
                resp = client.get("/stats/export.csv")
                resp.raise_for_status()
                args.export_path.write_text(resp.text)
                print(f"CSV export saved to {args.export_path}")
            else:
                resp = client.get("/stats")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            return

        resp = client.get("/seasons")
        resp.raise_for_status()
        overview = resp.json()
        if not overview["has_data"]:
            raise SystemExit("server has no roster data loaded")
        season = args.season or overview["seasons"][-1]

        params: dict[str, object] = {"mode": args.mode}
        if args.min_weight is not None:
            params["min_weight"] = args.min_weight
        if args.team:
            params["team"] = args.team
        if args.max_nodes is not None:
            params["max_nodes"] = args.max_nodes
        resp = client.get(f"/graph/{season}", params=params)
        if resp.status_code == 404:
            raise SystemExit(resp.json().get("detail", "not found"))
        resp.raise_for_status()
        payload = resp.json()
        print(f"Season {season} | {args.mode} | Nodes: {payload['node_count']} | Edges: {payload['edge_count']}")
        for node in payload["nodes"][:10]:
            print(f"  {node['name']}: {node['degree']} teammates")


if __name__ == "__main__":
    main()
