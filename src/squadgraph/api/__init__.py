"""Read-only REST API over a published co-play graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from squadgraph.api.schemas import (
    ChurnResponse,
    EvolutionStatsResponse,
    GraphEdgeResponse,
    GraphNodeResponse,
    PlayerResponse,
    SeasonGraphResponse,
    SeasonsResponse,
    SeasonStatsResponse,
)
from squadgraph.config_loader import Settings
from squadgraph.graph import (
    Adjacency,
    EvolutionGraph,
    EvolutionGraphBuilder,
    GraphFilter,
    apply_filters,
    evolution_stats,
    most_connected,
    rank_by_degree,
)
from squadgraph.graph.export import export_evolution_stats
from squadgraph.ingest import load_folder


logger = logging.getLogger(__name__)


def load_graph(data_dir: Path) -> EvolutionGraph:
    builder = EvolutionGraphBuilder()
    report = load_folder(builder, data_dir)
    logger.info(
        "Loaded %d rosters (%d skipped, %d failed) from %s",
        len(report.loaded),
        len(report.skipped),
        len(report.failed),
        data_dir,
    )
    return builder.build()


def _unique_edges(graph: Adjacency) -> list[GraphEdgeResponse]:
    edges: list[GraphEdgeResponse] = []
    for player, teammates in graph.items():
        for teammate, weight in teammates.items():
            if player < teammate:
                edges.append(GraphEdgeResponse(source=player, target=teammate, weight=weight))
    edges.sort(key=lambda edge: (edge.source, edge.target))
    return edges


def create_app(
    graph: EvolutionGraph | None = None,
    data_dir: Path | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the app; ``settings`` supplies the default graph filters."""

    if settings is None:
        settings = Settings.from_env()
    if graph is None:
        graph = load_graph(data_dir or settings.data_dir)
    default_min_weight = settings.min_weight
    default_max_nodes = settings.max_nodes

    app = FastAPI(title="squadgraph")
    app.state.graph = graph

    def _require_season(season: int) -> None:
        if season not in graph.seasons:
            raise HTTPException(status_code=404, detail=f"No data for season {season}")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/seasons", response_model=SeasonsResponse)
    async def seasons() -> SeasonsResponse:
        return SeasonsResponse(
            has_data=graph.has_data,
            seasons=list(graph.seasons),
            teams=list(graph.teams),
        )

    @app.get("/graph/{season}", response_model=SeasonGraphResponse)
    async def season_graph(
        season: int,
        mode: Literal["snapshot", "cumulative"] = "snapshot",
        team: str | None = None,
        since: int | None = None,
        min_weight: int | None = Query(None, ge=1),
        max_nodes: int | None = Query(None, ge=0),
    ) -> SeasonGraphResponse:
        _require_season(season)
        if team is not None and team not in graph.teams:
            raise HTTPException(status_code=404, detail=f"Unknown team {team!r}")

        if mode == "cumulative":
            base = graph.cumulative_between(since, season)
        else:
            base = graph.snapshot(season)
        criteria = GraphFilter(
            players=graph.players_for_team(team, season) if team else None,
            min_weight=default_min_weight if min_weight is None else min_weight,
            max_nodes=default_max_nodes if max_nodes is None else max_nodes,
        )
        filtered = apply_filters(base, criteria)

        joined = graph.new_players(season)
        leaving = graph.departed_players(season)
        nodes = [
            GraphNodeResponse(
                name=name,
                degree=degree,
                is_new=name in joined,
                is_departing=name in leaving,
            )
            for name, degree in rank_by_degree(filtered)
        ]
        edges = _unique_edges(filtered)
        return SeasonGraphResponse(
            season=season,
            mode=mode,
            team=team,
            node_count=len(nodes),
            edge_count=len(edges),
            nodes=nodes,
            edges=edges,
        )

    @app.get("/churn/{season}", response_model=ChurnResponse)
    async def season_churn(season: int) -> ChurnResponse:
        _require_season(season)
        return ChurnResponse(
            season=season,
            active=len(graph.active_players(season)),
            new_players=sorted(graph.new_players(season)),
            departed_players=sorted(graph.departed_players(season)),
        )

    @app.get("/players/{name}", response_model=PlayerResponse)
    async def player_detail(name: str) -> PlayerResponse:
        record = graph.player(name)
        if record is None:
            raise HTTPException(status_code=404, detail="Player not found")
        keys = [key for key, members in graph.rosters.items() if name in members]
        return PlayerResponse(
            player=record,
            seasons=sorted({key.season for key in keys}),
            teams=sorted({key.team for key in keys}),
        )

    @app.get("/stats", response_model=EvolutionStatsResponse)
    async def stats() -> EvolutionStatsResponse:
        rows = [
            SeasonStatsResponse(
                season=row.season,
                nodes_in_season=row.nodes_in_season,
                edges_in_season=row.edges_in_season,
                cumulative_nodes=row.cumulative_nodes,
                cumulative_edges=row.cumulative_edges,
                new_players=row.new_players,
                departed_players=row.departed_players,
                average_degree=round(row.average_degree, 2),
            )
            for row in evolution_stats(graph)
        ]
        full = graph.full_graph()
        leader = most_connected(full)
        return EvolutionStatsResponse(
            seasons=rows,
            most_connected=leader,
            most_connected_teammates=len(full[leader]) if leader else 0,
        )

    @app.get("/stats/export.csv")
    async def stats_csv():
        return Response(
            content=export_evolution_stats(graph),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=evolution_stats.csv"},
        )

    return app


__all__ = ["create_app", "load_graph"]
