import pytest

from squadgraph.graph import (
    GraphFilter,
    apply_filters,
    count_edges,
    filter_by_min_weight,
    filter_by_players,
    limit_to_top_nodes,
    rank_by_degree,
)


def _graph(*edges: tuple[str, str, int]) -> dict[str, dict[str, int]]:
    graph: dict[str, dict[str, int]] = {}
    for a, b, weight in edges:
        graph.setdefault(a, {})[b] = weight
        graph.setdefault(b, {})[a] = weight
    return graph


@pytest.fixture
def season_graph():
    return _graph(
        ("Alice", "Bob", 1),
        ("Alice", "Carol", 3),
        ("Bob", "Carol", 2),
        ("Bob", "Dan", 1),
        ("Carol", "Eve", 2),
    )


def test_team_filter_removes_outsiders(season_graph):
    filtered = filter_by_players(season_graph, {"Alice", "Bob", "Carol"})

    assert set(filtered) == {"Alice", "Bob", "Carol"}
    assert count_edges(filtered) == 3
    assert "Dan" not in filtered["Bob"]


def test_team_filter_drops_isolated_players(season_graph):
    filtered = filter_by_players(season_graph, {"Dan", "Eve", "Alice"})
    assert filtered == {}


def test_filters_do_not_mutate_input(season_graph):
    before = {player: dict(edges) for player, edges in season_graph.items()}
    filter_by_players(season_graph, {"Alice"})
    filter_by_min_weight(season_graph, 3)
    limit_to_top_nodes(season_graph, 1)
    assert season_graph == before


def test_min_weight_one_is_identity(season_graph):
    assert filter_by_min_weight(season_graph, 1) == season_graph


def test_min_weight_drops_light_edges(season_graph):
    filtered = filter_by_min_weight(season_graph, 2)

    assert filtered == _graph(("Alice", "Carol", 3), ("Bob", "Carol", 2), ("Carol", "Eve", 2))
    assert "Dan" not in filtered


def test_min_weight_rejects_zero(season_graph):
    with pytest.raises(ValueError):
        filter_by_min_weight(season_graph, 0)


def test_rank_by_degree_breaks_ties_by_name(season_graph):
    assert rank_by_degree(season_graph) == [
        ("Bob", 3),
        ("Carol", 3),
        ("Alice", 2),
        ("Dan", 1),
        ("Eve", 1),
    ]
    assert rank_by_degree(season_graph, 2) == [("Bob", 3), ("Carol", 3)]


def test_top_nodes_keeps_best_connected_and_reinduces_edges(season_graph):
    limited = limit_to_top_nodes(season_graph, 3)

    assert limited == _graph(("Alice", "Bob", 1), ("Alice", "Carol", 3), ("Bob", "Carol", 2))


def test_top_nodes_identity_when_limit_covers_graph(season_graph):
    assert limit_to_top_nodes(season_graph, len(season_graph)) == season_graph
    assert limit_to_top_nodes(season_graph, 100) == season_graph


def test_top_nodes_rejects_negative_limit(season_graph):
    with pytest.raises(ValueError):
        limit_to_top_nodes(season_graph, -1)


def test_stages_are_idempotent(season_graph):
    team = filter_by_players(season_graph, {"Alice", "Bob", "Carol", "Dan"})
    assert filter_by_players(team, {"Alice", "Bob", "Carol", "Dan"}) == team

    heavy = filter_by_min_weight(season_graph, 2)
    assert filter_by_min_weight(heavy, 2) == heavy

    top = limit_to_top_nodes(season_graph, 2)
    assert limit_to_top_nodes(top, 2) == top


def test_apply_filters_runs_stages_in_order(season_graph):
    criteria = GraphFilter(players=frozenset({"Alice", "Bob", "Carol", "Dan"}), min_weight=2, max_nodes=2)
    result = apply_filters(season_graph, criteria)

    # Team filter drops Eve, weight filter keeps Alice-Carol and Bob-Carol,
    # then the top two by degree are Carol (2) and Alice (1, beats Bob by name).
    assert result == _graph(("Alice", "Carol", 3))


def test_apply_filters_with_defaults_copies_graph(season_graph):
    result = apply_filters(season_graph, GraphFilter())

    assert result == season_graph
    result["Alice"]["Bob"] = 99
    assert season_graph["Alice"]["Bob"] == 1
