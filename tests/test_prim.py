"""Tests for primforest.mst.prim."""
import copy
import random
from itertools import combinations

import networkx as nx
import pytest

from primforest.mst.prim import prim_algorithm
from primforest.graph.adjlist import weighted_adj_from_edges, forest_weight, forest_edges
from primforest.utils.connectivity import connected_components_adj, is_spanning_forest
from primforest.io.nxgraph import nx_to_adjlist


def _random_graph(n, p, seed, low=-10, high=20):
    rng = random.Random(seed)
    edges = [
        (u, v, rng.randint(low, high))
        for u, v in combinations(range(n), 2)
        if rng.random() < p
    ]
    return weighted_adj_from_edges(edges, n)


def _bruteforce_msf_weight(adj):
    """Lightest spanning forest by trying every (n_c - 1)-subset per component."""
    total = 0
    for comp in connected_components_adj(adj):
        if len(comp) < 2:
            continue
        edges = [(u, v, w) for u in comp for v, w in adj[u] if u < v]
        best = None
        for subset in combinations(edges, len(comp) - 1):
            parent = {x: x for x in comp}

            def find(x):
                while parent[x] != x:
                    x = parent[x]
                return x

            ok = True
            for u, v, _ in subset:
                ru, rv = find(u), find(v)
                if ru == rv:
                    ok = False
                    break
                parent[ru] = rv
            if ok:
                w = sum(e[2] for e in subset)
                best = w if best is None else min(best, w)
        total += best
    return total


# --- edge cases ---

def test_empty_graph():
    assert prim_algorithm([]) == []


def test_single_vertex():
    assert prim_algorithm([[]]) == [[]]


def test_isolated_vertices():
    assert prim_algorithm([[], [], []]) == [[], [], []]


def test_two_vertices_one_edge():
    forest = prim_algorithm([[(1, 5)], [(0, 5)]])
    assert len(forest) == 2
    assert sorted(map(len, forest)) == [0, 1]
    nonempty = [(u, children) for u, children in enumerate(forest) if children]
    u, children = nonempty[0]
    assert children == [(1 - u, 5)]


def test_disconnected_two_components():
    adj = weighted_adj_from_edges([(0, 1, 3), (2, 3, 1), (3, 4, 2), (2, 4, 10)], 5)
    forest = prim_algorithm(adj)
    assert forest_weight(forest) == 6
    pairs = {frozenset((u, v)) for u, v, _ in forest_edges(forest)}
    assert frozenset((2, 4)) not in pairs
    assert pairs == {frozenset((0, 1)), frozenset((2, 3)), frozenset((3, 4))}
    assert is_spanning_forest(adj, forest)


def test_negative_weights():
    # triangle with one negative and one very positive edge
    adj = weighted_adj_from_edges([(0, 1, -4), (1, 2, -1), (0, 2, 7)], 3)
    forest = prim_algorithm(adj)
    assert forest_weight(forest) == -5
    assert sum(len(c) for c in forest) == 2


def test_stale_entries_are_skipped():
    # 0-1 (1), 0-2 (10), 1-2 (2): vertex 2 is queued twice, the cheaper one wins
    adj = weighted_adj_from_edges([(0, 1, 1), (0, 2, 10), (1, 2, 2)], 3)
    forest = prim_algorithm(adj)
    assert forest == [[(1, 1)], [(2, 2)], []]


def test_forest_records_parent_of_each_edge():
    # path 0-1-2-3 grown from vertex 0
    adj = weighted_adj_from_edges([(0, 1, 1), (1, 2, 1), (2, 3, 1)], 4)
    assert prim_algorithm(adj) == [[(1, 1)], [(2, 1)], [(3, 1)], []]


def test_components_seeded_from_lowest_vertex():
    # component {1, 3} has lowest vertex 1, so 1 is the parent
    adj = weighted_adj_from_edges([(1, 3, 4)], 4)
    assert prim_algorithm(adj) == [[], [(3, 4)], [], []]


def test_early_stop_leaves_trailing_roots_unprocessed():
    # whole graph absorbed from vertex 0; later vertices contribute nothing
    adj = weighted_adj_from_edges([(0, 3, 2), (0, 1, 1), (1, 2, 1)], 4)
    forest = prim_algorithm(adj)
    assert forest_weight(forest) == 4
    assert forest[2] == [] and forest[3] == []


def test_one_sided_edge_from_lower_vertex_is_used():
    # edge listed only from vertex 0, which is absorbed first
    forest = prim_algorithm([[(1, 2)], []])
    assert forest == [[(1, 2)], []]


def test_one_sided_edge_from_higher_vertex_is_ignored():
    # vertex 0 lists nothing, so 1 becomes its own root before its edge is read
    forest = prim_algorithm([[], [(0, 1)]])
    assert forest == [[], []]


def test_float_weights():
    adj = weighted_adj_from_edges([(0, 1, 0.5), (1, 2, 0.25), (0, 2, 1.5)], 3)
    assert forest_weight(prim_algorithm(adj)) == pytest.approx(0.75)


# --- errors ---

def test_out_of_range_neighbor_raises():
    with pytest.raises(IndexError):
        prim_algorithm([[(1, 1)], [(0, 1), (5, 2)], []])


def test_out_of_range_neighbor_of_root_raises():
    with pytest.raises(IndexError):
        prim_algorithm([[(3, 1)], []])


def test_negative_neighbor_raises():
    with pytest.raises(IndexError):
        prim_algorithm([[(-1, 1)], []])


# --- properties ---

@pytest.mark.parametrize("seed", range(20))
def test_edge_count_and_spanning(seed):
    adj = _random_graph(12, 0.2, seed)
    forest = prim_algorithm(adj)
    n_comps = len(connected_components_adj(adj))
    assert len(forest) == len(adj)
    assert sum(len(c) for c in forest) == len(adj) - n_comps
    assert is_spanning_forest(adj, forest)


@pytest.mark.parametrize("seed", range(20))
def test_weight_matches_networkx(seed):
    adj = _random_graph(15, 0.3, seed)
    G = nx.Graph()
    G.add_nodes_from(range(len(adj)))
    for u, neigh in enumerate(adj):
        for v, w in neigh:
            G.add_edge(u, v, weight=w)
    expected = nx.minimum_spanning_tree(G).size(weight="weight")
    assert forest_weight(prim_algorithm(adj)) == expected


@pytest.mark.parametrize("seed", range(10))
def test_weight_matches_bruteforce(seed):
    adj = _random_graph(6, 0.5, seed)
    assert forest_weight(prim_algorithm(adj)) == _bruteforce_msf_weight(adj)


def test_networkx_example_graph():
    G = nx.Graph()
    G.add_weighted_edges_from(
        [
            (0, 1, 4), (0, 7, 8), (1, 7, 11), (1, 2, 8), (2, 8, 2),
            (2, 5, 4), (2, 3, 7), (3, 4, 9), (3, 5, 14), (4, 5, 10),
            (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
        ]
    )
    adj, _ = nx_to_adjlist(G)
    ours = forest_weight(prim_algorithm(adj))
    assert ours == 37
    assert ours == nx.minimum_spanning_tree(G).size(weight="weight")


def test_pure_and_repeatable():
    adj = _random_graph(10, 0.4, 3)
    snapshot = copy.deepcopy(adj)
    first = prim_algorithm(adj)
    second = prim_algorithm(adj)
    assert first == second
    assert adj == snapshot
