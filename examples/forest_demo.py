#!/usr/bin/env python3
"""
Build a random weighted graph, compute its minimum spanning forest and
compare the total weight with networkx.minimum_spanning_tree.

Usage:
  python3 examples/forest_demo.py
  python3 examples/forest_demo.py --n 20 --p 0.15 --seed 3 --draw forest.png
"""

from __future__ import annotations

import argparse
import logging
import random

import networkx as nx

from primforest import (
    prim_algorithm,
    forest_edges,
    forest_weight,
    connected_components_adj,
    is_spanning_forest,
    nx_to_adjlist,
    draw_forest,
)


def main() -> None:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--n", type=int, default=12, help="number of vertices")
    ap.add_argument("--p", type=float, default=0.25, help="edge probability")
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--low", type=int, default=-5, help="minimum edge weight")
    ap.add_argument("--high", type=int, default=20, help="maximum edge weight")
    ap.add_argument("--draw", default=None, help="save a PNG of the forest to this path")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    G = nx.gnp_random_graph(args.n, args.p, seed=args.seed)
    rng = random.Random(args.seed)
    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(args.low, args.high)

    adj, _ = nx_to_adjlist(G)
    forest = prim_algorithm(adj)

    comps = connected_components_adj(adj)
    print(f"|V|={len(adj)}  |E|={G.number_of_edges()}  components={len(comps)}")
    for u, v, w in forest_edges(forest):
        print(f"  {u} -> {v}  w={w}")

    ours = forest_weight(forest)
    ref = nx.minimum_spanning_tree(G).size(weight="weight")
    print(f"forest weight: {ours}   networkx: {ref:g}")
    print("valid spanning forest:", is_spanning_forest(adj, forest))

    if args.draw:
        draw_forest(adj, forest, seed=args.seed, save_path=args.draw)
        print("saved", args.draw)


if __name__ == "__main__":
    main()
