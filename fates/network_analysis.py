"""
Graph view of a transition function.

The chain's state space is implicit in its transition function. This module
expands it from a start outcome into a networkx directed graph so that its
structure (which outcomes absorb, which are transient) can be inspected.
"""

from __future__ import annotations

from typing import Hashable, List, Set

import numpy as np

from fates.types import TransitionFunction

try:
    import networkx as nx
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Transition graph analysis requires networkx. Install with: pip install networkx"
    ) from exc


class TransitionGraphBuilder:
    """
    Builds networkx graphs from transition functions.

    Nodes are outcomes; an edge u -> v carries `weight`, the one-step
    probability of moving from u to v. Nodes whose successors were computed
    have `expanded=True`; nodes on the search frontier have `expanded=False`.
    """

    def __init__(self, transition: TransitionFunction) -> None:
        if not callable(transition):
            raise ValueError("transition must be callable")
        self.transition = transition

    def build(self, start: Hashable, *, max_depth: int = 10, min_probability: float = 0.0) -> nx.DiGraph:
        """
        Breadth-first expansion of the outcomes reachable from `start`.

        Args:
            start: Outcome to expand from.
            max_depth: Number of transition applications to follow. Year
                outcomes are unbounded, so the expansion must be cut off.
            min_probability: Edges with probability at or below this value
                are dropped.

        Returns:
            Directed graph of reachable outcomes.

        Raises:
            ValueError: If max_depth is negative.
        """
        if int(max_depth) < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")

        graph = nx.DiGraph()
        graph.add_node(start, expanded=False)
        seen: Set[Hashable] = {start}
        frontier: List[Hashable] = [start]
        for _ in range(int(max_depth)):
            next_frontier: List[Hashable] = []
            for node in frontier:
                graph.nodes[node]["expanded"] = True
                for nxt, p in self.transition(node).items():
                    if float(p) <= float(min_probability):
                        continue
                    if nxt not in seen:
                        seen.add(nxt)
                        graph.add_node(nxt, expanded=False)
                        next_frontier.append(nxt)
                    graph.add_edge(node, nxt, weight=float(p))
            if not next_frontier:
                break
            frontier = next_frontier
        return graph


def absorbing_outcomes(graph: nx.DiGraph) -> List[Hashable]:
    """
    Expanded outcomes whose only successor is themselves with probability 1.
    """
    out: List[Hashable] = []
    for node, data in graph.nodes(data=True):
        if not data.get("expanded", False):
            continue
        succ = list(graph.successors(node))
        if succ == [node] and np.isclose(graph.edges[node, node]["weight"], 1.0):
            out.append(node)
    return out


def transient_outcomes(graph: nx.DiGraph) -> List[Hashable]:
    """
    Expanded outcomes that are not absorbing.
    """
    absorbing = set(absorbing_outcomes(graph))
    return [
        node
        for node, data in graph.nodes(data=True)
        if data.get("expanded", False) and node not in absorbing
    ]
