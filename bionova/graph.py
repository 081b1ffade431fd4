"""Connectivity lookups over the knowledge graph"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Set

from .errors import GraphValidationError
from .schema import GraphLink, GraphNode, KnowledgeGraph

logger = logging.getLogger(__name__)


class GraphAdjacencyIndex:
    """Answers "are these two nodes directly linked?" for hover highlighting.

    Only node ids are stored, so repositioning nodes during layout cannot
    change the answers.
    """

    def __init__(self, node_ids: Iterable[str], pairs: Iterable[FrozenSet[str]]):
        self._node_ids: FrozenSet[str] = frozenset(node_ids)
        self._pairs: FrozenSet[FrozenSet[str]] = frozenset(pairs)
        neighbors: Dict[str, Set[str]] = {node_id: set() for node_id in self._node_ids}
        for pair in self._pairs:
            for member in pair:
                if member not in self._node_ids:
                    raise GraphValidationError(f"Pair references unknown node {member!r}", node_id=member)
            members = tuple(pair)
            if len(members) == 1:
                continue
            a, b = members
            neighbors[a].add(b)
            neighbors[b].add(a)
        self._neighbors = {node_id: frozenset(ids) for node_id, ids in neighbors.items()}

    @classmethod
    def build(cls, nodes: Iterable[GraphNode], links: Iterable[GraphLink], strict: bool = True) -> "GraphAdjacencyIndex":
        """Index ``links`` over ``nodes``.

        With ``strict`` a link whose endpoint is not a known node raises
        GraphValidationError; otherwise the link is dropped with a warning.
        """
        node_ids = {node.id for node in nodes}
        pairs = set()
        for link in links:
            source, target = link.source_id, link.target_id
            missing = [endpoint for endpoint in (source, target) if endpoint not in node_ids]
            if missing:
                message = f"Link {source!r} -> {target!r} references unknown node {missing[0]!r}"
                if strict:
                    raise GraphValidationError(message, node_id=missing[0])
                logger.warning("Dropping link: %s", message)
                continue
            pairs.add(frozenset((source, target)))
        return cls(node_ids, pairs)

    @classmethod
    def from_graph(cls, graph: KnowledgeGraph, strict: bool = True) -> "GraphAdjacencyIndex":
        return cls.build(graph.nodes, graph.links, strict=strict)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._node_ids

    def __len__(self) -> int:
        return len(self._node_ids)

    def _require(self, node_id: str) -> None:
        if node_id not in self._node_ids:
            raise GraphValidationError(f"Unknown node id {node_id!r}", node_id=node_id)

    def connected(self, a: str, b: str) -> bool:
        self._require(a)
        self._require(b)
        return a == b or frozenset((a, b)) in self._pairs

    def neighbors(self, node_id: str) -> FrozenSet[str]:
        self._require(node_id)
        return self._neighbors[node_id]

    def adjacency(self) -> Dict[str, List[str]]:
        """Sorted neighbour lists for every node, ready for JSON"""
        return {node_id: sorted(ids) for node_id, ids in sorted(self._neighbors.items())}


def prune_graph(graph: KnowledgeGraph) -> KnowledgeGraph:
    """Drop duplicate node ids (first wins) and links with unknown endpoints"""
    nodes: List[GraphNode] = []
    seen = set()
    for node in graph.nodes:
        if node.id in seen:
            logger.warning("Dropping duplicate graph node %r", node.id)
            continue
        seen.add(node.id)
        nodes.append(node)

    links: List[GraphLink] = []
    for link in graph.links:
        if link.source_id in seen and link.target_id in seen:
            links.append(link)
        else:
            logger.warning("Dropping dangling graph link %r -> %r", link.source_id, link.target_id)

    return KnowledgeGraph(nodes=nodes, links=links)
