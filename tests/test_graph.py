import pytest

from bionova.errors import GraphValidationError
from bionova.graph import GraphAdjacencyIndex, prune_graph
from bionova.schema import GraphLink, GraphNode, KnowledgeGraph


def _graph():
    nodes = [
        GraphNode(id="A", type="organism"),
        GraphNode(id="B", type="experiment"),
        GraphNode(id="C", type="result"),
    ]
    links = [
        GraphLink(source="A", target="B", label="studied in"),
        GraphLink(source="C", target="B", label="observed in"),
    ]
    return nodes, links


def test_scenario_connected_and_unknown_id():
    index = GraphAdjacencyIndex.build(
        [GraphNode(id="A", type="organism"), GraphNode(id="B", type="experiment")],
        [GraphLink(source="A", target="B", label="studied in")],
    )
    assert index.connected("A", "B") is True
    with pytest.raises(GraphValidationError) as excinfo:
        index.connected("A", "C")
    assert excinfo.value.node_id == "C"


def test_reflexive_and_symmetric():
    nodes, links = _graph()
    index = GraphAdjacencyIndex.build(nodes, links)
    ids = [node.id for node in nodes]
    for a in ids:
        assert index.connected(a, a)
        for b in ids:
            assert index.connected(a, b) == index.connected(b, a)
    assert index.connected("B", "C")
    assert not index.connected("A", "C")


def test_link_endpoints_may_be_node_objects():
    node_a = GraphNode(id="A", type="organism")
    node_b = GraphNode(id="B", type="experiment")
    link = GraphLink(source=node_a, target=node_b, label="studied in")
    index = GraphAdjacencyIndex.build([node_a, node_b], [link])
    assert index.connected("B", "A")


def test_strict_build_rejects_dangling_link():
    nodes, links = _graph()
    links.append(GraphLink(source="A", target="Z", label="?"))
    with pytest.raises(GraphValidationError):
        GraphAdjacencyIndex.build(nodes, links)


def test_lenient_build_drops_dangling_link(caplog):
    nodes, links = _graph()
    links.append(GraphLink(source="Z", target="A", label="?"))
    index = GraphAdjacencyIndex.build(nodes, links, strict=False)
    assert "Z" not in index
    assert index.neighbors("A") == frozenset({"B"})
    assert "Dropping link" in caplog.text


def test_layout_state_does_not_change_connectivity():
    nodes, links = _graph()
    index = GraphAdjacencyIndex.build(nodes, links)
    before = index.adjacency()
    for i, node in enumerate(nodes):
        node.x, node.y, node.vx, node.vy = float(i), float(i * 2), 0.5, -0.5
    assert index.adjacency() == before
    assert index.neighbors("B") == frozenset({"A", "C"})


def test_adjacency_lists_are_sorted():
    nodes, links = _graph()
    index = GraphAdjacencyIndex.build(nodes, links)
    assert index.adjacency() == {"A": ["B"], "B": ["A", "C"], "C": ["B"]}
    assert len(index) == 3


def test_self_loop_is_harmless():
    index = GraphAdjacencyIndex.build(
        [GraphNode(id="A", type="organism")],
        [GraphLink(source="A", target="A", label="self")],
    )
    assert index.connected("A", "A")
    assert index.neighbors("A") == frozenset()


def test_prune_graph_removes_duplicates_and_dangling_links():
    graph = KnowledgeGraph(
        nodes=[
            GraphNode(id="A", type="organism"),
            GraphNode(id="A", type="result"),
            GraphNode(id="B", type="experiment"),
        ],
        links=[
            GraphLink(source="A", target="B", label="ok"),
            GraphLink(source="B", target="missing", label="bad"),
        ],
    )
    pruned = prune_graph(graph)
    assert [(n.id, n.type) for n in pruned.nodes] == [("A", "organism"), ("B", "experiment")]
    assert [link.label for link in pruned.links] == ["ok"]
    GraphAdjacencyIndex.from_graph(pruned)


def test_neighbors_of_unknown_id_raises():
    nodes, links = _graph()
    index = GraphAdjacencyIndex.build(nodes, links)
    assert index.neighbors("B") == frozenset({"A", "C"})
    with pytest.raises(GraphValidationError) as excinfo:
        index.neighbors("missing")
    assert excinfo.value.node_id == "missing"


def test_direct_construction_rejects_pair_outside_node_set():
    with pytest.raises(GraphValidationError) as excinfo:
        GraphAdjacencyIndex(["A"], [frozenset({"A", "Z"})])
    assert excinfo.value.node_id == "Z"
    index = GraphAdjacencyIndex(["A", "B"], [frozenset({"A", "B"}), frozenset({"A"})])
    assert index.connected("A", "B")
