from conftest import man, woman
from genogram.graph import build_graph, parent_graph
from genogram.models import GenogramData, Relationship


def test_build_graph(three_generations):
    G = build_graph(three_generations)
    assert set(G.nodes) == {"A", "B", "C", "D", "E"}
    assert G.nodes["A"]["person_name"] == "Person A"
    assert G.edges["A", "B"]["relationship_type"] == "SPOUSE_OF"
    assert G.edges["A", "C"]["relationship_type"] == "PARENT_OF"
    assert G.edges["D", "E"]["relationship_id"] == "R2"
    assert G.number_of_edges() == 6


def test_build_graph_skips_unknown_people():
    data = GenogramData(
        people=(man("A"), woman("C")),
        relationships=(Relationship("R1", "A", "ghost", ("C", "nobody")),),
    )
    G = build_graph(data)
    assert set(G.nodes) == {"A", "C"}
    assert list(G.edges) == [("A", "C")]


def test_parent_graph_keeps_only_parent_edges(three_generations):
    H = parent_graph(build_graph(three_generations))
    assert set(H.nodes) == {"A", "B", "C", "D", "E"}
    assert set(H.edges) == {("A", "C"), ("B", "C"), ("C", "E"), ("D", "E")}
