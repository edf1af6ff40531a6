"""NetworkX graph building and operations."""

import networkx as nx

from genogram.models import GenogramData


def build_graph(data: GenogramData) -> nx.DiGraph:
    """
    Build a NetworkX directed graph from a genogram dataset.

    Nodes are person IDs. Edges carry a relationship_type:
    - SPOUSE_OF from partner 1 to partner 2
    - PARENT_OF from each partner to each child

    References to people missing from the dataset do not become edges.
    """
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid clashing with graph writers
    for person in data.people:
        G.add_node(person.id, person_name=person.name, sex=person.sex)

    for rel in data.relationships:
        partners = [p for p in (rel.partner1_id, rel.partner2_id) if p in G]
        if len(partners) == 2 and partners[0] != partners[1]:
            G.add_edge(
                partners[0], partners[1], relationship_type="SPOUSE_OF", relationship_id=rel.id
            )
        for child in rel.children_ids:
            if child not in G:
                continue
            for parent in partners:
                if parent != child:
                    G.add_edge(
                        parent, child, relationship_type="PARENT_OF", relationship_id=rel.id
                    )

    return G


def parent_graph(G: nx.DiGraph) -> nx.DiGraph:
    """Subgraph with only the PARENT_OF edges (all person nodes kept)."""
    H = nx.DiGraph()
    H.add_nodes_from(G.nodes(data=True))
    H.add_edges_from(
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == "PARENT_OF"
    )
    return H
