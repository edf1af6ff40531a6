"""Diagnostics for genogram datasets."""

from collections import Counter

import networkx as nx

from genogram.graph import build_graph, parent_graph
from genogram.models import GenogramData


def validate_data(data: GenogramData) -> list[str]:
    """
    Check a genogram dataset for:
    - Duplicate person or relationship IDs
    - Partners or children missing from the people list
    - People partnered with themselves, or listed as their own child
    - Cycles in parent-child relationships

    None of these stop the layout; dangling references are simply skipped.

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    for pid, count in Counter(p.id for p in data.people).items():
        if count > 1:
            warnings.append(f"Duplicate person ID {pid!r} ({count} times)")

    for rid, count in Counter(r.id for r in data.relationships).items():
        if count > 1:
            warnings.append(f"Duplicate relationship ID {rid!r} ({count} times)")

    known = {p.id for p in data.people}
    for rel in data.relationships:
        for partner in (rel.partner1_id, rel.partner2_id):
            if partner not in known:
                warnings.append(
                    f"Relationship {rel.id!r} references unknown partner {partner!r}; "
                    "it will be skipped"
                )
        if rel.partner1_id == rel.partner2_id:
            warnings.append(f"Relationship {rel.id!r} partners {rel.partner1_id!r} with themselves")
        for child in rel.children_ids:
            if child not in known:
                warnings.append(f"Relationship {rel.id!r} references unknown child {child!r}")
            elif child in (rel.partner1_id, rel.partner2_id):
                warnings.append(f"Relationship {rel.id!r} lists partner {child!r} as a child")

    # Check for cycles
    try:
        cycle = nx.find_cycle(parent_graph(build_graph(data)), orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    return warnings
