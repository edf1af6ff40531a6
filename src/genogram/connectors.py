"""Line geometry connecting partners and children in a laid-out genogram."""

from dataclasses import dataclass
from typing import Mapping

from genogram.config import LayoutConfig
from genogram.models import MALE, GenogramData, Person, Position

PARTNER = "partner"
DESCENT = "descent"
CHILD = "child"


@dataclass(frozen=True)
class Connector:
    relationship_id: str
    kind: str  # PARTNER, DESCENT or CHILD
    start: Position
    end: Position


def symbol_for(person: Person) -> str:
    """Shape used to draw a person."""
    return "square" if person.sex == MALE else "circle"


def compute_connectors(
    data: GenogramData,
    positions: Mapping[str, Position],
    config: LayoutConfig | None = None,
) -> list[Connector]:
    """
    Compute the lines to draw for each relationship.

    For a relationship whose partners are both positioned:
    - a partner line between the two partners
    - if any known child is positioned, a descent line from the partners'
      midpoint down to a branch point half a tier below
    - a line from the branch point to the top edge of each positioned child

    Relationships with an unplaced partner produce nothing.
    """
    if config is None:
        config = LayoutConfig()
    connectors: list[Connector] = []

    for rel in data.relationships:
        p1_pos = positions.get(rel.partner1_id)
        p2_pos = positions.get(rel.partner2_id)
        if p1_pos is None or p2_pos is None:
            continue

        connectors.append(Connector(rel.id, PARTNER, p1_pos, p2_pos))

        # Positions only hold people from the dataset, so unknown children drop out here
        child_positions = [positions[c] for c in rel.children_ids if c in positions]
        if not child_positions:
            continue

        mid = Position(p1_pos.x + (p2_pos.x - p1_pos.x) / 2, p1_pos.y)
        branch = Position(mid.x, mid.y + config.vertical_spacing / 2)
        connectors.append(Connector(rel.id, DESCENT, mid, branch))
        for child_pos in child_positions:
            top = Position(child_pos.x, child_pos.y - config.person_height / 2)
            connectors.append(Connector(rel.id, CHILD, branch, top))

    return connectors
