"""
Genogram layout: assign every person a position on a tiered grid.

A single forward pass over the relationships, in dataset order:
- Partners sit side by side on the current tier. A partner who has not been
  placed yet takes the next free slot; slots are handed out left to right in
  the order people are first touched, with a fixed pitch.
- Children go on the tier below, as a block centered between the partners.
- A relationship with children moves the current tier down for the next one.

People no relationship placed are then appended on the final tier.
Positions are never overwritten: the first assignment wins.
"""

from dataclasses import dataclass, field
from functools import reduce
from types import MappingProxyType
from typing import Mapping, NamedTuple

from genogram.config import LayoutConfig
from genogram.errors import EmptyInputError
from genogram.models import Bounds, GenogramData, Person, Position, Relationship


class LayoutResult(NamedTuple):
    positions: Mapping[str, Position]
    bounds: Bounds


@dataclass(frozen=True)
class LayoutState:
    """Running state threaded through the relationship pass."""

    current_y: float
    positions: dict[str, Position] = field(default_factory=dict)

    @property
    def next_slot_index(self) -> int:
        # The slot counter is the number of people placed so far
        return len(self.positions)


def slot_x(slot_index: int, config: LayoutConfig) -> float:
    """X coordinate of the center of a slot."""
    return config.slot_pitch * slot_index + config.person_width


def place_relationship(
    state: LayoutState,
    rel: Relationship,
    people: Mapping[str, Person],
    config: LayoutConfig,
) -> LayoutState:
    """
    Place the partners and children of one relationship.

    Returns the state unchanged if either partner is unknown. Otherwise new
    positions are added to the state's mapping, which the returned state shares.
    """
    if rel.partner1_id not in people or rel.partner2_id not in people:
        return state

    positions = state.positions

    p1_pos = positions.get(rel.partner1_id)
    if p1_pos is None:
        p1_pos = Position(slot_x(state.next_slot_index, config), state.current_y)
        positions[rel.partner1_id] = p1_pos

    p2_pos = positions.get(rel.partner2_id)
    if p2_pos is None:
        # Mirrors partner 1, even when partner 1 sits on an earlier tier
        p2_pos = Position(p1_pos.x + config.slot_pitch, p1_pos.y)
        positions[rel.partner2_id] = p2_pos

    child_y = state.current_y + config.vertical_spacing
    children = [c for c in rel.children_ids if c in people]
    children_width = len(children) * config.slot_pitch - config.horizontal_spacing
    start_x = p1_pos.x + (p2_pos.x - p1_pos.x - children_width) / 2

    for index, child_id in enumerate(children):
        if child_id not in positions:
            positions[child_id] = Position(
                start_x + index * config.slot_pitch + config.person_width / 2,
                child_y,
            )

    current_y = state.current_y
    # Unknown children still open a new tier
    if rel.children_ids:
        current_y += config.vertical_spacing

    return LayoutState(current_y=current_y, positions=positions)


def place_remaining(
    state: LayoutState, people: tuple[Person, ...], config: LayoutConfig
) -> LayoutState:
    """Append everyone still without a position, in order, on the current tier."""
    positions = state.positions
    for person in people:
        if person.id not in positions:
            positions[person.id] = Position(slot_x(len(positions), config), state.current_y)
    return LayoutState(current_y=state.current_y, positions=positions)


def compute_bounds(positions: Mapping[str, Position], config: LayoutConfig) -> Bounds:
    """Origin-anchored box that holds every placed person."""
    if not positions:
        raise EmptyInputError("Cannot compute bounds of an empty layout")
    width = max(p.x for p in positions.values()) + config.person_width
    height = max(p.y for p in positions.values()) + config.person_height
    return Bounds(width, height)


def layout(data: GenogramData, config: LayoutConfig | None = None) -> LayoutResult:
    """
    Lay out a genogram.

    Args:
        data: The people and relationships to place
        config: Geometry settings (defaults to LayoutConfig())

    Returns:
        The position of every person, keyed by ID, and the bounding box

    Raises:
        EmptyInputError: if the dataset has no people
    """
    if config is None:
        config = LayoutConfig()
    if not data.people:
        raise EmptyInputError("Genogram has no people to lay out")

    people = data.people_by_id()
    # One mapping for the whole pass, filled in place by each step
    initial = LayoutState(current_y=config.person_height, positions={})
    state = reduce(
        lambda acc, rel: place_relationship(acc, rel, people, config),
        data.relationships,
        initial,
    )
    state = place_remaining(state, data.people, config)

    positions = MappingProxyType(state.positions)
    return LayoutResult(positions=positions, bounds=compute_bounds(positions, config))
