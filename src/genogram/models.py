"""Data classes for genogram entities."""

from dataclasses import dataclass
from typing import Any, NamedTuple

MALE = "male"
FEMALE = "female"
SEXES = (MALE, FEMALE)


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    sex: str  # MALE or FEMALE, only used to pick a symbol

    def __post_init__(self):
        if self.sex not in SEXES:
            raise ValueError(f"Person {self.id!r} has invalid sex {self.sex!r}")


@dataclass(frozen=True)
class Relationship:
    id: str
    partner1_id: str
    partner2_id: str
    children_ids: tuple[str, ...] = ()


class Position(NamedTuple):
    x: float
    y: float


class Bounds(NamedTuple):
    width: float
    height: float


@dataclass(frozen=True)
class GenogramData:
    """
    A genogram dataset.

    Order matters: relationships are laid out in sequence, and people that no
    relationship places are appended in the order they appear here.
    """

    people: tuple[Person, ...] = ()
    relationships: tuple[Relationship, ...] = ()

    def people_by_id(self) -> dict[str, Person]:
        """Map person ID to person. A duplicated ID resolves to its last occurrence."""
        return {p.id: p for p in self.people}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenogramData":
        """
        Build a dataset from plain data, e.g. decoded JSON:

            {"people": [{"id": "A", "name": "Ann", "gender": "female"}],
             "relationships": [{"id": "R1", "partner1Id": "A", "partner2Id": "B",
                                "childrenIds": ["C"]}]}

        "sex" is accepted in place of "gender".
        """
        try:
            people = tuple(
                Person(
                    id=str(p["id"]),
                    name=str(p.get("name", "")),
                    sex=p["gender"] if "gender" in p else p["sex"],
                )
                for p in data.get("people", [])
            )
            relationships = tuple(
                Relationship(
                    id=str(r["id"]),
                    partner1_id=str(r["partner1Id"]),
                    partner2_id=str(r["partner2Id"]),
                    children_ids=tuple(str(c) for c in r.get("childrenIds", [])),
                )
                for r in data.get("relationships", [])
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed genogram data: {e!r}") from e
        return cls(people=people, relationships=relationships)
