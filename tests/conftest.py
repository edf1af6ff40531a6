import matplotlib

matplotlib.use("Agg")

import pytest

from genogram.models import FEMALE, MALE, GenogramData, Person, Relationship


def man(pid):
    return Person(pid, f"Person {pid}", MALE)


def woman(pid):
    return Person(pid, f"Person {pid}", FEMALE)


@pytest.fixture
def couple():
    return GenogramData(
        people=(man("A"), woman("B")),
        relationships=(Relationship("R1", "A", "B"),),
    )


@pytest.fixture
def couple_with_child():
    return GenogramData(
        people=(man("A"), woman("B"), man("C")),
        relationships=(Relationship("R1", "A", "B", ("C",)),),
    )


@pytest.fixture
def three_generations():
    return GenogramData(
        people=(man("A"), woman("B"), man("C"), woman("D"), woman("E")),
        relationships=(
            Relationship("R1", "A", "B", ("C",)),
            Relationship("R2", "C", "D", ("E",)),
        ),
    )
