"""Deterministic layout of genograms: partners side by side, children on the tier below."""

from genogram.config import LayoutConfig
from genogram.connectors import Connector, compute_connectors
from genogram.errors import ConfigurationError, EmptyInputError, GenogramError
from genogram.layout import LayoutResult, layout
from genogram.models import Bounds, GenogramData, Person, Position, Relationship

__all__ = [
    "Bounds",
    "ConfigurationError",
    "Connector",
    "EmptyInputError",
    "GenogramData",
    "GenogramError",
    "LayoutConfig",
    "LayoutResult",
    "Person",
    "Position",
    "Relationship",
    "compute_connectors",
    "layout",
]
