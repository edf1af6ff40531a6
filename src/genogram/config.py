"""Layout geometry settings."""

import math
from dataclasses import dataclass, fields
from numbers import Real

from genogram.errors import ConfigurationError

PERSON_WIDTH = 80
PERSON_HEIGHT = 80
HORIZONTAL_SPACING = 40
VERTICAL_SPACING = 120


@dataclass(frozen=True)
class LayoutConfig:
    """Sizes in abstract layout units. All values must be positive and finite."""

    person_width: float = PERSON_WIDTH
    person_height: float = PERSON_HEIGHT
    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is a Real, but never a meaningful size
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigurationError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be finite, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{f.name} must be positive, got {value!r}")

    @property
    def slot_pitch(self) -> float:
        """Horizontal distance between neighbouring slots."""
        return self.person_width + self.horizontal_spacing
