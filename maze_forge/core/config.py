from dataclasses import dataclass, asdict
from typing import Optional

from maze_forge.core.errors import InvalidDimensions


@dataclass
class GenerationConfig:
    width: int = 20
    height: int = 20
    # Rendering only, the algorithms ignore it
    cell_size: int = 20
    # Seconds slept after each pausing step
    delay: float = 0.0
    seed: Optional[int] = None

    # Tunable coin weights for the row-sequential algorithms
    eller_merge_probability: float = 0.5
    eller_down_probability: float = 0.3
    sidewinder_close_probability: float = 0.5

    def validate(self) -> "GenerationConfig":
        if not isinstance(self.width, int) or not isinstance(self.height, int) \
                or self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(self.width, self.height)
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")
        for name in ("eller_merge_probability", "eller_down_probability", "sidewinder_close_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        return self

    def to_dict(self):
        return asdict(self)
