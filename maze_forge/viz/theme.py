from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


def hex_to_rgb(value: str) -> Color:
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB colour, got {value!r}")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


@dataclass(frozen=True)
class Theme:
    background: Color = (255, 255, 255)
    walls: Color = (226, 232, 240)         # #E2E8F0
    current_cell: Color = (192, 132, 252)  # #C084FC
    visited_cell: Color = (147, 197, 253)  # #93C5FD
    hud_text: Color = (30, 41, 59)         # #1E293B
    wall_width: int = 4

    @classmethod
    def from_hex(cls, background="#FFFFFF", walls="#E2E8F0", current_cell="#C084FC",
                 visited_cell="#93C5FD", hud_text="#1E293B", wall_width=4) -> "Theme":
        return cls(
            background=hex_to_rgb(background),
            walls=hex_to_rgb(walls),
            current_cell=hex_to_rgb(current_cell),
            visited_cell=hex_to_rgb(visited_cell),
            hud_text=hex_to_rgb(hud_text),
            wall_width=wall_width,
        )


DEFAULT_THEME = Theme()
