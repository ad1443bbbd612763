from .draw import coordinate_layout, draw_cycle_space

__all__ = [
    "coordinate_layout",
    "draw_cycle_space",
]
