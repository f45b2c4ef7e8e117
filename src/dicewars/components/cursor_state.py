from dataclasses import dataclass


@dataclass(slots=True)
class CursorState:
    """Last known pointer position in window coordinates.

    The hovered cell is not stored here; the render pass derives it from the
    position every frame.
    """

    x: float = 0.0
    y: float = 0.0
    present: bool = False
