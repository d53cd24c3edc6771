"""A rectangular menu button with hover feedback."""

from __future__ import annotations

from enum import Enum, auto

from parkrush.game_object import Point, Rect

Color = tuple[int, int, int]

_WHITE: Color = (255, 255, 255)
_OUTLINE: Color = (200, 200, 200)


class ButtonState(Enum):
    NORMAL = auto()
    HOVERED = auto()
    CLICKED = auto()


class Button:
    """A labelled rectangle whose look follows the mouse."""

    def __init__(self, position: Point, size: Point, text: str = "") -> None:
        self.position = position
        self.size = size
        self.text = text
        self.state = ButtonState.NORMAL
        self.normal_color: Color = (70, 70, 70)
        self.hover_color: Color = (100, 100, 100)
        self.click_color: Color = (50, 50, 50)
        self.fill_color = self.normal_color
        self.outline_color = _OUTLINE
        self.outline_thickness = 3.0

    @property
    def bounds(self) -> Rect:
        """Area covered by the button, outline included."""
        x, y = self.position
        width, height = self.size
        return Rect(x, y, width, height).expanded(self.outline_thickness)

    def is_clicked(self, mouse_pos: Point) -> bool:
        return self.bounds.contains(mouse_pos)

    def is_hovered(self, mouse_pos: Point) -> bool:
        return self.bounds.contains(mouse_pos)

    def update(self, mouse_pos: Point) -> None:
        """Switch between normal and hovered looks."""
        if self.is_hovered(mouse_pos):
            self.state = ButtonState.HOVERED
            self.fill_color = self.hover_color
            self.outline_color = _WHITE
            self.outline_thickness = 4.0
        else:
            self.state = ButtonState.NORMAL
            self.fill_color = self.normal_color
            self.outline_color = _OUTLINE
            self.outline_thickness = 3.0

    def move_to(self, position: Point) -> None:
        self.position = position

    def set_colors(self, normal: Color, hover: Color, click: Color) -> None:
        """Replace the palette and show the normal colour."""
        self.normal_color = normal
        self.hover_color = hover
        self.click_color = click
        self.fill_color = normal