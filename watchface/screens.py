"""Screens of the watch user interface and the navigator that shows them.

Each screen reacts to the four buttons (menu, back, up, down). ``show``
returns the text the screen displays; the navigator keeps the current
screen and its latest rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Sequence

__all__ = [
    "Screen",
    "Navigator",
    "MenuItem",
    "MenuScreen",
    "CarouselItem",
    "CarouselScreen",
    "SetTimeScreen",
]


class Screen:
    """A screen with a parent to return to; buttons do nothing by default."""

    def __init__(self, navigator: Optional["Navigator"] = None, title: str = "") -> None:
        self.navigator = navigator
        self.title = title
        self.parent: Optional[Screen] = None

    def show(self) -> str:
        """Return the text this screen displays."""
        return self.title

    def menu(self) -> None:
        """Handle the menu button."""

    def back(self) -> None:
        """Return to the parent screen, if there is one."""
        if self.navigator is not None and self.parent is not None:
            self.navigator.set_screen(self.parent)

    def up(self) -> None:
        """Handle the up button."""

    def down(self) -> None:
        """Handle the down button."""

    def _redraw(self) -> None:
        if self.navigator is not None:
            self.navigator.refresh()


class Navigator:
    """Hold the screen being shown and what it last displayed."""

    def __init__(self) -> None:
        self.current: Optional[Screen] = None
        self.display = ""

    def set_screen(self, screen: Optional[Screen]) -> None:
        """Make ``screen`` current and show it; ``None`` is ignored."""
        if screen is None:
            return
        self.current = screen
        self.display = screen.show()

    def refresh(self) -> None:
        """Show the current screen again."""
        if self.current is not None:
            self.display = self.current.show()


@dataclass
class MenuItem:
    """A menu entry: its label and the screen it opens."""

    name: str
    screen: Optional[Screen] = None


class MenuScreen(Screen):
    """A scrolling list of items with one highlighted.

    ``line_height`` is the font's line advance; each menu line adds 50%
    padding to it.
    """

    def __init__(
        self,
        navigator: Navigator,
        items: Sequence[MenuItem],
        line_height: int = 28,
        display_height: int = 200,
    ) -> None:
        if not items:
            raise ValueError("a menu needs at least one item")
        super().__init__(navigator)
        self.items = list(items)
        self.line_height = line_height
        self.display_height = display_height
        self.first = 0
        self.index = 0
        for item in self.items:
            if item.screen is not None:
                item.screen.parent = self

    @property
    def menu_line_height(self) -> int:
        return self.line_height * 15 // 10

    def max_items_on_screen(self) -> int:
        """Return how many menu lines fit on the display."""
        return self.display_height // self.menu_line_height

    def visible_items(self) -> list[MenuItem]:
        """Return the items currently on screen, top first."""
        count = min(len(self.items), self.max_items_on_screen())
        return self.items[self.first : self.first + count]

    @property
    def can_scroll_up(self) -> bool:
        return self.first > 0

    @property
    def can_scroll_down(self) -> bool:
        return self.first < len(self.items) - self.max_items_on_screen()

    def show(self) -> str:
        lines = []
        for offset, item in enumerate(self.visible_items()):
            marker = "> " if self.first + offset == self.index else "  "
            lines.append(marker + item.name)
        return "\n".join(lines)

    def menu(self) -> None:
        self.navigator.set_screen(self.items[self.index].screen)

    def back(self) -> None:
        self.navigator.set_screen(self.parent)

    def up(self) -> None:
        self.index = max(self.index - 1, 0)
        if self.index < self.first:
            self.first = self.index
        self._redraw()

    def down(self) -> None:
        self.index = min(self.index + 1, len(self.items) - 1)
        shown = self.max_items_on_screen()
        if self.index >= self.first + shown:
            self.first = self.index - shown + 1
        self._redraw()


@dataclass
class CarouselItem:
    """A carousel page: the splash shown and an optional screen it opens."""

    splash: Screen
    child: Optional[Screen] = None


class CarouselScreen(Screen):
    """Cycle through splash screens with up and down, wrapping at the ends."""

    def __init__(self, navigator: Navigator, items: Sequence[CarouselItem]) -> None:
        if not items:
            raise ValueError("a carousel needs at least one item")
        super().__init__(navigator)
        self.items = list(items)
        self.index = 0
        for item in self.items:
            item.splash.parent = self
            if item.child is not None:
                item.child.parent = self

    def show(self) -> str:
        return self.items[self.index].splash.show()

    def menu(self) -> None:
        child = self.items[self.index].child
        if child is not None:
            self.navigator.set_screen(child)

    def back(self) -> None:
        self.index = 0
        self._redraw()

    def up(self) -> None:
        self.index = (self.index - 1) % len(self.items)
        self._redraw()

    def down(self) -> None:
        self.index = (self.index + 1) % len(self.items)
        self._redraw()


class SetTimeScreen(Screen):
    """Edit hour, minute, year, month and day in turn.

    Up and down step the selected field, wrapping within its range. Menu
    moves to the next field and commits after the last; back moves to the
    previous field and reverts from the first. Either way the parent
    screen is shown again.
    """

    FIELDS = (
        ("hour", 0, 23),
        ("minute", 0, 59),
        ("year", 2020, 2099),
        ("month", 1, 12),
        ("day", 1, 31),
    )
    # Allowance for the time taken to upload and start.
    COMMIT_FUDGE = timedelta(seconds=10)

    def __init__(
        self,
        navigator: Navigator,
        hour: int,
        minute: int,
        year: int,
        month: int,
        day: int,
    ) -> None:
        super().__init__(navigator)
        self.hour = hour
        self.minute = minute
        self.year = year
        self.month = month
        self.day = day
        self.set_index = 0
        self.committed = False
        self.reverted = False
        self.result: Optional[datetime] = None

    @property
    def field(self) -> str:
        """Name of the field being edited."""
        return self.FIELDS[self.set_index][0]

    def show(self) -> str:
        return (
            f"{self.hour:2d}:{self.minute:02d}\n"
            f"{self.year}/{self.month:02d}/{self.day:02d}"
        )

    def up(self) -> None:
        name, low, high = self.FIELDS[self.set_index]
        value = getattr(self, name)
        setattr(self, name, high if value <= low else value - 1)
        self._redraw()

    def down(self) -> None:
        name, low, high = self.FIELDS[self.set_index]
        value = getattr(self, name)
        setattr(self, name, low if value >= high else value + 1)
        self._redraw()

    def back(self) -> None:
        if self.set_index == 0:
            self.reverted = True
            self._finish()
        else:
            self.set_index -= 1
            self._redraw()

    def menu(self) -> None:
        if self.set_index == len(self.FIELDS) - 1:
            self.result = (
                datetime(self.year, self.month, self.day, self.hour, self.minute)
                + self.COMMIT_FUDGE
            )
            self.committed = True
            self._finish()
        else:
            self.set_index += 1
            self._redraw()

    def _finish(self) -> None:
        self.set_index = 0
        if self.navigator is not None:
            self.navigator.set_screen(self.parent)