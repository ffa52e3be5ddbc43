"""A minefield walk where mines watch the player's position."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TextIO

GOAL = (10, 10)
MINE_POSITIONS = ((10, 0), (0, 10))

_MOVES = {
    1: (1, 0),
    2: (-1, 0),
    3: (0, 1),
    4: (0, -1),
}


class Outcome(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Character:
    """Something that notifies observers; the generic one has none."""

    def add_observer(self) -> None:
        """Register observers."""

    def delete_observer(self) -> None:
        """Remove an observer."""

    def update_observers(self) -> bool:
        """Notify observers; return whether any of them reacted."""
        return False


class Item:
    """An item on the board; the generic one does nothing."""

    def action(self) -> None:
        """React to the player."""


class Mine(Item):
    """A mine that explodes when the player steps on it."""

    def __init__(self, position_x: int, position_y: int) -> None:
        self.position_x = position_x
        self.position_y = position_y
        self.exploded = False

    def action(self) -> None:
        self.explode()

    def explode(self) -> str:
        """Set the mine off and return the message shown."""
        self.exploded = True
        message = "Mina wybuchla! "
        print(message)
        return message

    def compare_position(self, x: int, y: int) -> bool:
        """Explode and return True if the given position is the mine's."""
        if (self.position_x, self.position_y) == (x, y):
            self.action()
            return True
        return False


class Player(Character):
    """A player walking a 10x10 board watched by mines."""

    def __init__(self) -> None:
        self.observers: list[Mine] = []
        self.position_x = 0
        self.position_y = 0
        self.is_alive = True
        self.add_observer()

    @property
    def position(self) -> tuple[int, int]:
        return (self.position_x, self.position_y)

    def add_observer(self) -> None:
        self.observers.extend(Mine(x, y) for x, y in MINE_POSITIONS)

    def delete_observer(self) -> None:
        """Remove the most recently added mine."""
        if not self.observers:
            raise IndexError("no observers to delete")
        self.observers.pop()

    def update_observers(self) -> bool:
        return any(mine.compare_position(self.position_x, self.position_y) for mine in self.observers)

    def step(self, choice: int) -> Outcome:
        """Apply one move choice (1-4) and return the state of the game."""
        if not self.is_alive:
            raise RuntimeError("the player is no longer alive")
        delta = _MOVES.get(choice)
        if delta is None:
            print("Wybierz liczbe z zakresu 1-4! ")
        else:
            dx, dy = delta
            self.position_x += dx
            self.position_y += dy
        self.is_alive = not self.update_observers()
        if not self.is_alive:
            print("Przegrales ")
            return Outcome.LOST
        if self.position == GOAL:
            print("Wygrales ")
            return Outcome.WON
        return Outcome.PLAYING

    def move(self, inputs: Iterable[int]) -> Outcome:
        """Play with the given choices until the game ends or they run out."""
        print("Plansza to kwadrat 10x10. W dwoch miejscach są miny. Dojdz do pozycji 10, 10")
        print("1 = krok w gore , 2 = krok w dol, 3 = krok w lewo, 4 = krok w prawo.")
        choices = iter(inputs)
        while self.is_alive:
            print(f"jestes na pozycji X={self.position_x} Y={self.position_y}")
            print("Wpisz liczbe z zakresy 1-4 zeby sie ruszyc: ", end="")
            choice = next(choices, None)
            if choice is None:
                print()
                return Outcome.PLAYING
            outcome = self.step(choice)
            if outcome is not Outcome.PLAYING:
                return outcome
        return Outcome.LOST


def _read_choices(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                yield 0


def main(argv: list[str] | None = None) -> int:
    """Play the minefield game from standard input."""
    print("Hello, World!")
    Player().move(_read_choices(sys.stdin))
    return 0