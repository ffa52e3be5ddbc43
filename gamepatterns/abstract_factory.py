"""Consoles that produce matching games and pads."""

from __future__ import annotations

from abc import ABC, abstractmethod

GAME_LAUNCHED = "Game launched! "
PAD_CONNECTED = "Pad connected!"


class Game(ABC):
    """A game that can be launched."""

    @abstractmethod
    def launch(self) -> str:
        """Start the game and return the message shown."""


class Pad:
    """A controller; the generic one reports no connection."""

    def check_connection(self) -> bool:
        """Report the connection state; return whether the pad is connected."""
        return False


class PsGame(Game):
    def launch(self) -> str:
        message = GAME_LAUNCHED
        print(message)
        return message


class PsPad(Pad):
    def check_connection(self) -> bool:
        print(PAD_CONNECTED)
        return True


class XboxGame(Game):
    def launch(self) -> str:
        message = GAME_LAUNCHED
        print(message)
        return message


class XboxPad(Pad):
    def check_connection(self) -> bool:
        print(PAD_CONNECTED)
        return True


class Console(ABC):
    """A family of matching products."""

    @abstractmethod
    def create_game(self) -> Game:
        """Make a game for this console."""

    @abstractmethod
    def create_pad(self) -> Pad:
        """Make a pad for this console."""


class PlayStation(Console):
    def create_game(self) -> PsGame:
        return PsGame()

    def create_pad(self) -> PsPad:
        return PsPad()


class Xbox(Console):
    def create_game(self) -> XboxGame:
        return XboxGame()

    def create_pad(self) -> XboxPad:
        return XboxPad()


def main(argv: list[str] | None = None) -> int:
    """Launch a game and check a pad on each console."""
    consoles = (PlayStation(), Xbox())
    for console in consoles:
        console.create_game().launch()
    for console in consoles:
        console.create_pad().check_connection()
    return 0