"""Saving and restoring a player's health."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Memento:
    hp: int


class MementoManager:
    """Keeps saved mementos in order."""

    def __init__(self) -> None:
        self._mementos: list[Memento] = []

    def save(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def load(self, index: int) -> Memento:
        """Return the memento saved at the given position."""
        if not 0 <= index < len(self._mementos):
            raise IndexError(f"no memento at index {index}")
        return self._mementos[index]

    def __len__(self) -> int:
        return len(self._mementos)


class Player:
    def __init__(self, hp: int = 100) -> None:
        self.hp = hp

    def deal_damage(self, damage: int) -> None:
        self.hp -= damage

    def create_memento(self) -> Memento:
        return Memento(self.hp)

    def load_memento(self, memento: Memento) -> None:
        self.hp = memento.hp


def main(argv: list[str] | None = None) -> int:
    """Save, damage and restore a player."""
    manager = MementoManager()
    player = Player()
    print(player.hp)
    manager.save(player.create_memento())
    player.deal_damage(10)
    print(player.hp)
    player.load_memento(manager.load(0))
    print(player.hp)
    return 0