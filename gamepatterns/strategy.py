"""A player whose attack depends on the weapon held."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Weapon(ABC):
    """A weapon dealing a fixed amount of damage."""

    def __init__(self, damage: int) -> None:
        self.damage = damage

    @abstractmethod
    def shoot(self, opponent: str) -> list[str]:
        """Fire at the opponent and return the messages announced."""

    @abstractmethod
    def _deal_damage(self, opponent: str) -> str:
        """Announce the damage dealt to the opponent."""


class Gun(Weapon):
    def shoot(self, opponent: str) -> list[str]:
        return [self._deal_damage(opponent)]

    def _deal_damage(self, opponent: str) -> str:
        message = f"bullet dealt {self.damage} damage to {opponent}"
        print(message)
        return message


class RocketLauncher(Weapon):
    def shoot(self, opponent: str) -> list[str]:
        return [self._deal_damage(opponent), self.explode()]

    def _deal_damage(self, opponent: str) -> str:
        message = f"rocket dealt {self.damage} damage to {opponent}"
        print(message)
        return message

    def explode(self) -> str:
        message = "rocket exploded"
        print(message)
        return message


class Player:
    def __init__(self, weapon: Weapon) -> None:
        self.weapon = weapon

    def change_weapon(self, weapon: Weapon) -> None:
        self.weapon = weapon

    def attack(self, opponent: str) -> list[str]:
        return self.weapon.shoot(opponent)


def main(argv: list[str] | None = None) -> int:
    """Attack with a gun, then with a rocket launcher."""
    player = Player(Gun(10))
    player.attack("Villan")
    player.change_weapon(RocketLauncher(50))
    player.attack("Villan")
    return 0