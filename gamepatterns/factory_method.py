"""Factories that each produce their own kind of ammunition."""

from __future__ import annotations

from abc import ABC, abstractmethod

SERIAL_NUMBER = 2137


class Ammo:
    """Generic ammunition; dealing damage does nothing."""

    def deal_damage(self) -> list[str]:
        """Deal damage and return the messages announced."""
        return []


class Bullet(Ammo):
    def __init__(self) -> None:
        self.serial_number = SERIAL_NUMBER

    def deal_damage(self) -> list[str]:
        message = "bullet deals 3 damage!"
        print(message)
        return [message]


class Rocket(Ammo):
    def __init__(self) -> None:
        self.serial_number = SERIAL_NUMBER

    def deal_damage(self) -> list[str]:
        message = "Rocket deals 10 damage!"
        print(message)
        return [message, Rocket.explode()]

    @staticmethod
    def explode() -> str:
        message = "Rocked explodes!"
        print(message)
        return message


class Factory(ABC):
    """A named producer of ammunition."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def create_ammo(self) -> Ammo:
        """Make one piece of ammunition; bullets unless a subclass decides otherwise."""
        return Bullet()


class BulletFactory(Factory):
    def __init__(self) -> None:
        super().__init__("BulletFabric1")

    def create_ammo(self) -> Bullet:
        return Bullet()


class RocketFactory(Factory):
    def __init__(self) -> None:
        super().__init__("RocketFabric1")

    def create_ammo(self) -> Rocket:
        return Rocket()


def main(argv: list[str] | None = None) -> int:
    """Make a rocket and a bullet and fire both."""
    print("Hello, World!")
    rocket = RocketFactory().create_ammo()
    bullet = BulletFactory().create_ammo()
    rocket.deal_damage()
    bullet.deal_damage()
    return 0