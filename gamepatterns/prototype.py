"""Vehicles copied from prototypes."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod


class Car(ABC):
    """A vehicle that can copy itself and drive."""

    engine: str

    @abstractmethod
    def clone(self) -> Car:
        """Return an independent copy of this car."""

    @abstractmethod
    def drive(self) -> str:
        """Drive and return the sound made."""


@dataclasses.dataclass
class RaceCar(Car):
    engine: str
    max_speed: float

    def clone(self) -> RaceCar:
        return dataclasses.replace(self)

    def drive(self) -> str:
        sound = "vroom vroom"
        print(sound)
        return sound

    def slide_spoiler(self) -> str:
        message = "spoiler slided"
        print(message)
        return message


@dataclasses.dataclass
class TIR(Car):
    engine: str
    weight: float

    def clone(self) -> TIR:
        return dataclasses.replace(self)

    def drive(self) -> str:
        sound = "vroom vroom"
        print(sound)
        return sound

    def attach_semi_trailer(self) -> str:
        message = "spoiler slided"
        print(message)
        return message


def main(argv: list[str] | None = None) -> int:
    """Clone a race car and a truck and drive originals and copies."""
    race_prototype = RaceCar("Race engine", 300)
    race_copy = race_prototype.clone()
    race_prototype.drive()
    race_copy.drive()

    truck_prototype = TIR("TIR engine", 3000)
    truck_copy = truck_prototype.clone()
    truck_prototype.drive()
    truck_copy.drive()
    return 0