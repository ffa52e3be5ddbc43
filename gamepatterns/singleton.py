"""Games sharing one settings object."""

from __future__ import annotations


class Settings:
    """Display and input settings; one shared instance is handed out."""

    FOV = 90
    _instance: Settings | None = None

    def __init__(self) -> None:
        self.resolution_x = 0
        self.resolution_y = 0
        self.sensitivity = 0.0

    @classmethod
    def instance(cls) -> Settings:
        """Return the shared settings object."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def change_sensitivity(self, sensitivity: float) -> None:
        self.sensitivity = sensitivity
        print(f"sensitivity changed! {sensitivity:g}")

    def change_resolution(self, resolution_x: int, resolution_y: int) -> None:
        self.resolution_x = resolution_x
        self.resolution_y = resolution_y
        print(f"resolution changed! {resolution_x} x {resolution_y}")


class Game:
    """A game that changes the settings it was given."""

    def __init__(self, settings: Settings, name: str) -> None:
        print(f"{name} game created")
        self.settings = settings
        self.name = name

    def change_sensitivity(self, sensitivity: float) -> None:
        self.settings.change_sensitivity(sensitivity)

    def change_resolution(self, resolution_x: int, resolution_y: int) -> None:
        self.settings.change_resolution(resolution_x, resolution_y)


def main(argv: list[str] | None = None) -> int:
    """Let two games change the shared resolution."""
    print("Hello, World!")
    settings = Settings.instance()
    first = Game(settings, "Valorant")
    second = Game(settings, "Apex")
    first.change_resolution(2137, 6969)
    second.change_resolution(21, 37)
    return 0