"""A gate camera that hides its sensors behind one check."""

from __future__ import annotations

CHECKPOINT = 50
NORMAL_TEMPERATURE = 37


class FaceRecognizer:
    """Face checks; every check passes."""

    def check_eyes(self) -> bool:
        return True

    def check_skin(self) -> bool:
        return True

    def has_mask(self) -> bool:
        return True


class Thermometer:
    def measure_temperature(self, temperature: float) -> bool:
        """Return whether the temperature is exactly normal."""
        return temperature == NORMAL_TEMPERATURE


class Rangefinder:
    def play_communicate(self, position: int) -> bool:
        """Ask the person to stop when at the checkpoint; return whether it spoke."""
        if position == CHECKPOINT:
            print("Prosze pozostac na miejscu")
            return True
        return False


class Camera:
    """Facade over the rangefinder, thermometer and face recognizer."""

    def __init__(self) -> None:
        self.face_recognizer = FaceRecognizer()
        self.thermometer = Thermometer()
        self.rangefinder = Rangefinder()

    def check_person(self, position: int, temperature: float) -> bool:
        """Check a person and announce whether they may pass."""
        self.rangefinder.play_communicate(position)
        faces = self.face_recognizer
        allowed = (
            self.thermometer.measure_temperature(temperature)
            and faces.check_eyes()
            and faces.check_skin()
            and faces.has_mask()
        )
        print("mozesz isc" if allowed else "nie mozesz przejsc")
        return allowed


class Person:
    """A person walking up to the camera."""

    def __init__(self, temperature: float = NORMAL_TEMPERATURE, camera: Camera | None = None) -> None:
        self.camera = camera if camera is not None else Camera()
        self.position = 0
        self.temperature = temperature

    def move_forward(self) -> bool:
        """Walk to the checkpoint and get checked."""
        while self.position < CHECKPOINT:
            self.position += 1
        return self.camera.check_person(self.position, self.temperature)


def main(argv: list[str] | None = None) -> int:
    """Walk one person through the gate."""
    Person().move_forward()
    return 0