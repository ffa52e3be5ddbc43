import pytest

from gamepatterns.prototype import TIR, Car, RaceCar, main


def test_race_car_clone_is_equal_but_separate():
    prototype = RaceCar("Race engine", 300)
    copy = prototype.clone()
    assert copy == prototype
    assert copy is not prototype
    assert isinstance(copy, RaceCar)


def test_changing_clone_leaves_prototype():
    prototype = RaceCar("Race engine", 300)
    copy = prototype.clone()
    copy.engine = "spare"
    copy.max_speed = 120
    assert prototype.engine == "Race engine"
    assert prototype.max_speed == 300


def test_tir_clone_is_equal_but_separate():
    prototype = TIR("TIR engine", 3000)
    copy = prototype.clone()
    assert copy == prototype
    assert copy is not prototype
    copy.weight = 10
    assert prototype.weight == 3000


def test_drive_sound(capsys):
    assert RaceCar("Race engine", 300).drive() == "vroom vroom"
    assert TIR("TIR engine", 3000).drive() == "vroom vroom"
    assert capsys.readouterr().out == "vroom vroom\nvroom vroom\n"


def test_extras(capsys):
    assert RaceCar("Race engine", 300).slide_spoiler() == "spoiler slided"
    assert TIR("TIR engine", 3000).attach_semi_trailer() == "spoiler slided"
    assert capsys.readouterr().out.count("spoiler slided") == 2


def test_car_is_abstract():
    with pytest.raises(TypeError):
        Car()


def test_main_drives_four_times(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["vroom vroom"] * 4