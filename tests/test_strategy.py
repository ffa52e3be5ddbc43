import pytest

from gamepatterns.strategy import Gun, Player, RocketLauncher, Weapon, main


def test_gun_shot(capsys):
    assert Gun(10).shoot("Villan") == ["bullet dealt 10 damage to Villan"]
    assert capsys.readouterr().out == "bullet dealt 10 damage to Villan\n"


def test_rocket_shot_explodes(capsys):
    messages = RocketLauncher(50).shoot("Villan")
    assert messages == ["rocket dealt 50 damage to Villan", "rocket exploded"]
    assert capsys.readouterr().out.splitlines() == messages


def test_player_uses_current_weapon():
    gun = Gun(7)
    player = Player(gun)
    assert player.attack("dummy") == gun.shoot("dummy")
    launcher = RocketLauncher(8)
    player.change_weapon(launcher)
    assert player.weapon is launcher
    assert player.attack("dummy")[-1] == "rocket exploded"


def test_weapon_is_abstract():
    with pytest.raises(TypeError):
        Weapon(1)


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "bullet dealt 10 damage to Villan",
        "rocket dealt 50 damage to Villan",
        "rocket exploded",
    ]