import pytest

from gamepatterns.factory_method import (
    Ammo,
    Bullet,
    BulletFactory,
    Factory,
    Rocket,
    RocketFactory,
    main,
)


def test_rocket_factory_makes_rockets():
    factory = RocketFactory()
    assert factory.name == "RocketFabric1"
    assert isinstance(factory.create_ammo(), Rocket)


def test_bullet_factory_makes_bullets():
    factory = BulletFactory()
    assert factory.name == "BulletFabric1"
    assert isinstance(factory.create_ammo(), Bullet)


def test_each_call_makes_a_new_piece():
    factory = BulletFactory()
    pieces = [factory.create_ammo() for _ in range(3)]
    assert [type(piece) for piece in pieces] == [Bullet, Bullet, Bullet]
    assert len({id(piece) for piece in pieces}) == 3


def test_bullet_damage_message(capsys):
    messages = Bullet().deal_damage()
    assert messages == ["bullet deals 3 damage!"]
    assert capsys.readouterr().out == "bullet deals 3 damage!\n"


def test_rocket_damage_then_explodes(capsys):
    messages = Rocket().deal_damage()
    assert messages == ["Rocket deals 10 damage!", "Rocked explodes!"]
    assert capsys.readouterr().out.splitlines() == messages


def test_explode_is_static(capsys):
    assert Rocket.explode() == "Rocked explodes!"
    assert capsys.readouterr().out == "Rocked explodes!\n"


def test_generic_ammo_deals_nothing(capsys):
    assert Ammo().deal_damage() == []
    assert capsys.readouterr().out == ""


def test_factory_is_abstract():
    with pytest.raises(TypeError):
        Factory("plain")


def test_default_creation_makes_bullets(capsys):
    ammo = Factory.create_ammo(RocketFactory())
    assert ammo.deal_damage() == ["bullet deals 3 damage!"]
    assert capsys.readouterr().out == "bullet deals 3 damage!\n"


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Hello, World!",
        "Rocket deals 10 damage!",
        "Rocked explodes!",
        "bullet deals 3 damage!",
    ]