# gamepatterns

A collection of small, self-contained examples of classic object-oriented
design patterns. Each one is modelled on a little game-flavoured scenario:
pizzas with toppings, consoles with pads, mines on a board and weapons in a
player's hands.

Every pattern lives in its own module. Each module has a `main()` function
that runs a short demonstration and prints what happens. The package has no
dependencies beyond the standard library.

| Pattern          | Module                          | Main classes and functions                     |
|------------------|---------------------------------|------------------------------------------------|
| Decorator        | `gamepatterns.decorator`        | `Pizza`, `Hawaiian`, `Addon`, `Mushrooms`, `Pepper` |
| Abstract factory | `gamepatterns.abstract_factory` | `Console`, `PlayStation`, `Xbox`, `Game`, `Pad` |
| Facade           | `gamepatterns.facade`           | `Person`, `Camera`, `Thermometer`, `Rangefinder`, `FaceRecognizer` |
| Flyweight        | `gamepatterns.flyweight`        | `Texture`, `TextureLoader`, `Tree`             |
| Command          | `gamepatterns.command`          | `Command`, `Jump`, `Run`, `Attack`, `run_commands` |
| Composite        | `gamepatterns.composite`        | `Block`, `GrassBlock`, `Composite`             |
| Memento          | `gamepatterns.memento`          | `Memento`, `MementoManager`, `Player`          |
| Factory method   | `gamepatterns.factory_method`   | `Factory`, `BulletFactory`, `RocketFactory`, `Ammo`, `Bullet`, `Rocket` |
| Observer         | `gamepatterns.observer`         | `Player`, `Mine`, `Item`, `Character`, `Outcome` |
| Prototype        | `gamepatterns.prototype`        | `Car`, `RaceCar`, `TIR`                        |
| Singleton        | `gamepatterns.singleton`        | `Settings`, `Game`                             |
| Strategy         | `gamepatterns.strategy`         | `Weapon`, `Gun`, `RocketLauncher`, `Player`    |

## Installation

```
pip install .
```

Add the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

Each pattern installs a command of its own:

```
gamepatterns-decorator
gamepatterns-abstract-factory
gamepatterns-facade
gamepatterns-flyweight
gamepatterns-command
gamepatterns-composite
gamepatterns-memento
gamepatterns-factory-method
gamepatterns-observer
gamepatterns-prototype
gamepatterns-singleton
gamepatterns-strategy
```

`gamepatterns-observer` is interactive. It plays a walk across a 10 x 10
board with mines at (10, 0) and (0, 10). Enter `1`-`4` to step
(`1` and `2` change X, `3` and `4` change Y) and try to reach (10, 10)
without stepping on a mine. Anything else entered counts as an invalid
choice. The game also ends when standard input runs out.

## Using the classes

The classes can also be used straight from Python. Most actions print their
message and also return it, so they are easy to check:

```python
from gamepatterns.decorator import Hawaiian, Mushrooms, Pepper

pizza = Pepper(Mushrooms(Hawaiian(15)))
print(pizza.cost())          # 25

from gamepatterns.flyweight import TextureLoader

loader = TextureLoader()
assert loader.create_texture("small") is loader.create_texture("small")

from gamepatterns.command import Attack, Jump, run_commands

run_commands([Jump(), None, Attack()])   # ["character jumps"]; stops at None

from gamepatterns.observer import Outcome, Player

player = Player()
player.move([1, 1, 1])       # scripted moves in place of keyboard input
                             # returns Outcome.PLAYING: moves ran out
```

## What it does not do

The examples keep all their state in memory: saved mementos, shared
settings and cached textures live only as long as the process. Nothing is
written to disk, and the observer game has no save, score or replay.