[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamepatterns"
version = "0.1.0"
description = "Small, runnable examples of classic design patterns built around game-like objects."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "decorator",
    "abstract-factory",
    "facade",
    "flyweight",
    "command",
    "composite",
    "memento",
    "factory-method",
    "observer",
    "prototype",
    "singleton",
    "strategy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamepatterns-decorator = "gamepatterns.decorator:main"
gamepatterns-abstract-factory = "gamepatterns.abstract_factory:main"
gamepatterns-facade = "gamepatterns.facade:main"
gamepatterns-flyweight = "gamepatterns.flyweight:main"
gamepatterns-command = "gamepatterns.command:main"
gamepatterns-composite = "gamepatterns.composite:main"
gamepatterns-memento = "gamepatterns.memento:main"
gamepatterns-factory-method = "gamepatterns.factory_method:main"
gamepatterns-observer = "gamepatterns.observer:main"
gamepatterns-prototype = "gamepatterns.prototype:main"
gamepatterns-singleton = "gamepatterns.singleton:main"
gamepatterns-strategy = "gamepatterns.strategy:main"

[tool.hatch.build.targets.wheel]
packages = ["gamepatterns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
