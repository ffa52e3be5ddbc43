"""Blocks that can be moved alone or as a group."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Block(ABC):
    @abstractmethod
    def move(self) -> None:
        """Move the block."""

    @abstractmethod
    def rotate(self) -> None:
        """Rotate the block."""


class GrassBlock(Block):
    """A unit grass block with a position."""

    def __init__(self) -> None:
        self.height = self.width = self.length = 1
        self.position_x = self.position_y = self.position_z = 0
        self.animated = False

    @property
    def position(self) -> tuple[int, int, int]:
        return (self.position_x, self.position_y, self.position_z)

    def move(self) -> None:
        self.position_x += 1
        self.position_y += 1
        self.position_z += 1
        print("Block moved")

    def rotate(self) -> None:
        print("Block rotated")

    def animate_grass(self) -> str:
        """Start the grass animation and return the message shown."""
        self.animated = True
        message = "Grass is being animated"
        print(message)
        return message


class Composite(Block):
    """A group of blocks handled as one."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []

    def move(self) -> None:
        for block in self.blocks:
            block.move()

    def rotate(self) -> None:
        for block in self.blocks:
            block.rotate()

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)


def main(argv: list[str] | None = None) -> int:
    """Animate one block, then move a group of four."""
    group = Composite()
    first = GrassBlock()
    first.animate_grass()
    group.add_block(first)
    for _ in range(3):
        group.add_block(GrassBlock())
    group.move()
    return 0