"""Trees sharing textures through a caching loader."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Texture:
    name: str


class TextureLoader:
    """Creates each named texture once and hands out the shared instance."""

    def __init__(self) -> None:
        self._textures: dict[str, Texture] = {}

    def create_texture(self, name: str) -> Texture:
        texture = self._textures.get(name)
        if texture is None:
            texture = self._textures[name] = Texture(name)
        return texture

    def __len__(self) -> int:
        return len(self._textures)


class Tree:
    def __init__(self) -> None:
        self.texture: Texture | None = None

    def assign_texture(self, texture: Texture) -> None:
        self.texture = texture

    def texture_name(self) -> str:
        if self.texture is None:
            raise ValueError("tree has no texture assigned")
        return self.texture.name


def main(argv: list[str] | None = None) -> int:
    """Assign textures to a tree and print their names."""
    loader = TextureLoader()
    tree = Tree()
    for name in ("small", "small", "big"):
        tree.assign_texture(loader.create_texture(name))
        print(tree.texture_name())
    return 0