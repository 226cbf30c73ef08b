"""A small fixed-size hash table of game objects using separate chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class GameObject:
    """A named game entity with a health value."""

    name: str
    health: int


class GameObjectTable:
    """Hash table keyed on object name, resolving collisions by chaining."""

    TABLE_SIZE = 10

    def __init__(self) -> None:
        self._buckets: list[list[GameObject]] = [[] for _ in range(self.TABLE_SIZE)]

    def _index(self, key: str) -> int:
        value = 0
        for byte in key.encode("utf-8"):
            value = (value * 31 + byte) % self.TABLE_SIZE
        return value

    def insert(self, obj: GameObject) -> None:
        """Add an object to the bucket chosen by its name."""
        self._buckets[self._index(obj.name)].append(obj)

    def find(self, key: str) -> GameObject | None:
        """Return the first object stored under ``key``, or None."""
        return next(
            (obj for obj in self._buckets[self._index(key)] if obj.name == key),
            None,
        )

    @property
    def buckets(self) -> tuple[tuple[GameObject, ...], ...]:
        """A read-only view of every bucket, in index order."""
        return tuple(tuple(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[GameObject]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def format_table(self) -> str:
        """Render each bucket as ``[i]: name (health) ...`` on its own line."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            entries = "".join(f"{obj.name} ({obj.health}) " for obj in bucket)
            lines.append(f"[{index}]: {entries}")
        return "\n".join(lines) + "\n"


def _report(found: GameObject | None) -> str:
    if found is None:
        return "Not found."
    return f"Found: {found.name} with {found.health} health."


def main(argv: list[str] | None = None) -> int:
    """Fill a table with a few objects, print it and look two names up."""
    table = GameObjectTable()
    table.insert(GameObject("Runner number 1", 23))
    table.insert(GameObject("Katniss", 54))
    table.insert(GameObject("Triss", 45))
    table.insert(GameObject("Lyra", 5))
    print(table.format_table(), end="")

    print(_report(table.find("Triss")))
    print(_report(table.find("Arnold")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())