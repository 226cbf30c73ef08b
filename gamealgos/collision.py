"""Axis-aligned box and circle collision tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AABB:
    """Axis-aligned box anchored at its upper-left corner; y grows upwards."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y - self.height


@dataclass
class Circle:
    """Circle given by its centre and radius."""

    x: float
    y: float
    radius: float


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the range [low, high]."""
    return max(low, min(value, high))


def _boxes_collide(a: AABB, b: AABB) -> bool:
    return (
        a.right > b.left
        and a.left < b.right
        and a.bottom < b.top
        and a.top > b.bottom
    )


def _circles_collide(a: Circle, b: Circle) -> bool:
    dx = a.x - b.x
    dy = a.y - b.y
    reach = a.radius + b.radius
    return dx * dx + dy * dy <= reach * reach


def _circle_box_collide(circle: Circle, box: AABB) -> bool:
    closest_x = clamp(circle.x, box.left, box.right)
    closest_y = clamp(circle.y, box.bottom, box.top)
    dx = circle.x - closest_x
    dy = circle.y - closest_y
    return dx * dx + dy * dy <= circle.radius * circle.radius


def is_colliding(a: AABB | Circle, b: AABB | Circle) -> bool:
    """Report whether two shapes overlap.

    Boxes overlap only with positive area; circles and circle/box pairs
    also count touching as a collision.
    """
    if isinstance(a, AABB) and isinstance(b, AABB):
        return _boxes_collide(a, b)
    if isinstance(a, Circle) and isinstance(b, Circle):
        return _circles_collide(a, b)
    if isinstance(a, Circle) and isinstance(b, AABB):
        return _circle_box_collide(a, b)
    if isinstance(a, AABB) and isinstance(b, Circle):
        return _circle_box_collide(b, a)
    raise TypeError(
        f"cannot test collision between {type(a).__name__} and {type(b).__name__}"
    )


def main(argv: list[str] | None = None) -> int:
    """Print the outcome of a few collision checks."""
    a = AABB(1, 2, 1, 1)
    b = AABB(3, 3, 1, 1)
    print(f"1. Is a and b colliding? {int(is_colliding(a, b))}")

    b.x, b.y = 1.5, 2.5
    print(f"2. Is a and b colliding? {int(is_colliding(a, b))}")

    c1 = Circle(5, 1, 1)
    c2 = Circle(5, 5, 1)
    print(f"3. Is c1 and c2 colliding? {int(is_colliding(c1, c2))}")

    c2.x, c2.y = 6, 2
    print(f"4. Is c1 and c2 colliding? {int(is_colliding(c1, c2))}")

    print(f"5. Is a and c1 colliding? {int(is_colliding(c1, a))}")
    c1 = Circle(2.5, 1, 1)
    print(f"6. Is a and c1 colliding? {int(is_colliding(c1, a))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())