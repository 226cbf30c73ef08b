import pytest

from gamealgos.collision import AABB, Circle, clamp, is_colliding, main


def test_box_edges():
    box = AABB(1, 2, 3, 4)
    assert (box.left, box.right, box.top, box.bottom) == (1, 4, 2, -2)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_separate_boxes():
    assert is_colliding(AABB(1, 2, 1, 1), AABB(3, 3, 1, 1)) is False


def test_overlapping_boxes():
    assert is_colliding(AABB(1, 2, 1, 1), AABB(1.5, 2.5, 1, 1)) is True


def test_touching_boxes_do_not_collide():
    assert is_colliding(AABB(0, 0, 1, 1), AABB(1, 0, 1, 1)) is False


def test_box_collision_is_symmetric():
    a, b = AABB(0, 0, 2, 2), AABB(1, -1, 2, 2)
    assert is_colliding(a, b) == is_colliding(b, a) is True


def test_separate_circles():
    assert is_colliding(Circle(5, 1, 1), Circle(5, 5, 1)) is False


def test_overlapping_circles():
    assert is_colliding(Circle(5, 1, 1), Circle(6, 2, 1)) is True


def test_touching_circles_collide():
    assert is_colliding(Circle(0, 0, 1), Circle(2, 0, 1)) is True


def test_circle_far_from_box():
    assert is_colliding(Circle(5, 1, 1), AABB(1, 2, 1, 1)) is False


def test_circle_near_box():
    assert is_colliding(Circle(2.5, 1, 1), AABB(1, 2, 1, 1)) is True


def test_circle_inside_box():
    assert is_colliding(Circle(2, 2, 0.1), AABB(0, 4, 4, 4)) is True


def test_box_circle_order_does_not_matter():
    box, circle = AABB(1, 2, 1, 1), Circle(2.5, 1, 1)
    assert is_colliding(box, circle) == is_colliding(circle, box)


def test_unsupported_shapes_raise():
    with pytest.raises(TypeError):
        is_colliding(Circle(0, 0, 1), (0, 0))


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line[-1] for line in lines] == ["0", "1", "0", "1", "0", "1"]