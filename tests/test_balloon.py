import pytest

from balloondefense.balloon import Balloon


def test_moves_by_speed_towards_next_point():
    balloon = Balloon(0.0, 0.0, [(0, 0), (1, 0), (2, 0)], 0.5)
    balloon.update()
    assert balloon.x == pytest.approx(0.5)
    assert balloon.y == pytest.approx(0.0)
    assert balloon.path_index == 0
    assert balloon.active


def test_moves_vertically():
    balloon = Balloon(0.0, 0.0, [(0, 0), (0, -1)], 0.25)
    balloon.update()
    assert balloon.x == pytest.approx(0.0)
    assert balloon.y == pytest.approx(-0.25)


def test_reaching_a_point_advances_index():
    balloon = Balloon(0.0, 0.0, [(0, 0), (1, 0), (2, 0)], 0.5)
    balloon.update()
    balloon.update()
    assert balloon.x == pytest.approx(1.0)
    assert balloon.path_index == 1
    assert balloon.active


def test_reaching_end_deactivates():
    path = [(0, 0), (1, 0), (1, 1), (2, 1)]
    balloon = Balloon(0.0, 0.0, path, 0.1)
    for _ in range(1000):
        if not balloon.active:
            break
        balloon.update()
    assert not balloon.active
    assert balloon.path_index == len(path) - 1


def test_single_point_path_deactivates_immediately():
    balloon = Balloon(3.0, 4.0, [(3, 4)], 0.1)
    balloon.update()
    assert not balloon.active
    assert (balloon.x, balloon.y) == (3.0, 4.0)


def test_inactive_balloon_does_not_move():
    balloon = Balloon(0.0, 0.0, [(0, 0), (1, 0)], 0.5, active=False)
    balloon.update()
    assert balloon.x == 0.0
    assert not balloon.active