import math

import pytest

from debtoolkit.clock import (
    DAY_FACE,
    NIGHT_FACE,
    SECOND_SETTLE_STEP,
    Clock,
    HandAngles,
    radians,
)


def test_radians_of_half_turn():
    assert radians(180) == pytest.approx(math.pi)


def test_radians_of_zero():
    assert radians(0) == 0.0


def test_analog_preferred_sizes():
    clock = Clock()
    assert clock.preferred_width() == (200, 316)
    assert clock.preferred_height() == (200, 200)


def test_digital_preferred_sizes():
    clock = Clock(digital=True)
    assert clock.preferred_width() == (316, 316)
    assert clock.preferred_height() == (125, 200)


def test_switching_to_digital_changes_minimum():
    clock = Clock()
    clock.digital = True
    assert clock.preferred_width()[0] == 316


def test_digit_layout_digits():
    layout = Clock(digital=True).digit_layout(12, 34, 50)
    assert [digit for digit, _ in layout] == [1, 2, 3, 4]


def test_digit_layout_pads_single_digits():
    layout = Clock(digital=True).digit_layout(7, 5, 50)
    assert [digit for digit, _ in layout] == [0, 7, 0, 5]


def test_digit_layout_zero_width_offsets():
    layout = Clock(digital=True).digit_layout(0, 0, 0)
    assert [x for _, x in layout] == [0, 10, 30, 40]


def test_digit_layout_offsets_increase():
    xs = [x for _, x in Clock().digit_layout(23, 59, 40)]
    assert xs == sorted(xs)
    assert xs[0] == 0
    assert xs[2] - xs[1] > xs[1] - xs[0]


def test_digit_layout_rejects_bad_hour():
    with pytest.raises(ValueError):
        Clock().digit_layout(24, 0, 10)


def test_digit_layout_rejects_negative_width():
    with pytest.raises(ValueError):
        Clock().digit_layout(1, 1, -1)


@pytest.mark.parametrize("hour", [7, 12, 17])
def test_day_face(hour):
    assert Clock().face(hour) == DAY_FACE


@pytest.mark.parametrize("hour", [0, 6, 18, 23])
def test_night_face(hour):
    assert Clock().face(hour) == NIGHT_FACE


def test_face_rejects_bad_hour():
    with pytest.raises(ValueError):
        Clock().face(-1)


def test_hand_angles_at_midnight():
    assert Clock().hand_angles(0, 0) == HandAngles(0.0, 0.0, 0.0)


def test_hour_hand_at_six():
    angles = Clock().hand_angles(6, 0)
    assert angles.hour == pytest.approx(math.pi)


def test_minute_hand_at_half_hour():
    angles = Clock().hand_angles(0, 30)
    assert angles.minute == pytest.approx(math.pi)


def test_hour_hand_moves_with_minutes():
    clock = Clock()
    assert clock.hand_angles(3, 30).hour > clock.hand_angles(3, 0).hour


def test_hand_angles_rejects_bad_minute():
    with pytest.raises(ValueError):
        Clock().hand_angles(0, 60)


def test_tick_overshoots_true_second():
    clock = Clock()
    clock.tick(15)
    assert clock.second_mod_degree > clock.second_degree
    assert clock.hand_angles(0, 0).second == pytest.approx(
        radians(clock.second_mod_degree)
    )


def test_tick_second_degree_matches_minute_scale():
    clock = Clock()
    clock.tick(30)
    assert radians(clock.second_degree) == pytest.approx(
        clock.hand_angles(0, 30).minute
    )


def test_tick_rejects_bad_second():
    with pytest.raises(ValueError):
        clock = Clock()
        clock.tick(61)


def test_animate_without_tick_is_idle():
    assert Clock().animate() is False


def test_animate_settles_second_hand():
    clock = Clock()
    clock.tick(10)
    frames = 0
    while clock.animate():
        frames += 1
        assert frames < 1000
    assert frames > 0
    assert clock.second_mod_degree <= clock.second_degree
    assert clock.second_mod_degree > clock.second_degree - SECOND_SETTLE_STEP
    assert clock.animate() is False