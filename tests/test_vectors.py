import math

import pytest

from drills.vectors import magnitude, main, normalize


def test_unit_vector_magnitude():
    assert magnitude([0.0, 1.0, 0.0]) == 1.0


def test_pythagorean_magnitude():
    assert magnitude([3.0, 4.0, 0.0]) == pytest.approx(5.0)


def test_normalized_has_unit_length():
    assert magnitude(normalize([1.0, 2.0, 9.0])) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    original = [1.0, 2.0, 9.0]
    result = normalize(original)
    scale = magnitude(original)
    assert result == pytest.approx([coord / scale for coord in original])
    assert original == [1.0, 2.0, 9.0]


def test_normalize_zero_vector():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_main(capsys):
    main([])
    last = capsys.readouterr().out.splitlines()[-1]
    assert math.isclose(float(last.rsplit(": ", 1)[1]), 1.0)