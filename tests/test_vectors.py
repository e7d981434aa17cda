"""Tests for the 3-vector helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from observing_tools.vectors import (
    add,
    apply,
    apply_transpose,
    dot,
    scale,
    spherical,
    unit_vector,
    vector3,
)


def test_arithmetic_returns_new_arrays() -> None:
    """add/scale/dot behave as plain vector algebra and leave inputs alone."""
    a = vector3(1.0, 2.0, 3.0)
    b = vector3(4.0, 5.0, 6.0)
    total = add(a, b)
    assert np.array_equal(total, [5.0, 7.0, 9.0])
    assert np.array_equal(scale(2.0, a), [2.0, 4.0, 6.0])
    assert dot(a, b) == 32.0
    assert np.array_equal(a, [1.0, 2.0, 3.0])
    assert total is not a


def test_rotation_and_inverse() -> None:
    """apply_transpose undoes apply for a rotation about z."""
    angle = 0.3
    m = np.array(
        [
            [math.cos(angle), math.sin(angle), 0.0],
            [-math.sin(angle), math.cos(angle), 0.0],
            [0.0, 0.0, 1.0],
        ]
    )
    v = vector3(1.0, 0.0, 0.5)
    rotated = apply(m, v)
    assert rotated[0] == pytest.approx(math.cos(angle))
    assert rotated[1] == pytest.approx(-math.sin(angle))
    assert apply_transpose(m, rotated) == pytest.approx(v)


def test_unit_vector_and_spherical() -> None:
    """unit_vector and spherical are inverse; RA is returned in [0, 2pi)."""
    assert unit_vector(0.0, 0.0) == pytest.approx([1.0, 0.0, 0.0])
    assert unit_vector(0.0, math.pi / 2) == pytest.approx([0.0, 0.0, 1.0], abs=1e-15)
    ra, dec = spherical(vector3(0.0, 1.0, 0.0))
    assert ra == pytest.approx(math.pi / 2)
    assert dec == 0.0
    ra, dec = spherical(unit_vector(-1.0, -0.4))
    assert ra == pytest.approx(2.0 * math.pi - 1.0)
    assert dec == pytest.approx(-0.4)
