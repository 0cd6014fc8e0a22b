"""
Tests for obstacle data structures and normal vectors.
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from billiard_coords import (
    Billiard,
    Circular,
    Particle,
    Semicircle,
    ValidationError,
    Wall,
    normalvec,
)


# =============================================================================
# Construction and validation
# =============================================================================

class TestWall:
    """Tests for Wall construction."""

    def test_wall_stores_points_as_float_tuples(self):
        """Array inputs are normalized to immutable tuples of floats."""
        wall = Wall(np.array([0, 1]), [3, 5])
        assert wall.sp == (0.0, 1.0)
        assert wall.ep == (3.0, 5.0)
        assert isinstance(wall.sp[0], float)

    def test_wall_default_normal_is_left_hand(self):
        """Default normal of a wall along +x points along +y."""
        wall = Wall((0.0, 0.0), (2.0, 0.0))
        assert_allclose(wall.normal_array, [0.0, 1.0])

    def test_wall_explicit_normal_is_normalized(self):
        """A given normal is stored with unit length."""
        wall = Wall((0.0, 0.0), (1.0, 0.0), normal=(0.0, -3.0))
        assert_allclose(wall.normal_array, [0.0, -1.0])

    def test_wall_coincident_endpoints_rejected(self):
        """sp == ep raises ValidationError."""
        with pytest.raises(ValidationError, match="endpoints must differ"):
            Wall((1.0, 1.0), (1.0, 1.0))

    def test_wall_zero_normal_rejected(self):
        """A zero normal raises ValidationError."""
        with pytest.raises(ValidationError, match="non-zero"):
            Wall((0.0, 0.0), (1.0, 0.0), normal=(0.0, 0.0))

    def test_wall_wrong_shape_rejected(self):
        """Points with 3 components raise ValidationError."""
        with pytest.raises(ValidationError, match="shape"):
            Wall((0.0, 0.0, 0.0), (1.0, 0.0))

    def test_wall_non_finite_rejected(self):
        """NaN coordinates raise ValidationError."""
        with pytest.raises(ValidationError, match="finite"):
            Wall((np.nan, 0.0), (1.0, 0.0))

    def test_wall_is_frozen(self):
        """Walls cannot be mutated after construction."""
        wall = Wall((0.0, 0.0), (1.0, 0.0))
        with pytest.raises(AttributeError):
            wall.sp = (1.0, 1.0)


class TestSemicircle:
    """Tests for Semicircle construction."""

    def test_semicircle_chord_is_facedir_rotated(self):
        """Chord direction is facedir rotated by +90 degrees."""
        semi = Semicircle((0.0, 0.0), 1.0, (1.0, 0.0))
        assert_allclose(semi.chord_array, [0.0, 1.0])

    def test_semicircle_nearly_unit_facedir_renormalized(self):
        """facedir within tolerance is stored with exact unit length."""
        semi = Semicircle((0.0, 0.0), 1.0, (1.0005, 0.0))
        assert semi.facedir == pytest.approx((1.0, 0.0))

    def test_semicircle_non_unit_facedir_rejected(self):
        """facedir far from unit length raises ValidationError."""
        with pytest.raises(ValidationError, match="unit vector"):
            Semicircle((0.0, 0.0), 1.0, (2.0, 0.0))

    @pytest.mark.parametrize("radius", [0.0, -1.0, float("inf")])
    def test_semicircle_bad_radius_rejected(self, radius):
        """Non-positive or infinite radius raises ValidationError."""
        with pytest.raises(ValidationError, match="Radius"):
            Semicircle((0.0, 0.0), radius, (1.0, 0.0))


class TestCircular:
    """Tests for Circular construction."""

    def test_circular_fields(self):
        circle = Circular([1, 2], 3)
        assert circle.c == (1.0, 2.0)
        assert circle.r == 3.0

    def test_circular_radius_not_a_number_rejected(self):
        with pytest.raises(ValidationError, match="number"):
            Circular((0.0, 0.0), "big")

    def test_circular_hashable(self):
        """Equal obstacles hash equally."""
        assert hash(Circular((0.0, 0.0), 1.0)) == hash(Circular((0, 0), 1))


class TestBilliard:
    """Tests for Billiard container behaviour."""

    def test_billiard_from_list(self, unit_wall, circle_r2):
        """A list of obstacles is stored as a tuple."""
        bd = Billiard([unit_wall, circle_r2])
        assert isinstance(bd.obstacles, tuple)
        assert len(bd) == 2
        assert bd.dimension == 2
        assert bd[1] is circle_r2
        assert list(bd) == [unit_wall, circle_r2]

    def test_billiard_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least one"):
            Billiard(())

    def test_billiard_non_obstacle_rejected(self, unit_wall):
        """Elements other than the three obstacle kinds are rejected."""
        with pytest.raises(ValidationError, match=r"obstacles\[1\]"):
            Billiard((unit_wall, "not an obstacle"))

    def test_billiard_non_sequence_rejected(self, unit_wall):
        with pytest.raises(ValidationError, match="sequence"):
            Billiard({unit_wall})


class TestParticle:
    """Tests for Particle construction."""

    def test_particle_arrays(self):
        p = Particle((1.0, 2.0), (0.0, 1.0))
        assert_allclose(p.pos_array, [1.0, 2.0])
        assert_allclose(p.vel_array, [0.0, 1.0])

    def test_particle_non_unit_velocity_rejected(self):
        with pytest.raises(ValidationError, match="vel must be a unit vector"):
            Particle((0.0, 0.0), (1.0, 1.0))


# =============================================================================
# Normal vectors
# =============================================================================

class TestNormalvec:
    """Tests for normalvec() function."""

    def test_normalvec_wall_independent_of_position(self, unit_wall):
        assert_allclose(normalvec(unit_wall, (0.2, 0.0)), [0.0, 1.0])
        assert_allclose(normalvec(unit_wall, (0.9, 0.0)), [0.0, 1.0])

    def test_normalvec_semicircle_points_to_center(self, unit_semicircle):
        """Semicircle normal points inward, towards the center."""
        assert_allclose(normalvec(unit_semicircle, (-1.0, 0.0)), [1.0, 0.0])
        assert_allclose(normalvec(unit_semicircle, (0.0, 1.0)), [0.0, -1.0])

    def test_normalvec_circular_points_outward(self, circle_r2):
        """Circular normal points away from the center."""
        assert_allclose(normalvec(circle_r2, (0.0, 2.0)), [0.0, 1.0])
        s = np.sqrt(2.0)
        assert_allclose(normalvec(circle_r2, (-s, -s)), [-1 / s, -1 / s])

    def test_normalvec_unknown_obstacle(self):
        with pytest.raises(TypeError, match="Unsupported obstacle type"):
            normalvec(object(), (0.0, 0.0))
