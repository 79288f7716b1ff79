"""Tests for numpy views of sparse cell sets."""

import pytest
import numpy as np
from ndlife.core.dense import bounding_box, cells_from_array, cells_to_array, center_of_mass


class TestBoundingBox:
    """Test bounding box computation."""

    def test_empty(self):
        assert bounding_box([]) is None

    def test_2d(self):
        assert bounding_box({(0, 0), (3, -2), (1, 5)}) == ((0, -2), (3, 5))

    def test_3d(self):
        assert bounding_box({(1, 1, 1)}) == ((1, 1, 1), (1, 1, 1))

    def test_mixed_dimensions_rejected(self):
        with pytest.raises(ValueError):
            bounding_box([(0, 0), (1, 1, 1)])


class TestCenterOfMass:
    """Test centroid computation."""

    def test_empty(self):
        assert center_of_mass([]) == ()

    def test_block(self):
        assert center_of_mass({(0, 0), (0, 1), (1, 0), (1, 1)}) == (0.5, 0.5)

    def test_single_cell(self):
        assert center_of_mass({(-3, 4, 7)}) == (-3.0, 4.0, 7.0)


class TestArrayConversion:
    """Test conversion to and from dense boolean arrays."""

    def test_to_array(self):
        array, origin = cells_to_array({(-1, 0), (1, 2)})
        assert origin == (-1, 0)
        assert array.shape == (3, 3)
        assert array.dtype == bool
        assert array[0, 0]
        assert array[2, 2]
        assert int(np.sum(array)) == 2

    def test_to_array_empty(self):
        with pytest.raises(ValueError, match="empty"):
            cells_to_array(set())

    def test_from_array(self):
        array = np.array([[True, False], [False, True]], dtype=bool)
        assert cells_from_array(array) == {(0, 0), (1, 1)}
        assert cells_from_array(array, origin=(10, -5)) == {(10, -5), (11, -4)}

    def test_from_int_array(self):
        """Non-boolean arrays are treated as truthy/falsy."""
        array = np.array([[0, 2], [0, 0]])
        assert cells_from_array(array) == {(0, 1)}

    def test_from_array_origin_mismatch(self):
        with pytest.raises(ValueError, match="doesn't match"):
            cells_from_array(np.zeros((2, 2), dtype=bool), origin=(0, 0, 0))

    def test_round_trip_3d(self):
        cells = {(0, 0, 0), (2, -1, 5), (-4, 3, 1)}
        array, origin = cells_to_array(cells)
        assert array.shape == (7, 5, 6)
        assert cells_from_array(array, origin) == cells


class TestLargeCoordinates:
    """Test coordinates beyond the int64 range."""

    def setup_method(self):
        self.far = 2 ** 70
        self.cells = {(self.far, -self.far), (self.far + 2, -self.far + 1)}

    def test_bounding_box(self):
        assert bounding_box(self.cells) == (
            (self.far, -self.far),
            (self.far + 2, -self.far + 1),
        )

    def test_center_of_mass(self):
        x, y = center_of_mass(self.cells)
        assert x == pytest.approx(float(self.far))
        assert y == pytest.approx(float(-self.far))

    def test_round_trip(self):
        """Only offsets within the pattern enter the array."""
        array, origin = cells_to_array(self.cells)
        assert origin == (self.far, -self.far)
        assert array.shape == (3, 2)
        assert cells_from_array(array, origin) == self.cells

    def test_center_of_mass_mixed_dimensions_rejected(self):
        with pytest.raises(ValueError, match="same dimension"):
            center_of_mass([(self.far, 0), (0,)])
