"""Results follow the scalar type of the inputs."""
import numpy as np
import pytest

from trilib.core.errors import InvalidArgumentError
from trilib.core.types import AngleUnit
from trilib.core.triangles import angles, area, barycoordinates, centroid, is_acute, is_degenerate, minlength
from trilib.core.vectors import average_value, cross_product, dot_product, length, magnitude


def test_float32_magnitude_stays_float32():
    mag = magnitude(np.array([3.0, 4.0, 0.0], dtype=np.float32))
    assert mag.dtype == np.float32
    assert mag == pytest.approx(5.0, abs=1e-5)


def test_float32_minlength():
    p1 = np.array([0.0, 0.0, 0.0], dtype=np.float32)
    p2 = np.array([3.0, 0.0, 0.0], dtype=np.float32)
    p3 = np.array([0.0, 4.0, 0.0], dtype=np.float32)
    result = minlength(p1, p2, p3)
    assert result.dtype == np.float32
    assert result == pytest.approx(3.0, abs=1e-5)


def test_integer_magnitude():
    mag = magnitude((3, 4, 0))
    assert isinstance(mag, np.integer)
    assert mag == 5


def test_integer_magnitude_truncates():
    # sqrt(2) -> 1
    assert magnitude((1, 1, 0)) == 1


def test_integer_minlength():
    result = minlength((0, 0, 0), (3, 0, 0), (0, 4, 0))
    assert isinstance(result, np.integer)
    assert result == 3


def test_integer_products_are_exact():
    assert dot_product((1, 2, 3), (4, 5, 6)) == 32
    np.testing.assert_array_equal(cross_product((1, 2, 3), (4, 5, 6)), [-3, 6, -3])
    assert cross_product((1, 2, 3), (4, 5, 6)).dtype.kind == 'i'


def test_integer_angles_truncate():
    assert angles((0, 0), (3, 0), (0, 4), unit=AngleUnit.DEGREES) == (90, 53, 36)


def test_integer_centroid_truncates():
    np.testing.assert_array_equal(centroid((0, 0, 0), (3, 0, 0), (0, 4, 0)), [1, 1, 0])


def test_integer_average_truncates():
    assert average_value([1, 2]) == 1


def test_predicates_use_untruncated_values():
    # area 0.5 truncates to 0 but the triangle is not degenerate
    assert area((0, 0), (1, 0), (0, 1)) == 0
    assert not is_degenerate((0, 0), (1, 0), (0, 1))
    assert is_acute((0, 0), (1, 0), (0, 1))


def test_mixed_int_and_float_promotes():
    d = length((0, 0, 0), (1.5, 2.0, 0.0))
    assert d.dtype == np.float64
    assert d == pytest.approx(2.5)


@pytest.mark.parametrize("bad", [
    (1.0,),
    (1.0, 2.0, 3.0, 4.0),
    [[1.0, 2.0], [3.0, 4.0]],
    (True, False, True),
    ('a', 'b', 'c'),
])
def test_malformed_coordinates_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        magnitude(bad)


def test_integer_barycoordinates_truncate():
    bary = barycoordinates((0, 0), (3, 0), (0, 3), (1, 1))
    assert bary.dtype.kind == 'i'
    np.testing.assert_array_equal(bary, [0, 0, 0])
    # float input keeps the weights and their unit sum
    fbary = barycoordinates((0.0, 0.0), (3.0, 0.0), (0.0, 3.0), (1.0, 1.0))
    np.testing.assert_allclose(fbary, [1.0 / 3.0] * 3)
    assert fbary.sum() == pytest.approx(1.0)
