import numpy as np
import pytest

from previewfit.core.affine import AffineTransform


def test_identity():
    transform = AffineTransform.identity()
    np.testing.assert_allclose(transform.matrix, np.eye(3))
    assert transform.is_identity()


def test_scale_keeps_pivot_fixed():
    transform = AffineTransform(scale_x=2.0, scale_y=3.0, pivot_x=10.0, pivot_y=20.0)

    assert transform.map_point(10, 20) == pytest.approx((10, 20))
    assert transform.map_point(11, 20) == pytest.approx((12, 20))
    assert transform.map_point(10, 21) == pytest.approx((10, 23))


def test_positive_rotation_turns_clockwise_on_screen():
    transform = AffineTransform(rotation_degrees=90)
    # x axis maps onto the downward y axis
    assert transform.map_point(1, 0) == pytest.approx((0, 1))


def test_negative_rotation_matrix_is_exact():
    transform = AffineTransform(rotation_degrees=-90)
    np.testing.assert_array_equal(
        transform.matrix[:2, :2], np.array([[0.0, 1.0], [-1.0, 0.0]])
    )
    assert transform.map_point(1, 0) == pytest.approx((0, -1))


def test_rotation_about_pivot():
    transform = AffineTransform(rotation_degrees=180, pivot_x=50, pivot_y=50)
    assert transform.map_point(60, 50) == pytest.approx((40, 50))


def test_rotation_applied_after_scale():
    transform = AffineTransform(scale_x=2.0, scale_y=1.0, rotation_degrees=90)
    assert transform.map_point(1, 0) == pytest.approx((0, 2))


def test_map_points_shape():
    transform = AffineTransform(scale_x=2.0, scale_y=2.0)
    mapped = transform.map_points([(1, 1), (2, 3), (0, 0)])
    assert mapped.shape == (3, 2)
    np.testing.assert_allclose(mapped, [[2, 2], [4, 6], [0, 0]])


def test_cv2_layout():
    transform = AffineTransform(scale_x=1.5, scale_y=0.5, rotation_degrees=-90, pivot_x=4, pivot_y=8)
    cv_matrix = transform.to_cv2()

    assert cv_matrix.shape == (2, 3)
    assert cv_matrix.dtype == np.float32
    np.testing.assert_allclose(cv_matrix, transform.matrix[:2], rtol=1e-6)


def test_values_row_major():
    transform = AffineTransform(scale_x=2.0, scale_y=3.0, pivot_x=1.0, pivot_y=1.0)
    values = transform.values()

    assert len(values) == 9
    assert values[0] == pytest.approx(2.0)
    assert values[2] == pytest.approx(-1.0)
    assert values[4] == pytest.approx(3.0)
    assert values[5] == pytest.approx(-2.0)
    assert values[8] == pytest.approx(1.0)
