import numpy as np
import pytest

from geomaggrid.frames import *


def test_quaternion_to_dcm():
    np.testing.assert_allclose(
        quaternion_to_dcm(Q_ENU_TO_NED),
        [[0, 1, 0], [1, 0, 0], [0, 0, -1]],
        atol=1e-12
    )
    np.testing.assert_allclose(
        quaternion_to_dcm(Q_FLU_TO_FRD),
        [[1, 0, 0], [0, -1, 0], [0, 0, -1]],
        atol=1e-12
    )
    np.testing.assert_allclose(quaternion_to_dcm([1, 0, 0, 0]), np.eye(3))

    # Non-unit quaternions are normalized
    np.testing.assert_allclose(quaternion_to_dcm([2, 0, 0, 0]), np.eye(3))

    with pytest.raises(ValueError):
        quaternion_to_dcm([0, 0, 0, 0])

    with pytest.raises(ValueError):
        quaternion_to_dcm([1, 0, 0])


def test_rotate_vector():
    np.testing.assert_allclose(rotate_vector(Q_ENU_TO_NED, [1, 2, 3]), [2, 1, -3], atol=1e-12)
    np.testing.assert_allclose(rotate_vector(Q_FLU_TO_FRD, [1, 2, 3]), [1, -2, -3], atol=1e-12)

    # 90 degrees about Z
    quat = [np.cos(np.pi / 4), 0, 0, np.sin(np.pi / 4)]
    np.testing.assert_allclose(rotate_vector(quat, [1, 0, 0]), [0, 1, 0], atol=1e-12)

    vectors = np.array([[1, 2, 3], [4, 5, 6]])
    result = rotate_vector(Q_ENU_TO_NED, vectors)
    assert result.shape == (2, 3)
    np.testing.assert_allclose(result, [[2, 1, -3], [5, 4, -6]], atol=1e-12)


def test_frame_rotations_symmetric():
    vector = [0.3, -1.2, 4.5]
    for quat, inverse in ((Q_ENU_TO_NED, Q_NED_TO_ENU), (Q_FLU_TO_FRD, Q_FRD_TO_FLU)):
        np.testing.assert_allclose(
            rotate_vector(inverse, rotate_vector(quat, vector)),
            vector,
            atol=1e-12
        )


def test_frame_constants_read_only():
    assert not Q_ENU_TO_NED.flags.writeable
    assert not Q_FLU_TO_FRD.flags.writeable
