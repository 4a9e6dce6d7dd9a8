"""
Rotations between the coordinate frames used alongside magnetic field samples

Frames:
    ENU - east, north, up (local tangent plane)
    NED - north, east, down (local tangent plane)
    FLU - forward, left, up (vehicle body)
    FRD - forward, right, down (vehicle body)

Quaternions are Hamilton quaternions ordered (w, x, y, z).
"""

__all__ = [
    'Q_ENU_TO_NED', 'Q_FLU_TO_FRD', 'Q_FRD_TO_FLU', 'Q_NED_TO_ENU',
    'quaternion_to_dcm', 'rotate_vector'
]

import math

import numpy as np
from numpy.linalg import norm


def _freeze(quaternion) -> np.ndarray:
    quaternion = np.array(quaternion, dtype=np.float64)
    quaternion.setflags(write=False)
    return quaternion


# +PI/2 about Z followed by +PI about the new X axis. Symmetric, so it also maps NED to ENU.
Q_ENU_TO_NED = _freeze([0.0, math.sqrt(0.5), math.sqrt(0.5), 0.0])
Q_NED_TO_ENU = Q_ENU_TO_NED

# +PI about the forward axis. Symmetric, so it also maps FRD to FLU.
Q_FLU_TO_FRD = _freeze([0.0, 1.0, 0.0, 0.0])
Q_FRD_TO_FLU = Q_FLU_TO_FRD


def quaternion_to_dcm(quaternion) -> np.ndarray:
    """
    Converts a rotation quaternion to its direction cosine matrix. The quaternion is
    normalized first.

    Args:
        quaternion:
            An array-like of (w, x, y, z)

    Returns:
        3x3 np.ndarray
    """
    quaternion = np.asarray(quaternion, dtype=np.float64)
    magnitude = norm(quaternion)
    if quaternion.shape != (4,) or magnitude == 0:
        raise ValueError(f'Expected a non-zero (w, x, y, z) quaternion, got {quaternion}')

    w, x, y, z = quaternion / magnitude
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ])


def rotate_vector(quaternion, vectors) -> np.ndarray:
    """
    Rotates a vector, or an (N, 3) array of vectors, by a quaternion.

    Args:
        quaternion:
            An array-like of (w, x, y, z)

        vectors:
            A 3-vector or an (N, 3) array of 3-vectors

    Returns:
        np.ndarray shaped like vectors
    """
    vectors = np.asarray(vectors, dtype=np.float64)
    return (quaternion_to_dcm(quaternion) @ vectors.T).T
