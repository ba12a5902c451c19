"""Camera-like transform used to composite the 3D overlay."""
import numpy as np
from scipy.spatial.transform import Rotation

from ..viewport import ViewportState

DEFAULT_PERSPECTIVE_DEPTH = -0.001


def perspective_transform(
    state: ViewportState,
    depth: float = DEFAULT_PERSPECTIVE_DEPTH
) -> np.ndarray:
    """
    Compose pitch, yaw and a fixed perspective term.

    M = Rx(-tilt) @ Rz(bearing), embedded in a 4x4 homogeneous matrix with
    M[3, 2] = depth. Negative pitch leans the view back as tilt increases.

    Args:
        state: Current view settings
        depth: Perspective-divide entry (row 3, column 2)

    Returns:
        (4, 4) float64 matrix; identity when 3D mode is off
    """
    transform = np.eye(4)
    if not state.enabled:
        return transform

    # Intrinsic X then Z: Rx @ Rz
    rotation = Rotation.from_euler('XZ', [-state.tilt_deg, state.bearing_deg], degrees=True)
    transform[:3, :3] = rotation.as_matrix()
    transform[3, 2] = depth

    return transform


def project_point(transform: np.ndarray, x: float, y: float, z: float = 0.0) -> np.ndarray:
    """
    Apply a transform to a point and perform the perspective divide.

    Args:
        transform: (4, 4) matrix from perspective_transform
        x, y, z: Point in overlay space

    Returns:
        (3,) projected point
    """
    homogeneous = transform @ np.array([x, y, z, 1.0])
    w = homogeneous[3]
    if w == 0:
        return homogeneous[:3]
    return homogeneous[:3] / w
