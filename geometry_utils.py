import numpy as np

# Quaternions are numpy arrays ordered (x, y, z, w).

UP_AXIS = np.array([0.0, 1.0, 0.0])

_EPSILON = 1e-6


def quat_identity():
    return np.array([0.0, 0.0, 0.0, 1.0])


def quat_normalize(q):
    """
    Return `q` scaled to unit length. A zero quaternion becomes the identity.
    """
    q = np.asarray(q, dtype=float)
    length = np.linalg.norm(q)
    if length == 0.0:
        return quat_identity()
    return q / length


def quat_multiply(a, b):
    """
    Hamilton product a * b. Applying the result to a vector rotates it by
    `b` first, then by `a`.
    """
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array([
        ax * bw + aw * bx + ay * bz - az * by,
        ay * bw + aw * by + az * bx - ax * bz,
        az * bw + aw * bz + ax * by - ay * bx,
        aw * bw - ax * bx - ay * by - az * bz,
    ])


def quat_from_axis_angle(axis, angle):
    """
    Rotation of `angle` radians about `axis` (normalized here).

    Parameters:
    -----------
    axis : sequence of 3 floats
    angle : float
        Angle in radians, right-handed

    Returns:
    --------
    numpy.ndarray
        Unit quaternion (x, y, z, w)
    """
    axis = normalize_vector(axis)
    half = 0.5 * angle
    s = np.sin(half)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, np.cos(half)])


def quat_from_unit_vectors(v_from, v_to):
    """
    Shortest rotation taking the unit vector `v_from` onto the unit vector `v_to`.

    Opposite vectors have no unique shortest rotation; a half turn about an
    axis perpendicular to `v_from` is returned.
    """
    v_from = np.asarray(v_from, dtype=float)
    v_to = np.asarray(v_to, dtype=float)
    r = float(np.dot(v_from, v_to)) + 1.0

    if r < _EPSILON:
        r = 0.0
        if abs(v_from[0]) > abs(v_from[2]):
            q = np.array([-v_from[1], v_from[0], 0.0, r])
        else:
            q = np.array([0.0, -v_from[2], v_from[1], r])
    else:
        cross = np.cross(v_from, v_to)
        q = np.array([cross[0], cross[1], cross[2], r])

    return quat_normalize(q)


def quat_to_matrix(q):
    """
    3x3 rotation matrix of a unit quaternion.
    """
    x, y, z, w = q
    return np.array([
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w)],
        [2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w)],
        [2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y)],
    ])


def rotate_points(points, q):
    """
    Rotate an array of 3D points by the quaternion `q`.

    Parameters:
    -----------
    points : numpy.ndarray
        Array of shape (n, 3) or (3,)
    q : numpy.ndarray
        Unit quaternion (x, y, z, w)

    Returns:
    --------
    numpy.ndarray
        Rotated points, same shape as `points`
    """
    R = quat_to_matrix(q)
    return np.asarray(points, dtype=float) @ R.T


def normalize_vector(v):
    """
    Unit vector along `v`; a zero vector is returned unchanged.
    """
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length == 0.0:
        return v.copy()
    return v / length


def atom_coordinates(atoms):
    """
    Collect atom positions into an (n, 3) array. Works for an empty list.
    """
    if not atoms:
        return np.zeros((0, 3))
    return np.array([[atom.x, atom.y, atom.z] for atom in atoms], dtype=float)
