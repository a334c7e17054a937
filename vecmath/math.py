import numpy as np

class Vector3D:
    def __init__(self, x=0, y=0, z=0):
        self.v = np.array([x, y, z], dtype=float)

    @property
    def x(self):
        return float(self.v[0])

    @property
    def y(self):
        return float(self.v[1])

    @property
    def z(self):
        return float(self.v[2])

    def __add__(self, other):
        return Vector3D(*(self.v + other.v))

    def __sub__(self, other):
        return Vector3D(*(self.v - other.v))

    def __mul__(self, scalar):
        return Vector3D(*(self.v * scalar))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __neg__(self):
        return Vector3D(*(-self.v))

    def dot(self, other):
        """Return scalar dot‐product between two vectors."""
        return float(np.dot(self.v, other.v))

    def cross(self, other):
        return Vector3D(*np.cross(self.v, other.v))

    def magnitude(self):
        return float(np.linalg.norm(self.v))

    def clone(self):
        return Vector3D(*self.v)

    def apply_rotation(self, quaternion):
        # Rotates this vector in place by the given quaternion
        R = quaternion.as_rotation_matrix()
        self.v = R @ self.v

    def __repr__(self):
        return f"Vector3D({self.v[0]}, {self.v[1]}, {self.v[2]})"


class Quaternion:
    """Rotation quaternion stored scalar-first as ``q = [w, x, y, z]``."""

    def __init__(self, w=1.0, x=0.0, y=0.0, z=0.0):
        self.q = np.array([w, x, y, z], dtype=float)

    @property
    def w(self):
        return float(self.q[0])

    @property
    def x(self):
        return float(self.q[1])

    @property
    def y(self):
        return float(self.q[2])

    @property
    def z(self):
        return float(self.q[3])

    def as_rotation_matrix(self):
        w, x, y, z = self.q
        return np.array([
            [1 - 2*y*y - 2*z*z, 2*x*y - 2*z*w, 2*x*z + 2*y*w],
            [2*x*y + 2*z*w, 1 - 2*x*x - 2*z*z, 2*y*z - 2*x*w],
            [2*x*z - 2*y*w, 2*y*z + 2*x*w, 1 - 2*x*x - 2*y*y]
        ], dtype=float)

    @staticmethod
    def from_axis_angle(axis, angle):
        axis = np.asarray(axis, dtype=float)
        with np.errstate(divide='ignore', invalid='ignore'):
            axis = axis / np.linalg.norm(axis)
        sin_a = np.sin(angle / 2)
        cos_a = np.cos(angle / 2)

        w = cos_a
        x = axis[0] * sin_a
        y = axis[1] * sin_a
        z = axis[2] * sin_a

        return Quaternion(w, x, y, z)

    def __repr__(self):
        return f"Quaternion({self.q[0]}, {self.q[1]}, {self.q[2]}, {self.q[3]})"
