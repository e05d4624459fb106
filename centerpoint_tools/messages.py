"""Plain data types for detected and tracked objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


@dataclass(frozen=True)
class Vector3:
    """A 3D vector or point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def scaled(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Quaternion:
    """An orientation quaternion; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_yaw(cls, yaw: float) -> Quaternion:
        return cls(0.0, 0.0, math.sin(yaw / 2.0), math.cos(yaw / 2.0))

    def rotate(self, vector: Vector3) -> Vector3:
        """Rotate ``vector`` by this quaternion."""
        axis = Vector3(self.x, self.y, self.z)
        t = axis.cross(vector).scaled(2.0)
        return vector + t.scaled(self.w) + axis.cross(t)


@dataclass
class Pose:
    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)

    def transform(self, point: Vector3) -> Vector3:
        """Map a point from the pose's local frame into the parent frame."""
        return self.orientation.rotate(point) + self.position


def _zero_covariance() -> list[float]:
    return [0.0] * 36


@dataclass
class PoseWithCovariance:
    pose: Pose = field(default_factory=Pose)
    covariance: list[float] = field(default_factory=_zero_covariance)


@dataclass
class Twist:
    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


@dataclass
class TwistWithCovariance:
    twist: Twist = field(default_factory=Twist)
    covariance: list[float] = field(default_factory=_zero_covariance)


class ShapeType(IntEnum):
    BOUNDING_BOX = 0
    CYLINDER = 1
    POLYGON = 2


class OrientationAvailability(IntEnum):
    UNAVAILABLE = 0
    SIGN_UNKNOWN = 1
    AVAILABLE = 2


@dataclass
class Shape:
    type: ShapeType = ShapeType.BOUNDING_BOX
    footprint: list[Vector3] = field(default_factory=list)
    dimensions: Vector3 = field(default_factory=Vector3)


@dataclass
class ObjectClassification:
    label: int = 0
    probability: float = 0.0


@dataclass
class Header:
    stamp: float = 0.0
    frame_id: str = ""


@dataclass
class DetectedObjectKinematics:
    pose_with_covariance: PoseWithCovariance = field(default_factory=PoseWithCovariance)
    has_position_covariance: bool = False
    orientation_availability: OrientationAvailability = OrientationAvailability.UNAVAILABLE
    twist_with_covariance: TwistWithCovariance = field(default_factory=TwistWithCovariance)
    has_twist: bool = False
    has_twist_covariance: bool = False


@dataclass
class DetectedObject:
    existence_probability: float = 0.0
    classification: list[ObjectClassification] = field(default_factory=list)
    kinematics: DetectedObjectKinematics = field(default_factory=DetectedObjectKinematics)
    shape: Shape = field(default_factory=Shape)


@dataclass
class DetectedObjects:
    header: Header = field(default_factory=Header)
    objects: list[DetectedObject] = field(default_factory=list)


@dataclass
class TrackedObjectKinematics:
    pose_with_covariance: PoseWithCovariance = field(default_factory=PoseWithCovariance)
    twist_with_covariance: TwistWithCovariance = field(default_factory=TwistWithCovariance)
    orientation_availability: OrientationAvailability = OrientationAvailability.UNAVAILABLE
    is_stationary: bool = False


@dataclass
class TrackedObject:
    existence_probability: float = 0.0
    classification: list[ObjectClassification] = field(default_factory=list)
    kinematics: TrackedObjectKinematics = field(default_factory=TrackedObjectKinematics)
    shape: Shape = field(default_factory=Shape)


@dataclass
class TrackedObjects:
    header: Header = field(default_factory=Header)
    objects: list[TrackedObject] = field(default_factory=list)