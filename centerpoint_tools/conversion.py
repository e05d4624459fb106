"""Conversion between detected and tracked object messages."""

from __future__ import annotations

import copy

from centerpoint_tools.messages import (
    DetectedObject,
    DetectedObjectKinematics,
    DetectedObjects,
    TrackedObject,
    TrackedObjectKinematics,
    TrackedObjects,
)


def to_detected_object(tracked_object: TrackedObject) -> DetectedObject:
    """Build a detected object from a tracked one.

    Position covariance, twist and twist covariance are marked as present.
    """
    kinematics = tracked_object.kinematics
    return DetectedObject(
        existence_probability=tracked_object.existence_probability,
        classification=copy.deepcopy(tracked_object.classification),
        kinematics=DetectedObjectKinematics(
            pose_with_covariance=copy.deepcopy(kinematics.pose_with_covariance),
            has_position_covariance=True,
            orientation_availability=kinematics.orientation_availability,
            twist_with_covariance=copy.deepcopy(kinematics.twist_with_covariance),
            has_twist=True,
            has_twist_covariance=True,
        ),
        shape=copy.deepcopy(tracked_object.shape),
    )


def to_detected_objects(tracked_objects: TrackedObjects) -> DetectedObjects:
    """Convert every tracked object, keeping the header."""
    return DetectedObjects(
        header=copy.deepcopy(tracked_objects.header),
        objects=[to_detected_object(obj) for obj in tracked_objects.objects],
    )


def to_tracked_object(detected_object: DetectedObject) -> TrackedObject:
    """Build a tracked object from a detected one."""
    kinematics = detected_object.kinematics
    return TrackedObject(
        existence_probability=detected_object.existence_probability,
        classification=copy.deepcopy(detected_object.classification),
        kinematics=TrackedObjectKinematics(
            pose_with_covariance=copy.deepcopy(kinematics.pose_with_covariance),
            twist_with_covariance=copy.deepcopy(kinematics.twist_with_covariance),
            orientation_availability=kinematics.orientation_availability,
        ),
        shape=copy.deepcopy(detected_object.shape),
    )


def to_tracked_objects(detected_objects: DetectedObjects) -> TrackedObjects:
    """Convert every detected object, keeping the header."""
    return TrackedObjects(
        header=copy.deepcopy(detected_objects.header),
        objects=[to_tracked_object(obj) for obj in detected_objects.objects],
    )