from centerpoint_tools.conversion import (
    to_detected_object,
    to_detected_objects,
    to_tracked_object,
    to_tracked_objects,
)
from centerpoint_tools.messages import (
    DetectedObject,
    DetectedObjectKinematics,
    DetectedObjects,
    Header,
    ObjectClassification,
    OrientationAvailability,
    Pose,
    PoseWithCovariance,
    Quaternion,
    Shape,
    ShapeType,
    TrackedObject,
    TrackedObjectKinematics,
    TrackedObjects,
    Twist,
    TwistWithCovariance,
    Vector3,
)


def _tracked(prob=0.7, x=1.0):
    return TrackedObject(
        existence_probability=prob,
        classification=[ObjectClassification(label=1, probability=0.9)],
        kinematics=TrackedObjectKinematics(
            pose_with_covariance=PoseWithCovariance(
                pose=Pose(Vector3(x, 2.0, 3.0), Quaternion.from_yaw(0.5)),
                covariance=[0.1] * 36,
            ),
            twist_with_covariance=TwistWithCovariance(
                twist=Twist(linear=Vector3(4.0, 0.0, 0.0)), covariance=[0.2] * 36
            ),
            orientation_availability=OrientationAvailability.SIGN_UNKNOWN,
            is_stationary=True,
        ),
        shape=Shape(type=ShapeType.CYLINDER, dimensions=Vector3(1.0, 1.0, 2.0)),
    )


def _detected(prob=0.4, x=5.0):
    return DetectedObject(
        existence_probability=prob,
        classification=[ObjectClassification(label=2, probability=0.6)],
        kinematics=DetectedObjectKinematics(
            pose_with_covariance=PoseWithCovariance(pose=Pose(Vector3(x, -1.0, 0.5))),
            orientation_availability=OrientationAvailability.AVAILABLE,
            twist_with_covariance=TwistWithCovariance(twist=Twist(linear=Vector3(1.0, 2.0, 0.0))),
        ),
        shape=Shape(dimensions=Vector3(4.0, 2.0, 1.5)),
    )


def test_to_detected_object_copies_fields():
    tracked = _tracked()
    detected = to_detected_object(tracked)
    assert detected.existence_probability == tracked.existence_probability
    assert detected.classification == tracked.classification
    assert detected.kinematics.pose_with_covariance == tracked.kinematics.pose_with_covariance
    assert detected.kinematics.twist_with_covariance == tracked.kinematics.twist_with_covariance
    assert detected.kinematics.orientation_availability == OrientationAvailability.SIGN_UNKNOWN
    assert detected.shape == tracked.shape


def test_to_detected_object_sets_flags():
    kinematics = to_detected_object(_tracked()).kinematics
    assert kinematics.has_position_covariance is True
    assert kinematics.has_twist is True
    assert kinematics.has_twist_covariance is True


def test_to_detected_object_is_independent_copy():
    tracked = _tracked()
    detected = to_detected_object(tracked)
    detected.classification.append(ObjectClassification(label=3))
    detected.kinematics.pose_with_covariance.covariance[0] = 99.0
    assert len(tracked.classification) == 1
    assert tracked.kinematics.pose_with_covariance.covariance[0] == 0.1


def test_to_tracked_object_copies_fields():
    detected = _detected()
    tracked = to_tracked_object(detected)
    assert tracked.existence_probability == detected.existence_probability
    assert tracked.classification == detected.classification
    assert tracked.kinematics.pose_with_covariance == detected.kinematics.pose_with_covariance
    assert tracked.kinematics.twist_with_covariance == detected.kinematics.twist_with_covariance
    assert tracked.kinematics.orientation_availability == OrientationAvailability.AVAILABLE
    assert tracked.kinematics.is_stationary is False
    assert tracked.shape == detected.shape


def test_round_trip_tracked_detected_tracked():
    tracked = _tracked()
    back = to_tracked_object(to_detected_object(tracked))
    assert back.existence_probability == tracked.existence_probability
    assert back.kinematics.pose_with_covariance == tracked.kinematics.pose_with_covariance
    assert back.kinematics.twist_with_covariance == tracked.kinematics.twist_with_covariance
    assert back.shape == tracked.shape


def test_to_detected_objects_keeps_header_and_order():
    header = Header(stamp=12.5, frame_id="base_link")
    tracked = TrackedObjects(header=header, objects=[_tracked(x=1.0), _tracked(x=2.0)])
    detected = to_detected_objects(tracked)
    assert detected.header == header
    xs = [o.kinematics.pose_with_covariance.pose.position.x for o in detected.objects]
    assert xs == [1.0, 2.0]


def test_to_tracked_objects_keeps_header_and_order():
    header = Header(stamp=3.0, frame_id="map")
    detected = DetectedObjects(header=header, objects=[_detected(x=5.0), _detected(x=6.0)])
    tracked = to_tracked_objects(detected)
    assert tracked.header == header
    xs = [o.kinematics.pose_with_covariance.pose.position.x for o in tracked.objects]
    assert xs == [5.0, 6.0]


def test_empty_collections_convert_to_empty():
    assert to_tracked_objects(DetectedObjects()).objects == []
    assert to_detected_objects(TrackedObjects()).objects == []