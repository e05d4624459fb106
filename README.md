# centerpoint-tools

Pure-Python building blocks for a CenterPoint lidar object detection
pipeline. It has no dependencies beyond the standard library.

## What is inside

- `centerpoint_tools.interpolation`: key checks and zero-order-hold
  resampling. `is_increasing`, `is_not_decreasing`, `validate_keys`,
  `validate_keys_and_values`, `calc_closest_segment_indices`,
  `zero_order_hold` and `zero_order_hold_by_indices`.
- `centerpoint_tools.stopwatch`: `StopWatch` with named `tic`/`toc`
  timers. The output unit is set with `TimeUnit` (`SECONDS`,
  `MILLISECONDS` or `MICROSECONDS`), and the clock can be swapped out.
  `append_timing_record` appends a `timestamp value` line to a file.
- `centerpoint_tools.messages`: dataclasses for geometry and objects.
  Geometry types are `Vector3`, `Quaternion` (with `from_yaw` and
  `rotate`) and `Pose` (with `transform`). Also `Shape`, `ShapeType`,
  `ObjectClassification`, `Header`, `DetectedObject`, `DetectedObjects`,
  `TrackedObject`, `TrackedObjects` and their kinematics types.
- `centerpoint_tools.config`: `CenterPointConfig`, whose grid sizes and
  offsets are derived from the point cloud range and voxel size using
  single-precision arithmetic. Also `NetworkParam`, `DensificationParam`
  (with `pointcloud_cache_size`), `Box3D`, and `get_size_aligned`, which
  rounds a byte size up to a multiple of 256.
- `centerpoint_tools.conversion`: conversion between detected and
  tracked objects. `to_detected_object`, `to_detected_objects`,
  `to_tracked_object` and `to_tracked_objects`.
- `centerpoint_tools.node_params`: reads a detector node's parameters
  from a name-to-value mapping, through `load_node_parameters` and
  `load_single_inference_parameters`. These return a `NodeParameters`,
  which can build the matching `CenterPointConfig`, `NetworkParam` and
  `DensificationParam`. Streaming-node parameters also include an
  `NMSParams`. A missing required parameter raises
  `MissingParameterError`. A value of the wrong kind raises `TypeError`.

## Install

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from centerpoint_tools.config import CenterPointConfig
from centerpoint_tools.interpolation import zero_order_hold
from centerpoint_tools.stopwatch import StopWatch, TimeUnit

config = CenterPointConfig(
    class_size=5,
    point_feature_size=4,
    max_voxel_size=40000,
    point_cloud_range=[-76.8, -76.8, -4.0, 76.8, 76.8, 6.0],
    voxel_size=[0.32, 0.32, 10.0],
    downsample_factor=1,
    encoder_in_feature_size=9,
    score_threshold=0.35,
    circle_nms_dist_threshold=1.5,
    yaw_norm_thresholds=[0.3, 0.3, 0.3, 0.3, 0.0],
)
print(config.grid_size_x, config.down_grid_size_y)

print(zero_order_hold([0.0, 1.0, 2.0], [10, 20, 30], [0.0, 0.5, 1.5, 2.0]))
# [10, 10, 20, 30]

watch = StopWatch(TimeUnit.MILLISECONDS)
watch.tic("processing")
elapsed_ms = watch.toc("processing", reset=True)
```

Invalid keys raise `ValueError`. That covers empty keys, unsorted keys,
fewer than two base keys, and query keys outside the base range.

## What it does not do

This package holds the data types, configuration and helper logic
around a detector. It does not:

- run the neural network or do any GPU work;
- read point cloud files or voxelize points;
- publish or subscribe to messages;
- write detections out as meshes or in any other file format.

There is no command-line entry point.