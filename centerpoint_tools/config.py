"""Detector configuration, network and densification parameters, and boxes."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass

CUDA_ALIGN = 256

_DEFAULT_RANGE = (-89.6, -89.6, -3.0, 89.6, 89.6, 5.0)
_DEFAULT_VOXEL_SIZE = (0.32, 0.32, 8.0)


def _f32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


def get_size_aligned(num_elem: int, elem_size: int) -> int:
    """Return the byte size of ``num_elem`` elements rounded up to CUDA_ALIGN."""
    if num_elem < 0 or elem_size < 0:
        raise ValueError("num_elem and elem_size must not be negative")
    size = num_elem * elem_size
    remainder = size % CUDA_ALIGN
    return size if remainder == 0 else size + CUDA_ALIGN - remainder


class CenterPointConfig:
    """Input, network and post-processing settings of the detector.

    Ranges and voxel sizes are held as single-precision values; a range that
    does not have six entries, or a voxel size that does not have three, leaves
    the defaults in place.
    """

    point_dim_size = 3
    max_point_in_voxel_size = 32
    batch_size = 1
    encoder_out_feature_size = 32
    head_out_size = 6
    head_out_offset_size = 2
    head_out_z_size = 1
    head_out_dim_size = 3
    head_out_rot_size = 2
    head_out_vel_size = 2

    def __init__(
        self,
        class_size: int = 3,
        point_feature_size: float = 4,
        max_voxel_size: int = 40000,
        point_cloud_range: Sequence[float] = (),
        voxel_size: Sequence[float] = (),
        downsample_factor: int = 2,
        encoder_in_feature_size: int = 9,
        score_threshold: float = 0.35,
        circle_nms_dist_threshold: float = 1.5,
        yaw_norm_thresholds: Sequence[float] = (),
    ) -> None:
        self.class_size = int(class_size)
        self.point_feature_size = int(_f32(point_feature_size))
        self.max_voxel_size = int(max_voxel_size)

        ranges = point_cloud_range if len(point_cloud_range) == 6 else _DEFAULT_RANGE
        (
            self.range_min_x,
            self.range_min_y,
            self.range_min_z,
            self.range_max_x,
            self.range_max_y,
            self.range_max_z,
        ) = (_f32(v) for v in ranges)

        voxels = voxel_size if len(voxel_size) == 3 else _DEFAULT_VOXEL_SIZE
        self.voxel_size_x, self.voxel_size_y, self.voxel_size_z = (_f32(v) for v in voxels)

        if downsample_factor <= 0:
            raise ValueError("downsample_factor must be positive")
        self.downsample_factor = int(downsample_factor)
        self.encoder_in_feature_size = int(encoder_in_feature_size)

        score = _f32(score_threshold)
        self.score_threshold = score if 0 < score < 1 else _f32(0.35)

        circle = _f32(circle_nms_dist_threshold)
        self.circle_nms_dist_threshold = circle if circle > 0 else _f32(1.5)

        self.yaw_norm_thresholds = [
            t if 0.0 <= t < 1.0 else 0.0 for t in (_f32(v) for v in yaw_norm_thresholds)
        ]

        self.grid_size_x = self._grid_size(self.range_min_x, self.range_max_x, self.voxel_size_x)
        self.grid_size_y = self._grid_size(self.range_min_y, self.range_max_y, self.voxel_size_y)
        self.grid_size_z = self._grid_size(self.range_min_z, self.range_max_z, self.voxel_size_z)
        self.offset_x = _f32(self.range_min_x + _f32(self.voxel_size_x / 2))
        self.offset_y = _f32(self.range_min_y + _f32(self.voxel_size_y / 2))
        self.offset_z = _f32(self.range_min_z + _f32(self.voxel_size_z / 2))
        self.down_grid_size_x = self.grid_size_x // self.downsample_factor
        self.down_grid_size_y = self.grid_size_y // self.downsample_factor

    @staticmethod
    def _grid_size(range_min: float, range_max: float, voxel: float) -> int:
        if voxel <= 0:
            raise ValueError("voxel sizes must be positive")
        cells = _f32(_f32(range_max - range_min) / voxel)
        if cells < 0:
            raise ValueError("point cloud range maximum is below its minimum")
        return int(cells)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(class_size={self.class_size}, "
            f"grid=({self.grid_size_x}, {self.grid_size_y}, {self.grid_size_z}), "
            f"score_threshold={self.score_threshold})"
        )


@dataclass(frozen=True)
class NetworkParam:
    """Where a network's ONNX model and engine live and which precision it uses."""

    onnx_path: str
    engine_path: str
    trt_precision: str


@dataclass(frozen=True)
class DensificationParam:
    """World frame and number of past frames used to densify point clouds."""

    world_frame_id: str
    num_past_frames: int

    def __post_init__(self) -> None:
        if self.num_past_frames < 0:
            raise ValueError("num_past_frames must not be negative")

    @property
    def pointcloud_cache_size(self) -> int:
        """Number of clouds kept: the past frames plus the current one."""
        return self.num_past_frames + 1


@dataclass
class Box3D:
    """A detected 3D box with its class label, score and velocity."""

    label: int = 0
    score: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    yaw: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0