"""Parameters of the detector nodes, read from a name-to-value mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from centerpoint_tools.config import CenterPointConfig, DensificationParam, NetworkParam

_NODE_LOGGER = "lidar_centerpoint"
_SINGLE_INFERENCE_LOGGER = "single_inference_lidar_centerpoint"

_MISSING: Any = object()


class MissingParameterError(KeyError):
    """A parameter without a default was not given."""


class NMSType(Enum):
    """Kind of overlap measure used by non-maximum suppression."""

    IOU_BEV = "IoU_BEV"


@dataclass
class NMSParams:
    """Settings of the bird's-eye-view IoU non-maximum suppression."""

    nms_type: NMSType = NMSType.IOU_BEV
    target_class_names: list[str] = field(default_factory=list)
    search_distance_2d: float = 0.0
    iou_threshold: float = 0.0


@dataclass
class NodeParameters:
    """Everything a detector node reads at start-up."""

    score_threshold: float
    circle_nms_dist_threshold: float
    yaw_norm_thresholds: list[float]
    densification_world_frame_id: str
    densification_num_past_frames: int
    trt_precision: str
    encoder_onnx_path: str
    encoder_engine_path: str
    head_onnx_path: str
    head_engine_path: str
    class_names: list[str]
    has_twist: bool
    point_feature_size: int
    max_voxel_size: int
    point_cloud_range: list[float]
    voxel_size: list[float]
    downsample_factor: int
    encoder_in_feature_size: int
    allow_remapping_by_area_matrix: list[int]
    min_area_matrix: list[float]
    max_area_matrix: list[float]
    nms_params: NMSParams | None = None
    build_only: bool = False
    pcd_path: str | None = None
    detections_path: str | None = None

    @property
    def encoder_param(self) -> NetworkParam:
        return NetworkParam(self.encoder_onnx_path, self.encoder_engine_path, self.trt_precision)

    @property
    def head_param(self) -> NetworkParam:
        return NetworkParam(self.head_onnx_path, self.head_engine_path, self.trt_precision)

    @property
    def densification_param(self) -> DensificationParam:
        return DensificationParam(
            self.densification_world_frame_id, self.densification_num_past_frames
        )

    @property
    def config(self) -> CenterPointConfig:
        """The detector configuration these parameters describe."""
        return CenterPointConfig(
            class_size=len(self.class_names),
            point_feature_size=self.point_feature_size,
            max_voxel_size=self.max_voxel_size,
            point_cloud_range=self.point_cloud_range,
            voxel_size=self.voxel_size,
            downsample_factor=self.downsample_factor,
            encoder_in_feature_size=self.encoder_in_feature_size,
            score_threshold=self.score_threshold,
            circle_nms_dist_threshold=self.circle_nms_dist_threshold,
            yaw_norm_thresholds=self.yaw_norm_thresholds,
        )


class _Reader:
    """Typed access to a parameter mapping, with optional defaults."""

    def __init__(self, params: Mapping[str, object]) -> None:
        self._params = params

    def _get(self, name: str, default: Any) -> Any:
        if name in self._params:
            return self._params[name]
        if default is _MISSING:
            raise MissingParameterError(name)
        return default

    @staticmethod
    def _as_double(name: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"parameter {name!r} must be a number, got {value!r}")
        return float(value)

    @staticmethod
    def _as_integer(name: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"parameter {name!r} must be an integer, got {value!r}")
        return value

    @staticmethod
    def _as_string(name: str, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"parameter {name!r} must be a string, got {value!r}")
        return value

    @staticmethod
    def _as_list(name: str, value: Any) -> Sequence[Any]:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeError(f"parameter {name!r} must be a list, got {value!r}")
        return value

    def double(self, name: str, default: Any = _MISSING) -> float:
        return self._as_double(name, self._get(name, default))

    def integer(self, name: str, default: Any = _MISSING) -> int:
        return self._as_integer(name, self._get(name, default))

    def string(self, name: str, default: Any = _MISSING) -> str:
        return self._as_string(name, self._get(name, default))

    def boolean(self, name: str, default: Any = _MISSING) -> bool:
        value = self._get(name, default)
        if not isinstance(value, bool):
            raise TypeError(f"parameter {name!r} must be a boolean, got {value!r}")
        return value

    def doubles(self, name: str) -> list[float]:
        return [self._as_double(name, v) for v in self._as_list(name, self._get(name, _MISSING))]

    def integers(self, name: str) -> list[int]:
        return [self._as_integer(name, v) for v in self._as_list(name, self._get(name, _MISSING))]

    def strings(self, name: str) -> list[str]:
        return [self._as_string(name, v) for v in self._as_list(name, self._get(name, _MISSING))]


def _read_common(
    reader: _Reader, circle_nms_default: Any, world_frame_default: str, logger_name: str
) -> dict[str, Any]:
    values: dict[str, Any] = {
        "score_threshold": reader.double("score_threshold", 0.35),
        "circle_nms_dist_threshold": reader.double(
            "circle_nms_dist_threshold", circle_nms_default
        ),
        "yaw_norm_thresholds": reader.doubles("yaw_norm_thresholds"),
        "densification_world_frame_id": reader.string(
            "densification_world_frame_id", world_frame_default
        ),
        "densification_num_past_frames": reader.integer("densification_num_past_frames", 1),
        "trt_precision": reader.string("trt_precision", "fp32"),
        "encoder_onnx_path": reader.string("encoder_onnx_path"),
        "encoder_engine_path": reader.string("encoder_engine_path"),
        "head_onnx_path": reader.string("head_onnx_path"),
        "head_engine_path": reader.string("head_engine_path"),
        "class_names": reader.strings("class_names"),
        "has_twist": reader.boolean("has_twist", False),
        "point_feature_size": reader.integer("point_feature_size"),
        "max_voxel_size": reader.integer("max_voxel_size"),
        "point_cloud_range": reader.doubles("point_cloud_range"),
        "voxel_size": reader.doubles("voxel_size"),
        "downsample_factor": reader.integer("downsample_factor"),
        "encoder_in_feature_size": reader.integer("encoder_in_feature_size"),
        "allow_remapping_by_area_matrix": reader.integers("allow_remapping_by_area_matrix"),
        "min_area_matrix": reader.doubles("min_area_matrix"),
        "max_area_matrix": reader.doubles("max_area_matrix"),
    }
    return values


def _warn_on_sizes(params: NodeParameters, logger_name: str) -> None:
    logger = logging.getLogger(logger_name)
    if len(params.point_cloud_range) != 6:
        logger.warning("The size of point_cloud_range != 6: use the default parameters.")
    if len(params.voxel_size) != 3:
        logger.warning("The size of voxel_size != 3: use the default parameters.")


def load_node_parameters(params: Mapping[str, object]) -> NodeParameters:
    """Read the parameters of the streaming detector node.

    Raises MissingParameterError for a required parameter that is absent and
    TypeError for a value of the wrong kind.
    """
    reader = _Reader(params)
    values = _read_common(reader, _MISSING, "base_link", _NODE_LOGGER)
    nms = NMSParams(
        nms_type=NMSType.IOU_BEV,
        target_class_names=reader.strings("iou_nms_target_class_names"),
        search_distance_2d=reader.double("iou_nms_search_distance_2d"),
        iou_threshold=reader.double("iou_nms_threshold"),
    )
    result = NodeParameters(**values, nms_params=nms)
    _warn_on_sizes(result, _NODE_LOGGER)
    result.build_only = reader.boolean("build_only", False)
    return result


def load_single_inference_parameters(params: Mapping[str, object]) -> NodeParameters:
    """Read the parameters of the one-shot detector that turns a PCD file into a mesh.

    Raises MissingParameterError for a required parameter that is absent and
    TypeError for a value of the wrong kind.
    """
    reader = _Reader(params)
    values = _read_common(reader, 1.5, "map", _SINGLE_INFERENCE_LOGGER)
    result = NodeParameters(
        **values,
        pcd_path=reader.string("pcd_path"),
        detections_path=reader.string("detections_path"),
    )
    _warn_on_sizes(result, _SINGLE_INFERENCE_LOGGER)
    return result