import dataclasses

import pytest

from centerpoint_tools.config import (
    CUDA_ALIGN,
    Box3D,
    CenterPointConfig,
    DensificationParam,
    NetworkParam,
    get_size_aligned,
)


def test_default_range_and_voxels():
    config = CenterPointConfig()
    assert config.range_min_x == pytest.approx(-89.6, abs=1e-5)
    assert config.range_max_z == pytest.approx(5.0)
    assert config.voxel_size_x == pytest.approx(0.32, abs=1e-6)
    assert config.voxel_size_z == pytest.approx(8.0)


def test_default_grid_size():
    config = CenterPointConfig()
    assert config.grid_size_x == 560
    assert config.grid_size_y == config.grid_size_x
    assert config.down_grid_size_x == config.grid_size_x // config.downsample_factor


def test_custom_range_and_voxels():
    config = CenterPointConfig(
        point_cloud_range=[0.0, 0.0, 0.0, 10.0, 20.0, 4.0],
        voxel_size=[1.0, 2.0, 4.0],
        downsample_factor=5,
    )
    assert config.grid_size_x == 10
    assert config.grid_size_y == 10
    assert config.grid_size_z == 1
    assert config.offset_x == pytest.approx(0.5)
    assert config.offset_y == pytest.approx(1.0)
    assert config.down_grid_size_x == 2


def test_wrong_length_range_keeps_defaults():
    default = CenterPointConfig()
    config = CenterPointConfig(point_cloud_range=[1.0, 2.0], voxel_size=[1.0])
    assert config.range_min_x == default.range_min_x
    assert config.voxel_size_y == default.voxel_size_y
    assert config.grid_size_x == default.grid_size_x


@pytest.mark.parametrize("score", [0.0, 1.0, 1.5, -0.2])
def test_score_threshold_out_of_range_keeps_default(score):
    assert CenterPointConfig(score_threshold=score).score_threshold == pytest.approx(0.35)


def test_score_threshold_in_range_is_used():
    assert CenterPointConfig(score_threshold=0.5).score_threshold == 0.5


def test_circle_nms_threshold():
    assert CenterPointConfig(circle_nms_dist_threshold=0.0).circle_nms_dist_threshold == 1.5
    assert CenterPointConfig(circle_nms_dist_threshold=2.0).circle_nms_dist_threshold == 2.0


def test_yaw_norm_thresholds_are_clamped():
    config = CenterPointConfig(yaw_norm_thresholds=[0.5, 1.0, -0.1, 0.3])
    assert config.yaw_norm_thresholds[0] == 0.5
    assert config.yaw_norm_thresholds[1] == 0.0
    assert config.yaw_norm_thresholds[2] == 0.0
    assert config.yaw_norm_thresholds[3] == pytest.approx(0.3, abs=1e-6)


def test_point_feature_size_is_integer():
    config = CenterPointConfig(point_feature_size=4.0, class_size=5)
    assert config.point_feature_size == 4
    assert config.class_size == 5


def test_fixed_network_sizes():
    config = CenterPointConfig()
    assert config.encoder_out_feature_size == 32
    assert config.max_point_in_voxel_size == 32
    assert config.head_out_size == 6


def test_zero_downsample_factor_raises():
    with pytest.raises(ValueError):
        CenterPointConfig(downsample_factor=0)


def test_zero_voxel_size_raises():
    with pytest.raises(ValueError):
        CenterPointConfig(voxel_size=[0.0, 1.0, 1.0])


def test_network_param_fields():
    param = NetworkParam("encoder.onnx", "encoder.engine", "fp32")
    assert param.onnx_path == "encoder.onnx"
    assert param.engine_path == "encoder.engine"
    assert param.trt_precision == "fp32"
    with pytest.raises(dataclasses.FrozenInstanceError):
        param.onnx_path = "other.onnx"


@pytest.mark.parametrize("frames", [0, 1, 4])
def test_densification_cache_size(frames):
    param = DensificationParam("base_link", frames)
    assert param.world_frame_id == "base_link"
    assert param.pointcloud_cache_size == frames + 1


def test_densification_negative_frames_raises():
    with pytest.raises(ValueError):
        DensificationParam("map", -1)


def test_box3d_defaults_and_equality():
    box = Box3D(label=2, score=0.9, x=1.0)
    assert box.label == 2
    assert box.yaw == 0.0
    assert box == Box3D(label=2, score=0.9, x=1.0)


def test_size_aligned_exact_multiple():
    assert get_size_aligned(64, 4) == 64 * 4
    assert get_size_aligned(0, 4) == 0


@pytest.mark.parametrize("num_elem,elem_size", [(1, 4), (65, 4), (1000, 8), (3, 1)])
def test_size_aligned_invariants(num_elem, elem_size):
    size = get_size_aligned(num_elem, elem_size)
    raw = num_elem * elem_size
    assert size % CUDA_ALIGN == 0
    assert raw <= size < raw + CUDA_ALIGN


def test_size_aligned_single_element():
    assert get_size_aligned(1, 4) == CUDA_ALIGN


def test_size_aligned_negative_raises():
    with pytest.raises(ValueError):
        get_size_aligned(-1, 4)