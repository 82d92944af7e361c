"""相对位置计算模块单元测试"""

import pytest

from conftest import make_observation, make_set


class TestComputeOffset:
    """测试单个交叉数据点"""

    def test_coincident_directions(self, noon):
        """方向重合: 倾斜角为 0, 旋转角无意义"""
        from relpos.core.offset import compute_offset

        ref = make_observation(10.0, 20.0, noon, label="ffov.fit")
        fol = make_observation(10.0, 20.0, noon + 1.0, label="jfov.fit")
        pair = compute_offset(fol, ref)

        assert pair.tilt == pytest.approx(0.0, abs=1e-6)
        assert 0.0 <= pair.rotation < 360.0

    def test_pair_carries_positions_and_labels(self, noon):
        from relpos.core.offset import compute_offset

        ref = make_observation(10.0, 20.0, noon, label="ffov.fit")
        fol = make_observation(11.0, 22.0, noon, label="jfov.fit")
        pair = compute_offset(fol, ref)

        assert (pair.ra, pair.dec, pair.label) == (11.0, 22.0, "jfov.fit")
        assert (pair.ra0, pair.dec0, pair.label0) == (10.0, 20.0, "ffov.fit")

    def test_north_offset(self, noon):
        """JFoV 位于 FFoV 正北 1 度"""
        from relpos.core.offset import compute_offset

        pair = compute_offset(
            make_observation(10.0, 21.0, noon),
            make_observation(10.0, 20.0, noon),
        )
        assert pair.tilt == pytest.approx(1.0, abs=1e-9)
        assert pair.rotation == pytest.approx(180.0, abs=1e-6)

    def test_east_offset(self, noon):
        """JFoV 位于 FFoV 东侧"""
        from relpos.core.offset import compute_offset

        pair = compute_offset(
            make_observation(10.5, 20.0, noon),
            make_observation(10.0, 20.0, noon),
        )
        assert pair.rotation == pytest.approx(90.0, abs=0.5)
        assert 0.0 < pair.tilt < 0.5

    def test_south_offset_wraps_near_zero(self, noon):
        from relpos.core.offset import compute_offset

        pair = compute_offset(
            make_observation(10.0, 19.0, noon),
            make_observation(10.0, 20.0, noon),
        )
        assert pair.tilt == pytest.approx(1.0, abs=1e-9)
        assert min(pair.rotation, 360.0 - pair.rotation) == pytest.approx(0.0, abs=1e-6)


class TestComputeOffsets:
    """测试运行上下文上的完整计算"""

    def test_single_pair_scenario(self, noon):
        from relpos.core.models import RunContext
        from relpos.core.offset import compute_offsets

        context = RunContext(
            reference=make_set("005", [(10.0, 20.0, noon)]),
            follower=make_set("001", [(10.0, 20.0, noon + 1.0)]),
        )
        pairs = compute_offsets(context)

        assert len(pairs) == 1
        assert context.pairs == pairs
        assert pairs[0].tilt == pytest.approx(0.0, abs=1e-6)

    def test_no_match_scenario(self, noon):
        from relpos.core.models import RunContext
        from relpos.core.offset import compute_offsets

        context = RunContext(
            reference=make_set("005", [(10.0, 20.0, noon)]),
            follower=make_set("001", [(10.0, 20.0, noon + 30.0)]),
        )
        assert compute_offsets(context) == []
        assert context.pairs == []

    def test_uses_context_tolerance(self, noon):
        from relpos.core.models import RunContext
        from relpos.core.offset import compute_offsets

        context = RunContext(
            reference=make_set("005", [(10.0, 20.0, noon)]),
            follower=make_set("001", [(10.0, 20.0, noon + 30.0)]),
            tolerance=60.0,
        )
        assert len(compute_offsets(context)) == 1
