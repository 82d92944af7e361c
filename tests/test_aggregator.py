"""结果汇总模块单元测试"""

import math

import pytest


def _pair(rotation: float, tilt: float):
    from relpos.core.models import MatchedPair

    return MatchedPair(
        ra=0.0, dec=0.0, label="j.fit",
        ra0=0.0, dec0=0.0, label0="f.fit",
        rotation=rotation, tilt=tilt,
    )


class TestWrap:
    """测试角度归算"""

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0), (180.0, 180.0), (-180.0, -180.0),
        (181.0, -179.0), (-181.0, 179.0), (350.0, -10.0), (-350.0, 10.0),
    ])
    def test_wrap180(self, angle, expected):
        from relpos.core.aggregator import wrap180

        assert wrap180(angle) == pytest.approx(expected)

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0), (359.0, 359.0), (360.0, 0.0), (-1.0, 359.0), (725.0, 5.0),
    ])
    def test_wrap360(self, angle, expected):
        from relpos.core.aggregator import wrap360

        assert wrap360(angle) == pytest.approx(expected)


class TestUnwrap:
    """测试旋转角序列展开"""

    def test_unwrap_step(self):
        from relpos.core.aggregator import unwrap_step

        assert unwrap_step(179.0, -179.0) == 181.0
        assert unwrap_step(-179.0, 179.0) == -181.0
        assert unwrap_step(10.0, 20.0) == 20.0

    def test_unwrap_across_boundary(self):
        from relpos.core.aggregator import unwrap_rotations

        assert unwrap_rotations([179.0, -179.0, 179.0]) == [179.0, 181.0, 179.0]

    def test_unwrap_near_zero(self):
        from relpos.core.aggregator import unwrap_rotations

        assert unwrap_rotations([359.0, 1.0, 358.0]) == [359.0, 361.0, 358.0]

    def test_unwrap_empty(self):
        from relpos.core.aggregator import unwrap_rotations

        assert unwrap_rotations([]) == []

    def test_wraparound_mean(self):
        """跨越边界时均值应在 180 附近, 而不是 ~60"""
        from relpos.core.aggregator import summarize

        stats = summarize([_pair(r, 1.0) for r in (179.0, -179.0, 179.0)])
        assert stats.rotation_mean == pytest.approx(539.0 / 3.0)
        assert stats.rotation_min == pytest.approx(179.0)
        assert stats.rotation_max == pytest.approx(181.0)

    def test_display_values_wrapped(self):
        from relpos.core.aggregator import summarize

        stats = summarize([_pair(r, 0.0) for r in (359.0, 1.0, 3.0)])
        # 展开后为 [359, 361, 363]
        assert stats.rotation_min == pytest.approx(359.0)
        assert stats.rotation_max == pytest.approx(3.0)
        assert stats.rotation_mean == pytest.approx(1.0)
        assert stats.rotation_stdev == pytest.approx(math.sqrt(8.0 / 3.0))


class TestSummarize:
    """测试统计结果"""

    def test_tilt_statistics(self):
        from relpos.core.aggregator import summarize

        stats = summarize([_pair(10.0, t) for t in (1.0, 2.0, 3.0)])
        assert stats.count == 3
        assert stats.tilt_mean == pytest.approx(2.0)
        assert stats.tilt_stdev == pytest.approx(math.sqrt(2.0 / 3.0))
        assert stats.tilt_min == 1.0
        assert stats.tilt_max == 3.0

    def test_single_pair(self):
        from relpos.core.aggregator import summarize

        stats = summarize([_pair(45.0, 0.7)])
        assert stats.rotation_mean == pytest.approx(45.0)
        assert stats.rotation_stdev == pytest.approx(0.0)
        assert stats.tilt_stdev == pytest.approx(0.0)

    def test_empty_returns_none(self):
        from relpos.core.aggregator import summarize

        assert summarize([]) is None


class TestBuildRows:
    """测试报告行"""

    def test_relative_columns(self):
        from relpos.core.aggregator import build_rows

        rows = build_rows([_pair(350.0, 1.2)], base_rotation=10.0, base_tilt=2.0)
        assert rows[0].rel_rotation == pytest.approx(20.0)
        assert rows[0].rel_tilt == pytest.approx(0.8)

    def test_default_bases(self):
        from relpos.core.aggregator import build_rows

        rows = build_rows([_pair(90.0, 1.0)])
        assert rows[0].rel_rotation == pytest.approx(-90.0)
        assert rows[0].rel_tilt == pytest.approx(-1.0)

    def test_rows_keep_order(self):
        from relpos.core.aggregator import build_rows

        pairs = [_pair(float(r), 0.0) for r in range(5)]
        rows = build_rows(pairs)
        assert [row.pair for row in rows] == pairs
