"""Tests for log levels"""

import pytest

from timber import LogLevel


class TestLogLevel:
    """Test log level ordering and naming."""

    def test_log_priorities(self):
        assert LogLevel.ALL < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.TRACE
        assert LogLevel.TRACE < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL
        assert LogLevel.FATAL < LogLevel.OFF

    def test_comparisons_follow_rank(self):
        levels = list(LogLevel)
        for lhs in levels:
            for rhs in levels:
                assert (lhs < rhs) == (lhs.value < rhs.value)
                assert (lhs <= rhs) == (lhs.value <= rhs.value)
                assert (lhs > rhs) == (lhs.value > rhs.value)
                assert (lhs >= rhs) == (lhs.value >= rhs.value)
                assert (lhs == rhs) == (lhs.value == rhs.value)
                assert (lhs != rhs) == (lhs.value != rhs.value)

    def test_equality(self):
        assert LogLevel.ALL != LogLevel.OFF
        assert LogLevel.ALL == LogLevel.ALL
        assert LogLevel.OFF >= LogLevel.ALL
        assert not LogLevel.ALL >= LogLevel.OFF

    def test_description(self):
        names = ["All", "Debug", "Trace", "Info", "Warn", "Error", "Fatal", "Off"]
        for rank, name in enumerate(names):
            assert LogLevel.from_rank(rank).description == name
            assert str(LogLevel.from_rank(rank)) == name

    @pytest.mark.parametrize("rank", [-1, 8, 100])
    def test_from_rank_out_of_range(self, rank):
        assert LogLevel.from_rank(rank) is None

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("fatal") == LogLevel.FATAL
        assert LogLevel.from_string("Warn") == LogLevel.WARN

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_permits(self):
        assert LogLevel.ERROR.permits(LogLevel.WARN)
        assert LogLevel.WARN.permits(LogLevel.WARN)
        assert not LogLevel.INFO.permits(LogLevel.WARN)
        assert LogLevel.DEBUG.permits(LogLevel.ALL)
        assert not LogLevel.FATAL.permits(LogLevel.OFF)
