"""Tests for pkgdist.core.errors module."""

from pkgdist.core.errors import ErrorCode


class TestErrorCodeValues:
    def test_ok_is_zero(self) -> None:
        assert ErrorCode.OK == 0

    def test_failure_is_three(self) -> None:
        assert ErrorCode.FAILURE == 3

    def test_can_use_as_int(self) -> None:
        code: int = ErrorCode.FAILURE
        assert code == 3
