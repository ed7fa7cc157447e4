"""Tests for the duration sequencer."""

from __future__ import annotations

from datetime import timedelta

import pytest

from toki.core.sequencer import add_suffix_if_number, parse_timer_spec, split_timer_spec
from toki.errors import EmptySpec, InvalidDurationFormat, TimerSpecError

MIN = timedelta(minutes=1)
SEC = timedelta(seconds=1)


class TestSplit:
    def test_mixed_separators(self) -> None:
        assert split_timer_spec("5m, 30s-10s 2m") == ["5m", "30s", "10s", "2m"]

    def test_surrounding_whitespace_dropped(self) -> None:
        assert split_timer_spec("  25m  ") == ["25m"]

    def test_only_separators(self) -> None:
        assert split_timer_spec(" , - ") == []


class TestNormalize:
    @pytest.mark.parametrize("token, expected", [("5", "5s"), ("2.5", "2.5s"), ("10", "10s")])
    def test_bare_numbers_get_seconds(self, token: str, expected: str) -> None:
        assert add_suffix_if_number(token) == expected

    @pytest.mark.parametrize("token", ["5m", "300ms", "1h30m", "abc"])
    def test_other_tokens_untouched(self, token: str) -> None:
        assert add_suffix_if_number(token) == token


class TestParseTimerSpec:
    def test_order_preserved(self) -> None:
        assert parse_timer_spec("5m,10m-15m") == (5 * MIN, 10 * MIN, 15 * MIN)

    def test_bare_number_is_seconds(self) -> None:
        assert parse_timer_spec("5") == parse_timer_spec("5s") == (5 * SEC,)

    @pytest.mark.parametrize("raw", ["5m, 10m", "5m 10m", "5m-10m", "5m,,10m", "5m , - 10m"])
    def test_separators_collapse(self, raw: str) -> None:
        assert parse_timer_spec(raw) == (5 * MIN, 10 * MIN)

    def test_bare_numbers_list(self) -> None:
        assert parse_timer_spec("10 5 2") == (10 * SEC, 5 * SEC, 2 * SEC)

    def test_lone_number_single_stage(self) -> None:
        assert parse_timer_spec("1.5") == (timedelta(seconds=1.5),)

    def test_compound_token(self) -> None:
        assert parse_timer_spec("1h30m, 5m") == (90 * MIN, 5 * MIN)

    def test_zero_stage_accepted(self) -> None:
        assert parse_timer_spec("0") == (timedelta(0),)

    @pytest.mark.parametrize("raw", ["", "   ", ",,", " - "])
    def test_empty_spec(self, raw: str) -> None:
        with pytest.raises(EmptySpec):
            parse_timer_spec(raw)

    def test_invalid_token(self) -> None:
        with pytest.raises(InvalidDurationFormat) as excinfo:
            parse_timer_spec("abc")
        assert excinfo.value.token == "abc"

    def test_fails_on_first_bad_token(self) -> None:
        with pytest.raises(InvalidDurationFormat) as excinfo:
            parse_timer_spec("5m, 3x, 4y")
        assert excinfo.value.token == "3x"

    def test_errors_share_base(self) -> None:
        for raw in ("", "abc"):
            with pytest.raises(TimerSpecError):
                parse_timer_spec(raw)
