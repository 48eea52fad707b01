"""Tests for play-url and vod_time parsing."""

from __future__ import annotations

from datetime import datetime

import pytest

from vodrelay.backend.utils import parse_play_urls, parse_vod_time


class TestParsePlayUrls:
    def test_numeric_labels(self) -> None:
        assert parse_play_urls("1$http://a#2$http://b") == {"1": "http://a", "2": "http://b"}

    def test_digit_run_extracted(self) -> None:
        assert parse_play_urls("第1集$http://a") == {"1": "http://a"}

    def test_label_without_digits_maps_to_one(self) -> None:
        assert parse_play_urls("正片$http://a") == {"1": "http://a"}

    def test_empty_input(self) -> None:
        assert parse_play_urls("") == {}
        assert parse_play_urls(None) == {}

    def test_first_digit_run_wins(self) -> None:
        assert parse_play_urls("第12集(1080P)$http://a") == {"12": "http://a"}

    def test_leading_zeros_kept(self) -> None:
        assert parse_play_urls("01$http://a#02$http://b") == {"01": "http://a", "02": "http://b"}

    def test_label_is_trimmed(self) -> None:
        assert parse_play_urls(" 3 $http://c") == {"3": "http://c"}

    def test_later_entry_overwrites_same_key(self) -> None:
        result = parse_play_urls("第1集$http://a#1$http://b#正片$http://c")
        assert result == {"1": "http://c"}

    def test_malformed_entries_skipped(self) -> None:
        result = parse_play_urls("1$http://a#$http://x#2$#broken#3$http://c")
        assert result == {"1": "http://a", "3": "http://c"}

    def test_extra_dollar_parts_ignored(self) -> None:
        assert parse_play_urls("1$http://a$m3u8") == {"1": "http://a"}

    def test_fullwidth_digits_are_not_digits(self) -> None:
        assert parse_play_urls("第１集$http://a") == {"1": "http://a"}
        assert parse_play_urls("第２集$http://b") == {"1": "http://b"}


class TestParseVodTime:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2023-05-01 12:30:00", datetime(2023, 5, 1, 12, 30)),
            ("2023-05-01", datetime(2023, 5, 1)),
            ("2023/05/01", datetime(2023, 5, 1)),
            ("2023-05-01T12:30:00+00:00", datetime(2023, 5, 1, 12, 30)),
        ],
    )
    def test_formats(self, value: str, expected: datetime) -> None:
        assert parse_vod_time(value) == expected

    @pytest.mark.parametrize("value", ["", None, "gestern", "2023-13-45"])
    def test_unparseable_returns_none(self, value) -> None:
        assert parse_vod_time(value) is None
