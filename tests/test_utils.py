import math

import pytest

from gardens.config import load_settings
from gardens.utils import first_text, parse_float, parse_int, parse_text, point_from_geo


@pytest.mark.parametrize(
    "raw,expected",
    [(1.5, 1.5), (0, 0.0), ("  -123.12 ", -123.12), ("1e2", 100.0), (None, None), ("", None),
     ("abc", None), (True, None), (math.nan, None), (math.inf, None), ([1], None)],
)
def test_parse_float(raw, expected):
    assert parse_float(raw) == expected


def test_parse_float_default():
    assert parse_float("nope", 7.0) == 7.0
    assert parse_float(0, 7.0) == 0.0


def test_parse_int_truncates_and_defaults():
    assert parse_int("24") == 24
    assert parse_int(3.9) == 3
    assert parse_int("x", 0) == 0
    assert parse_int(None, 0) == 0


def test_parse_text():
    assert parse_text(None) == ""
    assert parse_text("abc") == "abc"
    assert parse_text(2009) == "2009"
    assert parse_text(2009.0) == "2009"
    assert parse_text({"a": 1}, "fallback") == "fallback"


def test_first_text_skips_blank_values():
    assert first_text(None, "  ", "x", "y") == "x"
    assert first_text(None, "", default="none") == "none"


def test_point_from_geo_axis_order():
    assert point_from_geo([49.28, -123.12]) == (49.28, -123.12)
    assert point_from_geo({"lon": -123.12, "lat": 49.28}) == (49.28, -123.12)
    assert point_from_geo([1, 2, 3]) == (None, None)
    assert point_from_geo("49,-123") == (None, None)


def test_load_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GARDENS_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("GARDENS_SEED_PATH", str(tmp_path / "seed.json"))
    monkeypatch.setenv("GARDENS_SEED_ON_STARTUP", "false")
    monkeypatch.setenv("GARDENS_API_PREFIX", "/v2/gardens/")

    s = load_settings()

    assert s.database_url == "sqlite:///:memory:"
    assert s.seed_path == tmp_path / "seed.json"
    assert s.seed_on_startup is False
    assert s.api_prefix == "/v2/gardens"


def test_parse_float_out_of_range_values_use_default():
    huge = int("9" * 400)

    assert parse_float(huge) is None
    assert parse_float(huge, 0.0) == 0.0
    assert parse_float("9" * 400) is None
    assert parse_float("1e400", 1.0) == 1.0


def test_parse_int_rejects_values_beyond_sqlite_integer():
    assert parse_int("1e30", 0) == 0
    assert parse_int(1e30, 0) == 0
    assert parse_int(10 ** 30, 0) == 0
    assert parse_int(-(10 ** 19), 0) == 0
    assert parse_int(2 ** 53) == 2 ** 53
