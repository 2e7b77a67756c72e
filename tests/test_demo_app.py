"""
Tests for the demo application's formatting, view-models and wiring.
"""

from datetime import date, timedelta
from pathlib import Path

import pytest

from ropes import FileTransport, HttpxTransport
from ropes.app.config import TransportConfig

from formatting import formatted_number, time_ago
from models import build_registry, build_transport
from view_models import OutletQuickStats

TODAY = date(2024, 6, 15)


def days_before(days):
    return TODAY - timedelta(days=days)


class TestFormattedNumber:
    """Thousands separators for counts"""

    @pytest.mark.parametrize("value, expected", [
        ("1250000", "1,250,000"),
        (1250000, "1,250,000"),
        ("42", "42"),
        ("", ""),
        (None, ""),
        ("n/a", ""),
        ("12.5", ""),
    ])
    def test_formatting(self, value, expected):
        assert formatted_number(value) == expected


class TestTimeAgo:
    """Humanized dates around the day, month and year boundaries"""

    @pytest.mark.parametrize("days, expected", [
        (0, "today"),
        (1, "1 day ago"),
        (30, "30 days ago"),
        (31, "1 month ago"),
        (59, "1 month ago"),
        (60, "2 months ago"),
        (359, "11 months ago"),
        (360, "11 months ago"),
        (364, "11 months ago"),
        (365, "1 year ago"),
    ])
    def test_boundaries(self, days, expected):
        assert time_ago(days_before(days), today=TODAY) == expected

    def test_years_count_birthdays(self):
        assert time_ago("1983-06-16", today=TODAY) == "40 years ago"
        assert time_ago("1983-06-15", today=TODAY) == "41 years ago"

    def test_leap_year_span_is_one_year(self):
        assert time_ago(date(2023, 3, 1), today=date(2024, 2, 29)) == "1 year ago"

    @pytest.mark.parametrize("value", ["", None, "not a date"])
    def test_unusable_input(self, value):
        assert time_ago(value, today=TODAY) == ""

    def test_future(self):
        assert time_ago(TODAY + timedelta(days=3), today=TODAY) == "in the future"


class TestOutletQuickStats:
    """Circulation display from the outlet data object"""

    def test_formats_circulation(self):
        registry = build_registry()
        stats = OutletQuickStats(registry)
        assert stats.circulation.get() == ""

        registry.outlet.extract({"Outlet": {"Name": "Planet", "Circulation": "1250000"}})

        assert stats.circulation.get() == "1,250,000"

    def test_non_numeric_circulation_shows_blank(self):
        registry = build_registry()
        stats = OutletQuickStats(registry)

        registry.outlet.extract({"Outlet": {"Name": "Planet", "Circulation": "unknown"}})

        assert registry.outlet.circulation.get() == "unknown"
        assert stats.circulation.get() == ""


class TestBuildTransport:
    """Demo transport selection"""

    def test_bundled_fixtures_when_nothing_configured(self, tmp_path):
        transport = build_transport(TransportConfig(), tmp_path)
        assert isinstance(transport, FileTransport)
        assert transport.root == Path(tmp_path).resolve()

    def test_json_root_wins_over_bundled_fixtures(self, tmp_path):
        fixtures = tmp_path / "fixtures"
        fixtures.mkdir()

        transport = build_transport(TransportConfig(json_root=str(fixtures)), tmp_path)

        assert isinstance(transport, FileTransport)
        assert transport.root == fixtures.resolve()

    @pytest.mark.asyncio
    async def test_base_url_uses_http(self, tmp_path):
        transport = build_transport(TransportConfig(base_url="https://api.example"), tmp_path)
        assert isinstance(transport, HttpxTransport)
        await transport.aclose()
