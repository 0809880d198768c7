"""Tests for synthetic FII/DII flows."""

from datetime import datetime

import pytest

from marketpulse.core.market_hours import IST
from marketpulse.services.synthesizer.flows import (
    generate_fii_dii_flows,
    FII_INDEX_RANGE,
    DII_EQUITY_RANGE,
)


def _ist(year, month, day, hour=18, minute=0):
    return IST.localize(datetime(year, month, day, hour, minute))


class TestFIIDIIFlows:
    @pytest.fixture
    def flows(self):
        return generate_fii_dii_flows(_ist(2025, 10, 24), days=10)

    def test_day_count(self, flows):
        assert len(flows.fii_data) == 10
        assert len(flows.dii_data) == 10

    def test_skips_weekends_and_holidays(self, flows):
        dates = [f.date for f in flows.fii_data]
        assert dates[0] == "24 Oct 2025"
        assert dates[-1] == "09 Oct 2025"
        assert "21 Oct 2025" not in dates
        assert "22 Oct 2025" not in dates
        assert "18 Oct 2025" not in dates

    def test_fii_and_dii_share_dates(self, flows):
        assert [f.date for f in flows.fii_data] == [d.date for d in flows.dii_data]

    def test_ranges(self, flows):
        for fii in flows.fii_data:
            assert FII_INDEX_RANGE[0] <= fii.index <= FII_INDEX_RANGE[1]
        for dii in flows.dii_data:
            assert DII_EQUITY_RANGE[0] <= dii.equity <= DII_EQUITY_RANGE[1]

    def test_same_date_same_numbers(self, flows):
        morning = generate_fii_dii_flows(_ist(2025, 10, 24, 9, 0), days=10)
        assert morning == flows

    def test_day_values_do_not_depend_on_window(self, flows):
        earlier = generate_fii_dii_flows(_ist(2025, 10, 23), days=3)
        assert earlier.fii_data[0] == flows.fii_data[1]
        assert earlier.dii_data[0] == flows.dii_data[1]

    def test_zero_days(self):
        flows = generate_fii_dii_flows(_ist(2025, 10, 24), days=0)
        assert flows.fii_data == []
        assert flows.dii_data == []
