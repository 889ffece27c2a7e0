import pytest

from features.drilldown import (
    DrillDownState,
    build_drill_down,
    select_segment,
)
from features.filters import apply_filters


def test_build_drill_down(sales):
    filtered = apply_filters(sales)
    d = build_drill_down(filtered, "Descuentos totales")
    assert d.name == "Descuentos totales"
    assert d.total_value == 400
    assert d.total_transactions == 5
    assert d.total_customers == 4
    assert d.metric_value == 80
    assert len(d.raw_data) == 5
    assert d.raw_data["customer_email"].tolist() == filtered["customer_email"].tolist()


def test_build_drill_down_empty():
    d = build_drill_down([], "Nada")
    assert (d.total_value, d.total_transactions, d.total_customers, d.metric_value) == (0, 0, 0, 0)
    assert d.raw_data.empty


def test_to_dict_keys(sales):
    d = build_drill_down(sales[:2], "x").to_dict()
    assert set(d) == {"name", "totalValue", "totalTransactions", "totalCustomers", "rawData", "metricValue"}
    assert d["rawData"][0]["customerEmail"] == "ana@example.com"
    assert "rawData" not in build_drill_down(sales[:2], "x").to_dict(include_rows=False)


class TestSelectSegment:
    def test_by_category(self, sales):
        sub = select_segment(apply_filters(sales), "category", "Memberships")
        assert sub["customer_email"].tolist() == [
            "ana@example.com", "ana@example.com", "dani@example.com", "eva@example.com",
        ]

    def test_sold_by_accepts_display_label(self, sales):
        sub = select_segment(apply_filters(sales), "sold_by", "Online/System")
        assert sub["customer_email"].tolist() == ["carla@example.com", "dani@example.com"]

    def test_member(self, sales):
        d = build_drill_down(select_segment(apply_filters(sales), "member", "ana@example.com"), "Ana")
        assert d.total_transactions == 2
        assert d.total_customers == 1
        assert d.metric_value == 15

    def test_unknown_dimension(self, sales):
        with pytest.raises(ValueError):
            select_segment(sales, "colour", "red")


class TestState:
    def test_starts_closed(self):
        state = DrillDownState()
        assert not state.is_open
        assert state.data is None

    def test_open_then_close(self, sales):
        summary = build_drill_down(sales, "todo")
        opened = DrillDownState().open(summary, kind="category")
        assert opened.is_open
        assert opened.data is summary
        assert opened.kind == "category"

        closed = opened.close()
        assert not closed.is_open
        # el estado abierto original no cambia
        assert opened.is_open

    def test_open_replaces_payload(self, sales):
        first = DrillDownState().open(build_drill_down(sales[:1], "uno"))
        second = first.open(build_drill_down(sales[:2], "dos"), kind="product")
        assert second.data.name == "dos"
        assert second.kind == "product"

    def test_unknown_kind(self, sales):
        with pytest.raises(ValueError):
            DrillDownState().open(build_drill_down(sales, "x"), kind="modal")
