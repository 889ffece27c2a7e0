import pytest

from features.breakdown import group_totals, period_totals, top_bottom, year_on_year
from features.filters import apply_filters


@pytest.fixture
def filtered(sales):
    return apply_filters(sales)


class TestGroupTotals:
    def test_by_category(self, filtered):
        out = group_totals(filtered, "category")
        assert out["key"].tolist() == ["Memberships", "Retail"]
        row = out.iloc[0]
        assert row["total_discount"] == 60
        assert row["transactions"] == 4
        assert row["customers"] == 3
        assert row["revenue"] == 340
        assert row["avg_discount_pct"] == pytest.approx(15.0)

    def test_sold_by_uses_display_label(self, filtered):
        out = group_totals(filtered, "sold_by")
        assert set(out["key"]) == {"Online/System", "Lucía Torres"}
        online = out.set_index("key").loc["Online/System"]
        assert online["total_discount"] == 50

    def test_missing_key_grouped(self, tx):
        rows = [tx(paymentMethod=None), tx(paymentMethod="Card")]
        out = group_totals(rows, "payment_method")
        assert set(out["key"]) == {"Sin dato", "Card"}

    def test_empty(self):
        assert group_totals([], "product").empty

    def test_unknown_dimension(self, filtered):
        with pytest.raises(ValueError):
            group_totals(filtered, "weather")


def test_top_bottom(filtered):
    top, bottom = top_bottom(filtered, "product", n=2)
    assert top["key"].tolist() == ["Studio 8 Class Package", "Grip Socks"]
    assert bottom["key"].tolist() == ["Studio 4 Class Package", "Grip Socks"]


def test_top_bottom_unknown_metric(filtered):
    with pytest.raises(ValueError):
        top_bottom(filtered, "product", metric="margin")


class TestPeriods:
    def test_monthly_skips_bad_dates(self, filtered):
        out = period_totals(filtered, freq="M")
        assert out["period"].tolist() == ["2023-12", "2024-01", "2024-02"]
        assert out["total_discount"].tolist() == [15, 10, 25]
        # la fila sin fecha válida (30) no aparece
        assert out["total_discount"].sum() == 50

    def test_yearly(self, filtered):
        out = period_totals(filtered, freq="Y")
        assert out["period"].tolist() == ["2023", "2024"]
        assert out["transactions"].tolist() == [1, 3]

    def test_bad_freq(self, filtered):
        with pytest.raises(ValueError):
            period_totals(filtered, freq="W")

    def test_year_on_year(self, filtered):
        pivot = year_on_year(filtered)
        assert list(pivot.index) == list(range(1, 13))
        assert pivot.loc[2, 2024] == 25
        assert pivot.loc[12, 2023] == 15
        assert pivot.loc[3, 2024] == 0
