import pandas as pd

from core.headers import nice_headers
from utils.formatters import fmt_currency, fmt_number, fmt_pct
from utils.labels import attach_sold_by_label, sold_by_label, sold_by_value


def test_sold_by_mapping():
    assert sold_by_label("-") == "Online/System"
    assert sold_by_label("Ana") == "Ana"
    assert sold_by_value("Online/System") == "-"
    assert sold_by_value("Ana") == "Ana"


def test_attach_sold_by_label():
    df = pd.DataFrame({"sold_by": ["-", "Ana"]})
    out = attach_sold_by_label(df)
    assert out["Vendedor"].tolist() == ["Online/System", "Ana"]
    assert "Vendedor" not in df.columns


def test_formatters():
    assert fmt_currency(1234.4, symbol="$") == "$1,234"
    assert fmt_number(1500) == "1,500"
    assert fmt_pct(12.345) == "12.3%"
    assert fmt_currency(None) == "—"
    assert fmt_pct(float("nan")) == "—"


def test_nice_headers():
    df = pd.DataFrame(columns=["discount_amount", "otra"])
    assert nice_headers(df).columns.tolist() == ["Descuento", "otra"]
