from __future__ import annotations
import numpy as np
import pandas as pd

from core.load import to_frame
from features.drilldown import dimension_column
from features.filters import parse_payment_dates
from utils.labels import MISSING_LABEL, sold_by_label

GROUP_COLS = ["key", "total_discount", "transactions", "customers", "revenue", "avg_discount_pct"]
METRICS = GROUP_COLS[1:]


def _totals(df: pd.DataFrame, keys) -> pd.DataFrame:
    tmp = df.assign(
        _discount=df["discount_amount"].fillna(0),
        _paid=df["payment_value"].fillna(0),
        _pct=df["discount_percentage"].fillna(0),
        # faltantes como un solo cliente, igual que distinct_count
        _customer=df["customer_email"].fillna(MISSING_LABEL),
    )
    return tmp.groupby(keys, sort=False).agg(
        total_discount=("_discount", "sum"),
        transactions=("_discount", "size"),
        customers=("_customer", "nunique"),
        revenue=("_paid", "sum"),
        avg_discount_pct=("_pct", "mean"),
    )


def group_totals(filtered, by: str) -> pd.DataFrame:
    """
    Totales por dimensión categórica (categoría, producto, vendedor, ...).
    Ordenado por descuento total desc; vendedores '-' como 'Online/System'.
    """
    df = to_frame(filtered)
    col = dimension_column(by)
    if df.empty:
        return pd.DataFrame(columns=GROUP_COLS)
    keys = df[col]
    if col == "sold_by":
        keys = keys.map(sold_by_label)
    keys = keys.fillna(MISSING_LABEL).rename("key")
    out = _totals(df, keys).reset_index()
    out = out.sort_values(["total_discount", "key"], ascending=[False, True], kind="stable")
    return out[GROUP_COLS].reset_index(drop=True)


def top_bottom(filtered, by: str, n: int = 5, metric: str = "total_discount"):
    """(top, bottom) de group_totals según la métrica elegida."""
    if metric not in METRICS:
        raise ValueError(f"Métrica desconocida: {metric!r}")
    totals = group_totals(filtered, by)
    ranked = totals.sort_values([metric, "key"], ascending=[False, True], kind="stable")
    top = ranked.head(n).reset_index(drop=True)
    bottom = ranked.tail(n).iloc[::-1].reset_index(drop=True)
    return top, bottom


def period_totals(filtered, freq: str = "M") -> pd.DataFrame:
    """
    Totales por mes ("M") o año ("Y"), en orden cronológico.
    Filas con fecha no parseable quedan fuera.
    """
    if freq not in ("M", "Y"):
        raise ValueError(f"Frecuencia no soportada: {freq!r}")
    df = to_frame(filtered)
    if df.empty:
        return pd.DataFrame(columns=["period"] + METRICS)
    dates = parse_payment_dates(df["payment_date"])
    df = df[dates.notna()]
    if df.empty:
        return pd.DataFrame(columns=["period"] + METRICS)
    dates = dates[dates.notna()]
    period = dates.dt.strftime("%Y-%m" if freq == "M" else "%Y").rename("period")
    out = _totals(df, period).sort_index().reset_index()
    return out[["period"] + METRICS]


def year_on_year(filtered) -> pd.DataFrame:
    """Pivot mes (1–12) × año con el descuento total; meses sin ventas en 0."""
    df = to_frame(filtered)
    dates = parse_payment_dates(df["payment_date"]) if not df.empty else pd.Series(dtype="datetime64[ns]")
    ok = dates.notna()
    if not ok.any():
        return pd.DataFrame(index=pd.Index(range(1, 13), name="month"))
    tmp = pd.DataFrame({
        "year": dates[ok].dt.year,
        "month": dates[ok].dt.month,
        "discount": df.loc[ok, "discount_amount"].fillna(0),
    })
    pivot = tmp.pivot_table(index="month", columns="year", values="discount", aggfunc="sum", fill_value=0)
    pivot = pivot.reindex(range(1, 13), fill_value=0)
    pivot.index.name = "month"
    pivot.columns = [int(c) for c in pivot.columns]
    return pivot.astype(np.float64)
