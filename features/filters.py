from __future__ import annotations
import logging
from datetime import date
from typing import Optional

import numpy as np
import pandas as pd

from core.context import ALL, FilterSet
from core.load import to_frame
from utils.labels import sold_by_label, sold_by_value

logger = logging.getLogger(__name__)

# Campo del FilterSet -> columna que filtra (igualdad)
CATEGORICAL_FILTERS = {
    "location": "calculated_location",
    "category": "cleaned_category",
    "product": "cleaned_product",
    "sold_by": "sold_by",
    "payment_method": "payment_method",
}

# (campo mínimo, campo máximo) -> columna numérica
RANGE_FILTERS = {
    ("min_discount_amount", "max_discount_amount"): "discount_amount",
    ("min_discount_percent", "max_discount_percent"): "discount_percentage",
}


def parse_payment_dates(dates: pd.Series) -> pd.Series:
    """
    Fechas de pago -> Timestamp naive normalizado al día.
    Lo que no se puede parsear queda NaT (y nunca pasa un filtro de fechas).
    Sólo se interpretan textos y fechas; un número (p. ej. 1700000000) es NaT.
    """
    if dates.empty:
        return pd.Series(pd.NaT, index=dates.index, dtype="datetime64[ns]")
    dates = dates.astype(object)
    dates = dates.where(dates.map(lambda v: isinstance(v, (str, date, np.datetime64))), None)
    parsed = pd.to_datetime(dates, errors="coerce", utc=True, format="mixed")
    return parsed.dt.tz_localize(None).dt.normalize()


def discounted_only(sales: pd.DataFrame) -> pd.Series:
    """Máscara base: sólo transacciones con descuento (> 0; faltante cuenta como 0)."""
    return sales["discount_amount"].fillna(0) > 0


def _date_mask(sales: pd.DataFrame, f: FilterSet) -> pd.Series:
    dates = parse_payment_dates(sales["payment_date"])
    mask = dates.notna()
    if f.date_range.start is not None:
        mask &= dates >= f.date_range.start
    if f.date_range.end is not None:
        mask &= dates <= f.date_range.end
    return mask


def build_mask(sales: pd.DataFrame, filters: Optional[FilterSet] = None, location: str = ALL) -> pd.Series:
    """Conjunción (AND) de la base, la ubicación global y cada filtro activo."""
    mask = discounted_only(sales)

    if location and location != ALL:
        mask &= sales["calculated_location"] == location

    if filters is None:
        return mask

    for name, col in CATEGORICAL_FILTERS.items():
        wanted = getattr(filters, name)
        if wanted is None:
            continue
        if name == "sold_by":
            wanted = sold_by_value(wanted)
        mask &= sales[col] == wanted

    for (lo_name, hi_name), col in RANGE_FILTERS.items():
        values = sales[col].fillna(0)
        lo, hi = getattr(filters, lo_name), getattr(filters, hi_name)
        if lo is not None:
            mask &= values >= lo
        if hi is not None:
            mask &= values <= hi

    if filters.date_range is not None:
        mask &= _date_mask(sales, filters)

    return mask


def apply_filters(sales, filters: Optional[FilterSet] = None, location: str = ALL) -> pd.DataFrame:
    """
    Devuelve el subconjunto filtrado (nuevo DataFrame, mismo orden que la entrada).
    Acepta DataFrame o lista de dicts; la entrada no se modifica.
    """
    df = to_frame(sales)
    if df.empty:
        return df
    out = df[build_mask(df, filters, location)].copy()
    logger.debug("Transacciones con descuento filtradas: %d de %d", len(out), len(df))
    return out


def filter_options(sales) -> dict[str, list[str]]:
    """Opciones de cada select (valores distintos, ordenados) sobre transacciones con descuento."""
    df = to_frame(sales)
    df = df[discounted_only(df)] if not df.empty else df
    opts: dict[str, list[str]] = {}
    for name, col in CATEGORICAL_FILTERS.items():
        values = df[col].dropna()
        if name == "sold_by":
            values = values.map(sold_by_label)
        opts[name] = sorted(str(v) for v in values.unique())
    return opts
