from __future__ import annotations
import numpy as np

from core.config import settings

def _missing(x) -> bool:
    return x is None or (isinstance(x, float) and np.isnan(x))

def fmt_currency(x: float, symbol: str | None = None) -> str:
    if _missing(x):
        return "—"
    return f"{symbol or settings.CURRENCY_SYMBOL}{x:,.0f}"

def fmt_number(x: float) -> str:
    if _missing(x):
        return "—"
    return f"{x:,.0f}"

def fmt_pct(x: float, digits: int = 1) -> str:
    """Porcentaje ya expresado en 0–100 (p.ej. 12.5 -> '12.5%')."""
    if _missing(x):
        return "—"
    return f"{x:.{digits}f}%"
