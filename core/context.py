from __future__ import annotations
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional
import pandas as pd

# Valor de los selects que equivale a "sin filtro"
ALL = "all"

# Llaves aceptadas en from_mapping (camelCase de origen -> campo)
_FILTER_KEYS = {
    "location": "location",
    "category": "category",
    "product": "product",
    "soldBy": "sold_by",
    "paymentMethod": "payment_method",
    "minDiscountAmount": "min_discount_amount",
    "maxDiscountAmount": "max_discount_amount",
    "minDiscountPercent": "min_discount_percent",
    "maxDiscountPercent": "max_discount_percent",
    "dateRange": "date_range",
}


def _parse_bound(value: Any, name: str) -> Optional[pd.Timestamp]:
    if value is None or value == "":
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        raise ValueError(f"Fecha inválida en {name}: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.normalize()


def _parse_number(value: Any, name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Valor numérico inválido en {name}: {value!r}") from None
    # nan/inf vaciarían el resultado sin avisar
    if not math.isfinite(number):
        raise ValueError(f"Valor numérico inválido en {name}: {value!r}")
    return number


def _categorical(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    if value == "" or value == ALL:
        return None
    return value


@dataclass(frozen=True)
class DateRange:
    """Rango de fechas inclusivo; cualquier extremo puede faltar."""
    start: Optional[pd.Timestamp] = None
    end: Optional[pd.Timestamp] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> Optional["DateRange"]:
        if not raw:
            return None
        if not isinstance(raw, Mapping):
            raise ValueError(f"dateRange inválido: {raw!r}")
        start = _parse_bound(raw.get("from", raw.get("start")), "dateRange.from")
        end = _parse_bound(raw.get("to", raw.get("end")), "dateRange.to")
        if start is None and end is None:
            return None
        return cls(start=start, end=end)

    @property
    def is_active(self) -> bool:
        return self.start is not None or self.end is not None


@dataclass(frozen=True)
class FilterSet:
    """
    Filtros del usuario. Cada campo es opcional: None = sin restricción.
    Los categóricos con "all" o "" se normalizan a None.
    sold_by usa la etiqueta visible ("Online/System" para ventas sin vendedor).
    """
    location: Optional[str] = None
    category: Optional[str] = None
    product: Optional[str] = None
    sold_by: Optional[str] = None
    payment_method: Optional[str] = None
    min_discount_amount: Optional[float] = None
    max_discount_amount: Optional[float] = None
    min_discount_percent: Optional[float] = None
    max_discount_percent: Optional[float] = None
    date_range: Optional[DateRange] = None

    def __post_init__(self):
        for name in ("location", "category", "product", "sold_by", "payment_method"):
            object.__setattr__(self, name, _categorical(getattr(self, name)))
        if self.date_range is not None and not self.date_range.is_active:
            object.__setattr__(self, "date_range", None)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "FilterSet":
        """Construye desde un dict camelCase (UI/API) o snake_case."""
        if not raw:
            return cls()
        snake = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in raw.items():
            name = _FILTER_KEYS.get(key, key)
            if name not in snake:
                raise ValueError(f"Filtro desconocido: {key!r}")
            if name == "date_range":
                kwargs[name] = value if isinstance(value, DateRange) else DateRange.from_mapping(value)
            elif name.startswith(("min_", "max_")):
                kwargs[name] = _parse_number(value, key)
            else:
                kwargs[name] = value
        return cls(**kwargs)

    def active_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


@dataclass
class DashboardContext:
    DATA_DIR: Path
    sales: pd.DataFrame
    locations: list[str] = field(default_factory=list)
    selected_location: str = ALL
