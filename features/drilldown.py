from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Optional

import pandas as pd

from core.load import to_frame, to_records
from features.filters import CATEGORICAL_FILTERS
from features.metrics import distinct_count
from utils.labels import MISSING_LABEL, sold_by_value

logger = logging.getLogger(__name__)

DRILL_KINDS = (
    "metric", "product", "category", "member", "soldBy",
    "paymentMethod", "client-conversion", "trainer", "location",
)

# Dimensiones seleccionables (nombre de filtro o columna) -> columna
DIMENSIONS = {**CATEGORICAL_FILTERS, "member": "customer_email"}
DIMENSIONS.update({col: col for col in list(DIMENSIONS.values())})


def dimension_column(dimension: str) -> str:
    try:
        return DIMENSIONS[dimension]
    except KeyError:
        raise ValueError(f"Dimensión desconocida: {dimension!r}") from None


@dataclass(frozen=True, eq=False)
class DrillDownSummary:
    name: str
    total_value: float
    total_transactions: int
    total_customers: int
    raw_data: pd.DataFrame
    metric_value: float

    def to_dict(self, include_rows: bool = True) -> dict:
        out = {
            "name": self.name,
            "totalValue": self.total_value,
            "totalTransactions": self.total_transactions,
            "totalCustomers": self.total_customers,
            "metricValue": self.metric_value,
        }
        if include_rows:
            out["rawData"] = to_records(self.raw_data)
        return out


def build_drill_down(sub, label: str) -> DrillDownSummary:
    """Resumen de una sub-selección (segmento de gráfico, fila de tabla o tarjeta)."""
    df = to_frame(sub)
    return DrillDownSummary(
        name=label,
        total_value=float(df["payment_value"].fillna(0).sum()),
        total_transactions=len(df),
        total_customers=distinct_count(df["customer_email"]),
        raw_data=df,
        metric_value=float(df["discount_amount"].fillna(0).sum()),
    )


def select_segment(filtered, dimension: str, value) -> pd.DataFrame:
    """Filas del subconjunto filtrado que forman un segmento/fila (orden conservado)."""
    df = to_frame(filtered)
    col = dimension_column(dimension)
    if col == "sold_by":
        value = sold_by_value(value)
    if value is None or value == MISSING_LABEL:
        return df[df[col].isna()].copy()
    return df[df[col] == value].copy()


@dataclass(frozen=True)
class DrillDownState:
    """Cerrado <-> abierto con payload. Sin estados intermedios."""
    is_open: bool = False
    data: Optional[DrillDownSummary] = None
    kind: str = "metric"

    def open(self, summary: DrillDownSummary, kind: str = "metric") -> "DrillDownState":
        if kind not in DRILL_KINDS:
            raise ValueError(f"Tipo de drill-down desconocido: {kind!r}")
        logger.debug("Drill-down abierto: %s (%d filas, %s)", summary.name, summary.total_transactions, kind)
        return DrillDownState(is_open=True, data=summary, kind=kind)

    def close(self) -> "DrillDownState":
        return replace(self, is_open=False)
