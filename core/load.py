from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Mapping, Any

import numpy as np
import pandas as pd

from core.config import settings
from core.paths import resolve_data_dir

logger = logging.getLogger(__name__)

# Llaves de origen (camelCase) -> columnas internas
COLUMN_MAP = {
    "customerEmail": "customer_email",
    "calculatedLocation": "calculated_location",
    "cleanedCategory": "cleaned_category",
    "cleanedProduct": "cleaned_product",
    "soldBy": "sold_by",
    "paymentMethod": "payment_method",
    "paymentDate": "payment_date",
    "discountAmount": "discount_amount",
    "discountPercentage": "discount_percentage",
    "paymentValue": "payment_value",
    "mrpPostTax": "mrp_post_tax",
    "mrpPreTax": "mrp_pre_tax",
}
REVERSE_COLUMN_MAP = {v: k for k, v in COLUMN_MAP.items()}

CATEGORICAL_COLS = [
    "customer_email", "calculated_location", "cleaned_category",
    "cleaned_product", "sold_by", "payment_method",
]
NUMERIC_COLS = [
    "discount_amount", "discount_percentage", "payment_value",
    "mrp_post_tax", "mrp_pre_tax",
]
SCHEMA = CATEGORICAL_COLS + ["payment_date"] + NUMERIC_COLS


def empty_frame() -> pd.DataFrame:
    df = pd.DataFrame({c: pd.Series(dtype=object) for c in CATEGORICAL_COLS + ["payment_date"]})
    for c in NUMERIC_COLS:
        df[c] = pd.Series(dtype=float)
    return df[SCHEMA]


def to_frame(transactions: pd.DataFrame | Iterable[Mapping[str, Any]] | None) -> pd.DataFrame:
    """
    Normaliza una colección de transacciones a un DataFrame con el schema interno.
    - Acepta DataFrame (llaves de origen o internas) o iterable de dicts.
    - Columnas faltantes se agregan vacías; numéricos no parseables -> NaN.
    - Nunca modifica la entrada (siempre trabaja sobre una copia).
    """
    if transactions is None:
        return empty_frame()
    if isinstance(transactions, pd.DataFrame):
        df = transactions.copy()
    else:
        rows = [dict(r) for r in transactions]
        if not rows:
            return empty_frame()
        df = pd.DataFrame.from_records(rows)

    df = df.rename(columns={k: v for k, v in COLUMN_MAP.items() if k in df.columns})
    for c in SCHEMA:
        if c not in df.columns:
            df[c] = np.nan if c in NUMERIC_COLS else None
    for c in NUMERIC_COLS:
        df[c] = pd.to_numeric(df[c], errors="coerce").astype(float)
    # NaN -> None en categóricos para que "ausente" sea un solo valor
    for c in CATEGORICAL_COLS + ["payment_date"]:
        df[c] = df[c].astype(object).where(df[c].notna(), None)
    # los filtros y las opciones comparan texto: un código numérico se guarda como str
    for c in CATEGORICAL_COLS:
        df[c] = df[c].map(lambda v: v if v is None else str(v))
    return df


def to_records(df: pd.DataFrame) -> list[dict]:
    """Inverso de to_frame: lista de dicts con llaves de origen y None en faltantes."""
    if df is None or df.empty:
        return []
    out = df.rename(columns=REVERSE_COLUMN_MAP)
    out = out.astype(object).where(out.notna(), None)
    return out.to_dict(orient="records")


def _safe_read_csv(path: Path) -> pd.DataFrame:
    """
    Lee un CSV devolviendo DataFrame vacío con schema si el archivo no existe,
    está vacío o no tiene encabezados (EmptyDataError).
    """
    if not path.exists():
        return empty_frame()
    try:
        # payment_date se deja crudo: se parsea al filtrar
        return pd.read_csv(path)
    except pd.errors.EmptyDataError:
        return empty_frame()


def load_data(data_dir: Path | None = None):
    """
    Carga las transacciones con descuento y devuelve la tupla (DATA_DIR, sales).
    """
    data_dir = Path(data_dir) if data_dir is not None else resolve_data_dir()
    path = data_dir / settings.TRANSACTIONS_FILE
    sales = to_frame(_safe_read_csv(path))
    logger.info("Transacciones cargadas desde %s: %d filas", path, len(sales))
    return data_dir, sales
