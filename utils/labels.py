from __future__ import annotations
import pandas as pd

# Venta sin vendedor asignado (online / automática)
SOLD_BY_SENTINEL = "-"
SOLD_BY_SYSTEM_LABEL = "Online/System"

def sold_by_label(value):
    """Valor almacenado -> etiqueta visible ('-' se muestra como 'Online/System')."""
    return SOLD_BY_SYSTEM_LABEL if value == SOLD_BY_SENTINEL else value

def sold_by_value(label):
    """Etiqueta visible -> valor almacenado (inverso de sold_by_label)."""
    return SOLD_BY_SENTINEL if label == SOLD_BY_SYSTEM_LABEL else label

def attach_sold_by_label(df: pd.DataFrame, label_col: str = "Vendedor") -> pd.DataFrame:
    """Agrega columna humana con el vendedor a un DF que tiene 'sold_by'."""
    if "sold_by" not in df.columns or df.empty:
        return df
    out = df.copy()
    out[label_col] = out["sold_by"].map(sold_by_label)
    return out

# Etiqueta para llaves faltantes en agrupaciones
MISSING_LABEL = "Sin dato"
