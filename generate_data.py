# %%
"""
Generador de datos de descuentos y promociones para el dashboard.

- Transacciones con y sin descuento (las sin descuento no se muestran en el dashboard).
- Vendedores con el centinela "-" (ventas online / automáticas).
- MRP faltante en algunas filas (con y sin impuestos) y algunas fechas mal formadas,
  para ejercitar los casos borde del pipeline.
"""
from __future__ import annotations
import argparse
from datetime import datetime, timedelta
from pathlib import Path

import numpy as np
import pandas as pd

from core.config import settings
from core.load import REVERSE_COLUMN_MAP, SCHEMA

rng = np.random.default_rng(42)

_LOCATIONS = ["Kwality House, Kemps Corner", "Supreme HQ, Bandra", "Kenkere House"]
_CATEGORIES = {
    "Memberships": ["Studio 4 Class Package", "Studio 8 Class Package", "Studio Annual Unlimited"],
    "Class Packages": ["Studio Single Class", "Studio 10 Class Package"],
    "Retail": ["Grip Socks", "Water Bottle", "Yoga Mat"],
    "Private Sessions": ["Private Class x1", "Private Class x5"],
}
_SELLERS = ["-", "Ana Ruiz", "Carlos Méndez", "Lucía Torres", "Pedro Salas"]
_PAYMENT_METHODS = ["Card", "UPI", "Cash", "Wallet"]

# ---------- utilidades ----------

def _random_dates(n: int, days: int) -> list[str]:
    start = datetime.now() - timedelta(days=days)
    offsets = rng.integers(0, days * 24 * 3600, size=n)
    return [(start + timedelta(seconds=int(s))).strftime("%Y-%m-%d %H:%M:%S") for s in offsets]

def _customers(n: int) -> list[str]:
    return [f"cliente{i:04d}@example.com" for i in range(n)]

# ---------- generación ----------

def generate(n_rows: int = 5000, n_customers: int = 900, days: int = 540,
             discount_share: float = 0.6, bad_dates: int = 5) -> pd.DataFrame:
    cats = list(_CATEGORIES)
    cat = rng.choice(cats, size=n_rows)
    product = [rng.choice(_CATEGORIES[c]) for c in cat]

    mrp = np.round(rng.uniform(500, 25000, size=n_rows), 0)
    has_discount = rng.random(n_rows) < discount_share
    pct = np.where(has_discount, rng.choice([5, 10, 15, 20, 25, 30, 50], size=n_rows), 0).astype(float)
    discount = np.round(mrp * pct / 100, 2)
    paid = mrp - discount

    df = pd.DataFrame({
        "customer_email": rng.choice(_customers(n_customers), size=n_rows),
        "calculated_location": rng.choice(_LOCATIONS, size=n_rows),
        "cleaned_category": cat,
        "cleaned_product": product,
        "sold_by": rng.choice(_SELLERS, size=n_rows, p=[0.4, 0.15, 0.15, 0.15, 0.15]),
        "payment_method": rng.choice(_PAYMENT_METHODS, size=n_rows),
        "payment_date": _random_dates(n_rows, days),
        "discount_amount": discount,
        "discount_percentage": pct,
        "payment_value": paid,
        "mrp_post_tax": mrp,
        "mrp_pre_tax": np.round(mrp / 1.18, 2),
    })

    # MRP con impuestos faltante (~10%) y ambos faltantes (~3%)
    no_post = rng.random(n_rows) < 0.10
    df.loc[no_post, "mrp_post_tax"] = np.nan
    no_mrp = rng.random(n_rows) < 0.03
    df.loc[no_mrp, ["mrp_post_tax", "mrp_pre_tax"]] = np.nan

    # Fechas mal formadas
    if bad_dates:
        idx = rng.choice(df.index, size=min(bad_dates, n_rows), replace=False)
        df.loc[idx, "payment_date"] = "sin-fecha"

    return df[SCHEMA]

def write(df: pd.DataFrame, data_dir: Path | None = None) -> Path:
    data_dir = Path(data_dir or settings.DATA_DIR)
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / settings.TRANSACTIONS_FILE
    df.rename(columns=REVERSE_COLUMN_MAP).to_csv(path, index=False)
    return path

if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Genera transacciones de descuentos sintéticas.")
    ap.add_argument("--rows", type=int, default=5000)
    ap.add_argument("--customers", type=int, default=900)
    ap.add_argument("--days", type=int, default=540)
    ap.add_argument("--data-dir", type=Path, default=None)
    args = ap.parse_args()

    out = write(generate(n_rows=args.rows, n_customers=args.customers, days=args.days), args.data_dir)
    print(f"Datos generados en: {out.resolve()}")
