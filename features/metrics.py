"""
Métricas agregadas sobre el subconjunto filtrado.

Hay dos juegos de fórmulas que se solapan y NO deben unificarse:
  - Tarjetas (DiscountMetrics.revenue_impact): MRP = mrpPostTax ?? mrpPreTax ?? 0
  - Hero (HeroMetrics.total_revenue_lost):     MRP = mrpPostTax ?? mrpPreTax ?? paymentValue ?? 0
Una fila sin MRP resta su pago completo en revenue_impact, pero aporta 0 a total_revenue_lost.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict

import pandas as pd

from core.load import to_frame


def distinct_count(values: pd.Series) -> int:
    """
    Cantidad de llaves distintas tal como están guardadas (sin normalizar
    mayúsculas ni espacios). Todos los faltantes cuentan como UN solo valor extra.
    """
    return int(values.dropna().nunique()) + int(values.isna().any())


def list_price(sales: pd.DataFrame) -> pd.Series:
    """Precio de lista para tarjetas: mrp_post_tax ?? mrp_pre_tax ?? 0."""
    return sales["mrp_post_tax"].fillna(sales["mrp_pre_tax"]).fillna(0)


def list_price_or_paid(sales: pd.DataFrame) -> pd.Series:
    """Precio de lista para hero: mrp_post_tax ?? mrp_pre_tax ?? payment_value ?? 0."""
    return (
        sales["mrp_post_tax"]
        .fillna(sales["mrp_pre_tax"])
        .fillna(sales["payment_value"])
        .fillna(0)
    )


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(w.upper() if w == "mrp" else w.capitalize() for w in rest)


class _CamelDict:
    def to_dict(self) -> dict:
        return {_to_camel(k): v for k, v in asdict(self).items()}


@dataclass(frozen=True)
class DiscountMetrics(_CamelDict):
    total_discounts: float = 0.0
    total_transactions: int = 0
    total_revenue: float = 0.0
    total_mrp: float = 0.0
    avg_discount_percent: float = 0.0
    unique_customers: int = 0
    unique_products: int = 0
    max_discount: float = 0.0
    discount_rate: float = 0.0
    revenue_impact: float = 0.0


@dataclass(frozen=True)
class HeroMetrics(_CamelDict):
    total_discount_value: float = 0.0
    discounted_transactions: int = 0
    avg_discount_percentage: float = 0.0
    unique_members: int = 0
    units_sold: int = 0
    total_revenue_lost: float = 0.0


def compute_discount_metrics(filtered) -> DiscountMetrics:
    """Métricas de las tarjetas. Vacío -> todo en cero."""
    df = to_frame(filtered)
    n = len(df)
    if n == 0:
        return DiscountMetrics()

    discount = df["discount_amount"].fillna(0)
    total_discounts = float(discount.sum())
    total_revenue = float(df["payment_value"].fillna(0).sum())
    total_mrp = float(list_price(df).sum())
    pct_sum = float(df["discount_percentage"].fillna(0).sum())

    return DiscountMetrics(
        total_discounts=total_discounts,
        total_transactions=n,
        total_revenue=total_revenue,
        total_mrp=total_mrp,
        avg_discount_percent=pct_sum / n,
        unique_customers=distinct_count(df["customer_email"]),
        unique_products=distinct_count(df["cleaned_product"]),
        max_discount=max(float(discount.max()), 0.0),
        discount_rate=(total_discounts / total_mrp * 100) if total_mrp > 0 else 0.0,
        revenue_impact=total_mrp - total_revenue,
    )


def compute_hero_metrics(filtered) -> HeroMetrics:
    """Resumen superior de la página (fórmulas propias, ver docstring del módulo)."""
    df = to_frame(filtered)
    n = len(df)
    if n == 0:
        return HeroMetrics()

    paid = df["payment_value"].fillna(0)
    lost = list_price_or_paid(df) - paid
    return HeroMetrics(
        total_discount_value=float(df["discount_amount"].fillna(0).sum()),
        discounted_transactions=n,
        avg_discount_percentage=float(df["discount_percentage"].fillna(0).sum()) / n,
        unique_members=distinct_count(df["customer_email"]),
        # una unidad por fila de transacción
        units_sold=n,
        total_revenue_lost=float(lost.sum()),
    )
