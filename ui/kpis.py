from __future__ import annotations
import streamlit as st

from features.metrics import DiscountMetrics, HeroMetrics
from utils.formatters import fmt_currency, fmt_number, fmt_pct

def hero_cards(hero: HeroMetrics, mode: str = "Técnico"):
    if mode == "Simplificado":
        col1, col2, col3 = st.columns(3)
        col1.metric("Valor descontado", fmt_currency(hero.total_discount_value))
        col2.metric("Transacciones", fmt_number(hero.discounted_transactions))
        col3.metric("Descuento promedio", fmt_pct(hero.avg_discount_percentage))
    else:
        cols = st.columns(6)
        cols[0].metric("Valor descontado", fmt_currency(hero.total_discount_value))
        cols[1].metric("Transacciones", fmt_number(hero.discounted_transactions))
        cols[2].metric("Descuento promedio", fmt_pct(hero.avg_discount_percentage))
        cols[3].metric("Miembros", fmt_number(hero.unique_members))
        cols[4].metric("Unidades vendidas", fmt_number(hero.units_sold))
        cols[5].metric("Ingreso perdido", fmt_currency(hero.total_revenue_lost))

def metric_cards(m: DiscountMetrics, key: str = "cards") -> str | None:
    """
    Tarjetas de métricas. Devuelve el título de la tarjeta pulsada
    (para abrir el drill-down con todo el subconjunto filtrado) o None.
    """
    cards = [
        ("Descuentos totales", fmt_currency(m.total_discounts),
         f"En {fmt_number(m.total_transactions)} transacciones"),
        ("Descuento promedio", fmt_pct(m.avg_discount_percent), "Porcentaje de descuento del sistema"),
        ("Impacto en ingresos", fmt_currency(m.revenue_impact),
         f"Tasa sobre MRP: {fmt_pct(m.discount_rate)}"),
        ("Clientes con descuento", fmt_number(m.unique_customers), "Clientes únicos"),
        ("Productos con descuento", fmt_number(m.unique_products),
         f"Máx: {fmt_currency(m.max_discount)}"),
    ]
    clicked = None
    for col, (title, value, subtitle) in zip(st.columns(len(cards)), cards):
        col.metric(title, value)
        col.caption(subtitle)
        if col.button("Detalle", key=f"{key}_{title}", use_container_width=True):
            clicked = title
    return clicked
