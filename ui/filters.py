from __future__ import annotations
import streamlit as st
import pandas as pd

from core.context import ALL, DashboardContext, DateRange, FilterSet
from features.filters import filter_options

_SELECTS = [
    ("location", "Ubicación"),
    ("category", "Categoría"),
    ("product", "Producto"),
    ("sold_by", "Vendido por"),
    ("payment_method", "Método de pago"),
]
_NUMBERS = [
    ("min_discount_amount", "Descuento mínimo"),
    ("max_discount_amount", "Descuento máximo"),
    ("min_discount_percent", "Descuento % mínimo"),
    ("max_discount_percent", "Descuento % máximo"),
]


class DiscountFilterPanel:
    """Formulario de filtros: el borrador no se aplica hasta 'Aplicar filtros'."""

    def __init__(self, ctx: DashboardContext, key_prefix: str = "disc_"):
        self.ctx = ctx
        self.k = key_prefix
        self.applied_key = f"{self.k}applied"

    def _reset_now(self):
        for name, _ in _SELECTS + _NUMBERS:
            st.session_state.pop(f"{self.k}{name}", None)
        st.session_state.pop(f"{self.k}dates", None)
        st.session_state[self.applied_key] = FilterSet()
        st.rerun()

    @staticmethod
    def _number_or_none(value) -> float | None:
        # 0 en number_input = sin límite (el widget no admite vacío)
        return float(value) if value else None

    def render(self, collapsed: bool = True) -> FilterSet:
        st.session_state.setdefault(self.applied_key, FilterSet())
        opts = filter_options(self.ctx.sales)

        with st.expander("Filtros", expanded=not collapsed):
            with st.form(f"{self.k}form", clear_on_submit=False):
                cols = st.columns(len(_SELECTS))
                chosen = {}
                for col, (name, label) in zip(cols, _SELECTS):
                    chosen[name] = col.selectbox(label, [ALL] + opts[name], key=f"{self.k}{name}")

                ncols = st.columns(len(_NUMBERS))
                for col, (name, label) in zip(ncols, _NUMBERS):
                    chosen[name] = self._number_or_none(
                        col.number_input(label, min_value=0.0, step=1.0, key=f"{self.k}{name}")
                    )

                dates = st.date_input("Rango de fechas de pago", value=(), key=f"{self.k}dates")
                c1, c2 = st.columns(2)
                apply_btn = c1.form_submit_button("Aplicar filtros", use_container_width=True)
                reset_btn = c2.form_submit_button("Limpiar", use_container_width=True)

            if reset_btn:
                self._reset_now()
            if apply_btn:
                start = dates[0] if len(dates) > 0 else None
                end = dates[1] if len(dates) > 1 else None
                date_range = DateRange(
                    start=pd.Timestamp(start) if start else None,
                    end=pd.Timestamp(end) if end else None,
                )
                st.session_state[self.applied_key] = FilterSet(date_range=date_range, **chosen)

        return st.session_state[self.applied_key]


def location_selector(ctx: DashboardContext, key: str = "disc_location") -> str:
    """Selector global de ubicación (se aplica antes que el resto de filtros)."""
    options = [ALL] + list(ctx.locations)
    return st.radio(
        "Ubicación", options, horizontal=True, key=key,
        format_func=lambda x: "Todas" if x == ALL else x,
    )
