# views/discounts.py
from __future__ import annotations
import streamlit as st

from core.context import DashboardContext, FilterSet
from core.headers import nice_headers
from views.base import BaseView

# Dominio
from features.filters import apply_filters
from features.metrics import compute_discount_metrics, compute_hero_metrics
from features.drilldown import build_drill_down, select_segment
from features.breakdown import group_totals, top_bottom, period_totals, year_on_year

# UI
from ui.kpis import hero_cards, metric_cards
from ui.charts import group_totals_chart, monthly_trend_chart
from ui.drilldown import open_drill_down, render_drill_down
from utils.labels import attach_sold_by_label

# (dimensión, título, tipo de drill-down)
BREAKDOWNS = [
    ("category", "Categoría", "category"),
    ("product", "Producto", "product"),
    ("sold_by", "Vendido por", "soldBy"),
    ("payment_method", "Método de pago", "paymentMethod"),
    ("location", "Ubicación", "location"),
]

class DiscountsView(BaseView):
    """Descuentos & promociones: hero, tarjetas, gráficos, rankings y tablas."""

    def __init__(self, ctx: DashboardContext, filters: FilterSet, mode: str = "Técnico"):
        super().__init__(ctx, filters)
        self.mode = mode
        self.filtered = apply_filters(ctx.sales, filters, location=ctx.selected_location)

    # ----- Secciones -----
    def _hero(self):
        hero_cards(compute_hero_metrics(self.filtered), self.mode)

    def _cards(self):
        clicked = metric_cards(compute_discount_metrics(self.filtered))
        if clicked:
            open_drill_down(build_drill_down(self.filtered, clicked), kind="metric")

    def _charts(self):
        st.subheader("Distribución de descuentos")
        tabs = st.tabs([title for _, title, _ in BREAKDOWNS])
        for tab, (dim, title, _) in zip(tabs, BREAKDOWNS):
            with tab:
                group_totals_chart(group_totals(self.filtered, dim), title)
        monthly_trend_chart(period_totals(self.filtered, freq="M"))

    def _top_bottom(self):
        if self.mode != "Técnico":
            return
        st.subheader("Top / Bottom")
        c1, c2 = st.columns([1, 1])
        labels = {dim: title for dim, title, _ in BREAKDOWNS}
        dim = c1.selectbox("Dimensión", list(labels), format_func=labels.get, key="tb_dim")
        n = c2.slider("Cantidad", min_value=3, max_value=20, value=5, key="tb_n")
        top, bottom = top_bottom(self.filtered, dim, n=n)

        left, right = st.columns(2)
        for col, title, df in ((left, "Mayor descuento", top), (right, "Menor descuento", bottom)):
            col.markdown(f"**{title}**")
            col.dataframe(nice_headers(df.rename(columns={"key": labels[dim]})),
                          use_container_width=True, hide_index=True)

        kind = next(k for d, _, k in BREAKDOWNS if d == dim)
        pick = st.selectbox("Ver detalle de", [""] + top["key"].tolist() + bottom["key"].tolist(), key="tb_pick")
        if pick:
            sub = select_segment(self.filtered, dim, pick)
            open_drill_down(build_drill_down(sub, f"{labels[dim]}: {pick}"), kind=kind)

    def _period_tables(self):
        st.subheader("Mes a mes")
        monthly = period_totals(self.filtered, freq="M")
        st.dataframe(nice_headers(monthly), use_container_width=True, hide_index=True, height=280)

        st.subheader("Año contra año (descuento total por mes)")
        yoy = year_on_year(self.filtered)
        st.dataframe(yoy, use_container_width=True, height=280)

    def _detail_table(self):
        st.subheader(f"Transacciones con descuento — {len(self.filtered):,}")
        if self.filtered.empty:
            st.info("Sin transacciones bajo los filtros seleccionados.")
            return
        disp = attach_sold_by_label(self.filtered, label_col="Vendedor").drop(columns=["sold_by"])
        st.dataframe(nice_headers(disp).head(500), use_container_width=True, hide_index=True, height=360)

    def render(self):
        self._hero()
        self._cards()
        render_drill_down()
        self._charts()
        self._top_bottom()
        self._period_tables()
        self._detail_table()
