from __future__ import annotations
import streamlit as st

from core.headers import nice_headers
from features.drilldown import DrillDownState, DrillDownSummary
from utils.formatters import fmt_currency, fmt_number

STATE_KEY = "drilldown_state"

def get_state() -> DrillDownState:
    return st.session_state.setdefault(STATE_KEY, DrillDownState())

def open_drill_down(summary: DrillDownSummary, kind: str = "metric") -> None:
    st.session_state[STATE_KEY] = get_state().open(summary, kind)

def close_drill_down() -> None:
    st.session_state[STATE_KEY] = get_state().close()

def render_drill_down():
    """Panel de detalle del segmento seleccionado (si hay uno abierto)."""
    state = get_state()
    if not state.is_open or state.data is None:
        return
    d = state.data
    with st.container(border=True):
        st.subheader(f"Detalle: {d.name}")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Valor pagado", fmt_currency(d.total_value))
        c2.metric("Transacciones", fmt_number(d.total_transactions))
        c3.metric("Clientes", fmt_number(d.total_customers))
        c4.metric("Descuento", fmt_currency(d.metric_value))
        st.dataframe(nice_headers(d.raw_data), use_container_width=True, hide_index=True, height=300)
        st.button("Cerrar", key="drilldown_close", on_click=close_drill_down)
