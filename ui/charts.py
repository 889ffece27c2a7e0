import pandas as pd
import altair as alt
import streamlit as st

def group_totals_chart(totals: pd.DataFrame, title: str, metric: str = "total_discount", limit: int = 15):
    """
    Espera columnas de group_totals:
      - key
      - total_discount, transactions, customers, revenue, avg_discount_pct
    """
    if totals is None or totals.empty:
        st.info(f"Sin datos para {title.lower()}.")
        return

    data = totals.head(limit).copy()
    data[metric] = pd.to_numeric(data[metric], errors="coerce").fillna(0)

    chart = (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X(f"{metric}:Q", title="Descuento total" if metric == "total_discount" else metric),
            y=alt.Y("key:N", sort="-x", title=title),
            tooltip=["key:N", "total_discount:Q", "transactions:Q", "customers:Q", "revenue:Q"],
        )
        .properties(height=min(40 * len(data) + 40, 420))
    )
    st.altair_chart(chart, use_container_width=True)

def monthly_trend_chart(monthly: pd.DataFrame):
    """
    Espera columnas de period_totals(freq="M"):
      - period ("YYYY-MM")
      - total_discount, revenue
    Convierte a formato largo (Serie, Valor).
    """
    if monthly is None or monthly.empty:
        st.info("Sin datos para la tendencia mensual.")
        return

    long_df = pd.melt(
        monthly,
        id_vars=["period"],
        value_vars=["total_discount", "revenue"],
        var_name="Serie",
        value_name="Valor",
    )
    long_df["Serie"] = long_df["Serie"].map({"total_discount": "Descuento", "revenue": "Ingresos"})
    long_df["Valor"] = pd.to_numeric(long_df["Valor"], errors="coerce").fillna(0)

    chart = (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=alt.X("period:N", title="Mes"),
            y=alt.Y("Valor:Q", title="Monto"),
            color=alt.Color("Serie:N", title="Serie"),
            tooltip=["period:N", "Serie:N", "Valor:Q"],
        )
        .properties(height=280)
    )
    st.altair_chart(chart, use_container_width=True)
