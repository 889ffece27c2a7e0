import streamlit as st

# Núcleo y utilidades propias
from core.config import settings, configure_logging
from core.load import load_data
from core.context import DashboardContext
from features.filters import filter_options

# OO y vistas
from ui.filters import DiscountFilterPanel, location_selector
from views.discounts import DiscountsView

st.set_page_config(page_title="Descuentos & Promociones", layout="wide")

def navbar() -> str:
    return st.sidebar.radio("Modo", ["Simplificado", "Técnico"], index=1, key="nav_mode")

@st.cache_data(show_spinner="Cargando datos de descuentos y promociones...", ttl=300)
def _load():
    return load_data()

def main():
    configure_logging()
    DATA_DIR, sales = _load()

    st.title("🏷️ Descuentos & Promociones")
    st.caption("Análisis de estrategias de descuento e impacto promocional en todos los canales de venta")

    if sales.empty:
        st.warning(f"No hay transacciones en {DATA_DIR / settings.TRANSACTIONS_FILE}. Genera datos con `python generate_data.py`.")
        st.stop()

    mode = navbar()

    # Contexto compartido (dataclass)
    ctx = DashboardContext(
        DATA_DIR=DATA_DIR,
        sales=sales,
        locations=filter_options(sales)["location"],
    )

    # Filtros (colapsados por defecto) + ubicación global
    filters = DiscountFilterPanel(ctx).render(collapsed=True)
    ctx.selected_location = location_selector(ctx)

    DiscountsView(ctx, filters, mode=mode).render()

if __name__ == "__main__":
    main()
