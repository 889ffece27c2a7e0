import pandas as pd

RENAME_MAP = {
    "customer_email": "Cliente",
    "calculated_location": "Ubicación",
    "cleaned_category": "Categoría",
    "cleaned_product": "Producto",
    "sold_by": "Vendedor",
    "payment_method": "Método de pago",
    "payment_date": "Fecha de pago",
    "discount_amount": "Descuento",
    "discount_percentage": "Descuento %",
    "payment_value": "Pagado",
    "mrp_post_tax": "MRP (con impuestos)",
    "mrp_pre_tax": "MRP (sin impuestos)",
    "total_discount": "Descuento total",
    "transactions": "Transacciones",
    "customers": "Clientes",
    "revenue": "Ingresos",
    "avg_discount_pct": "Descuento promedio %",
    "period": "Periodo",
}

def nice_headers(df: pd.DataFrame) -> pd.DataFrame:
    return df.rename(columns={k: v for k, v in RENAME_MAP.items() if k in df.columns})
