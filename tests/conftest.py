"""
Fixtures compartidos: transacciones de ejemplo con las llaves de origen (camelCase).
"""
import pytest


def make_tx(**overrides):
    tx = {
        "customerEmail": "ana@example.com",
        "calculatedLocation": "Kemps Corner",
        "cleanedCategory": "Memberships",
        "cleanedProduct": "Studio 8 Class Package",
        "soldBy": "Lucía Torres",
        "paymentMethod": "Card",
        "paymentDate": "2024-03-10 10:30:00",
        "discountAmount": 10.0,
        "discountPercentage": 10.0,
        "paymentValue": 90.0,
        "mrpPostTax": 100.0,
        "mrpPreTax": 85.0,
    }
    tx.update(overrides)
    return tx


@pytest.fixture
def tx():
    return make_tx


@pytest.fixture
def sales():
    """Seis filas: una sin descuento, una venta online ('-'), una fecha mala."""
    return [
        make_tx(customerEmail="ana@example.com", discountAmount=10, discountPercentage=10,
                paymentValue=90, paymentDate="2024-01-15"),
        make_tx(customerEmail="beto@example.com", discountAmount=0, discountPercentage=0,
                paymentValue=100, paymentDate="2024-01-20"),
        make_tx(customerEmail="carla@example.com", soldBy="-", calculatedLocation="Bandra",
                cleanedCategory="Retail", cleanedProduct="Grip Socks", paymentMethod="UPI",
                discountAmount=20, discountPercentage=25, paymentValue=60, mrpPostTax=80,
                paymentDate="2024-02-05"),
        make_tx(customerEmail="ana@example.com", discountAmount=5, discountPercentage=5,
                paymentValue=95, paymentDate="2024-02-28 23:59:00"),
        make_tx(customerEmail="dani@example.com", soldBy="-", calculatedLocation="Bandra",
                discountAmount=30, discountPercentage=30, paymentValue=70, paymentDate="sin-fecha"),
        make_tx(customerEmail="eva@example.com", cleanedProduct="Studio 4 Class Package",
                discountAmount=15, discountPercentage=15, paymentValue=85, paymentDate="2023-12-31"),
    ]
