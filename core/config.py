# core/config.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Datos
    DATA_DIR: Path = Path("./data")
    TRANSACTIONS_FILE: str = "discount_sales.csv"
    # Presentación
    CURRENCY_SYMBOL: str = "₹"
    # API
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:8501"]
    # Otros
    LOG_LEVEL: str = "info"

    class Config:
        env_file = ".env"  # opcional
        env_file_encoding = "utf-8"

settings = Settings()

def configure_logging(level: str | None = None) -> None:
    """Configura el logging raíz con el nivel de settings (o el indicado)."""
    name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
