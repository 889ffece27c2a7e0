from pathlib import Path

from core.config import settings

def resolve_data_dir() -> Path:
    candidates = [
        Path(settings.DATA_DIR),
        Path(__file__).parent.parent / "data",
        Path.cwd() / "data",
    ]
    for p in candidates:
        if p.exists():
            return p
    # por defecto el configurado (lo crea generate_data.py)
    return candidates[0]
