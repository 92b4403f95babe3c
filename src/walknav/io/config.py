# io/config.py
from pathlib import Path

from walknav.config.models import NavModel


def load_config(path: str | Path) -> NavModel:
    """Read and validate a JSON navigation config."""
    return NavModel.model_validate_json(Path(path).read_text(encoding="utf-8"))
