from __future__ import annotations
from pathlib import Path
import json
from typing import Optional
import yaml
from pydantic import BaseModel
from .errors import SettingsError

class Settings(BaseModel):
    strict_parse: bool = False
    warn_invalid: bool = False
    rng_seed: Optional[int] = None  # None -> OS randomness

def _load(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text) or {}
    return json.loads(text)

def load_settings(path: Path) -> Settings:
    # Only read when a file is named explicitly; nothing is written back.
    try:
        return Settings.model_validate(_load(path))
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SettingsError(f"{path}: {e}") from e
