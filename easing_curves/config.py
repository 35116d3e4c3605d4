from __future__ import annotations

import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV_VAR = "EASING_CURVES_CONFIG"


class AppConfig(BaseModel):
    curve: Optional[str] = Field(None, description="Curve line, e.g. Linear,x_t0=100,x_tmax=200,duration=1")
    times: Optional[List[float]] = Field(None, description="Times to evaluate instead of reading stdin")
    steps: Optional[int] = Field(None, ge=2, description="Default number of samples for `sample`")


def load_config(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(**data)


def resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Explicit path first, then the EASING_CURVES_CONFIG environment variable."""
    return path or os.getenv(CONFIG_ENV_VAR) or None
