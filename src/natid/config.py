from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

# ---- Defaults (locale used when the CLI gets no --locale) ----
class Defaults(BaseModel):
    tax_id: str = "en-US"
    vat: Optional[str] = None        # no sensible default country; --locale is required
    identity_card: str = "any"

# ---- Logging ----
class LoggingConfig(BaseModel):
    json_logs: bool = True
    level: Literal["debug", "info", "warning", "error"] = "warning"

# ---- Root config ----
class NatidConfig(BaseModel):
    defaults: Defaults = Field(default_factory=Defaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> NatidConfig:
    if not path:
        return NatidConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return NatidConfig(**data)
