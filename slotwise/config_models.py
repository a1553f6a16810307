from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from slotwise import CONFIG_PATH

logger = logging.getLogger(__name__)


# =============================================================================
# SchedulingConfig (args/scheduling.yaml)
# =============================================================================

class SearchConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    step_minutes: int = Field(default=30, ge=1)
    business_hours_start: int = Field(default=9, ge=0, le=23)
    business_hours_end: int = Field(default=17, ge=1, le=24)
    max_results: int = Field(default=10, ge=1)

    @model_validator(mode="after")
    def _check_business_hours(self) -> "SearchConfig":
        if self.business_hours_end <= self.business_hours_start:
            raise ValueError("business_hours_end must be after business_hours_start")
        return self

    @property
    def business_hours(self) -> tuple[int, int]:
        return (self.business_hours_start, self.business_hours_end)


class DefaultsConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    event_duration_minutes: int = Field(default=60, ge=1)
    preferred_hours: list[int] = Field(default_factory=list)


class SchedulingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    search: SearchConfig = Field(default_factory=SearchConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)


# =============================================================================
# load_config
# =============================================================================

def load_config(path: Optional[Path] = None) -> SchedulingConfig:
    yaml_path = Path(path) if path is not None else CONFIG_PATH

    try:
        if yaml_path.exists():
            with open(yaml_path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        return SchedulingConfig.model_validate(raw)
    except Exception as e:
        logger.warning(f"Config validation failed for {yaml_path.name}: {e}, using defaults")
        return SchedulingConfig()
