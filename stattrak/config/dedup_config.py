#!filepath: stattrak/config/dedup_config.py
from pydantic import BaseModel, Field


class DedupConfig(BaseModel):
    release_delay_ticks: int = Field(default=1, ge=0)
    tick_seconds: float = Field(default=0.05, gt=0)
