from __future__ import annotations

import logging
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from skill_analysis.taxonomy import AI_CLUSTER


class Report(BaseModel):
    enabled: bool = True
    top_skills: int = Field(default=5, ge=1)


class Logging(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = (v or "").strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown logging level: {v}")
        return name


class Config(BaseModel):
    version: int = 1
    input_path: str = "data/postings.json"
    output_path: str = "data/results/results.json"
    # optional YAML override of the built-in taxonomy
    taxonomy_path: Optional[str] = None
    ai_cluster: str = AI_CLUSTER
    report: Report = Field(default_factory=Report)
    logging: Logging = Field(default_factory=Logging)


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a YAML mapping (dict). Got: {type(raw)}")

    return Config(**raw)
