"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/config.py

YAML configuration for translation jobs.

    seqalgebra:
      translation:
        table: 11            # NCBI transl_table id
        redundant: resolve   # error | resolve
        to_stop: false
        stop_char: "*"
        gap_char: "-"

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from .errors import ConfigError
from .genetic_code import GeneticCodeTable

_LOG = logging.getLogger("seqalgebra.config")

# --- config schema -----------------------------------------------------------


class TranslationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    table: StrictInt = Field(default=1, description="NCBI genetic code id (transl_table)")
    redundant: Literal["error", "resolve"] = "error"
    to_stop: bool = False
    stop_char: str = Field(default="*", min_length=1, max_length=1)
    gap_char: str = Field(default="-", min_length=1, max_length=1)

    @field_validator("table")
    @classmethod
    def _known_table(cls, v: int):
        if GeneticCodeTable.from_ncbi_id(v) is None:
            allowed = [t.ncbi_id for t in GeneticCodeTable]
            raise ValueError(f"Unknown genetic code id: {v!r}. Allowed: {allowed}")
        return v

    @property
    def genetic_code(self) -> GeneticCodeTable:
        return GeneticCodeTable(self.table)


class SeqAlgebraConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    translation: TranslationConfig = Field(default_factory=TranslationConfig)


# --- loader ------------------------------------------------------------------


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e


def load_config(path: Union[str, Path]) -> SeqAlgebraConfig:
    """
    Read a YAML file and validate it. The settings may sit at the top level
    or under a ``seqalgebra:`` key.
    """
    p = Path(path).expanduser().resolve()
    raw = _load_yaml(p)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {p} must be a mapping, got {type(raw).__name__}")
    if "seqalgebra" in raw:
        raw = raw["seqalgebra"] or {}
    try:
        cfg = SeqAlgebraConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {p}:\n{e}") from e
    _LOG.info("Loaded config %s (genetic code %d)", p, cfg.translation.table)
    return cfg
