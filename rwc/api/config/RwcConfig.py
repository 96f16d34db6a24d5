"""Top-level rwc configuration."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import BUFFER_SIZE
from .get_config_path import get_config_path


class RwcConfig(BaseModel):
    """Settings read from ``config.json`` in the rwc home directory.

    Every key is optional; a missing file means all defaults.
    """

    model_config = ConfigDict(extra="forbid")

    buffer_size: int = Field(BUFFER_SIZE, gt=0, description="Bytes read per chunk by streaming scans")
    max_workers: int | None = Field(None, gt=0, description="Thread pool size for path batches")
    format: Literal["table", "csv"] = Field("table", description="Default output format")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="Logging level")

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on RWC_HOME or default to ~/.rwc."""
        return get_config_path()

    @classmethod
    def load(cls) -> "RwcConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
