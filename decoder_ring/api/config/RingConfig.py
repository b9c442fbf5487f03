"""Top-level decoder-ring configuration."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Program name that selects encoding by default
ENCODER_PROGRAM = "encoder-ring"

LOG_LEVEL_ENV = "DECODER_RING_LOG_LEVEL"
LOG_FILE_ENV = "DECODER_RING_LOG_FILE"


class RingConfig(BaseModel):
    """Startup configuration, resolved once and passed to the CLI app."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_encode: bool = Field(False, description="Encode unless told otherwise")
    strip_newline: bool = Field(True, description="Drop one trailing newline from input by default")
    emit_newline: bool = Field(True, description="Append a newline to output by default")
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("WARN", description="Logging level")
    log_file: Path | None = Field(None, description="Optional rotating log file")

    @classmethod
    def load(cls, argv0: str | None = None, environ: Mapping[str, str] | None = None) -> "RingConfig":
        """Build config from the invoked program name and the environment.

        Args:
            argv0: Program path as invoked; ``encoder-ring`` defaults to encoding
            environ: Environment mapping (default os.environ)

        Raises:
            ValueError: If an environment value does not validate
        """
        if environ is None:
            environ = os.environ

        raw: dict = {"default_encode": bool(argv0) and Path(argv0).stem == ENCODER_PROGRAM}
        if environ.get(LOG_LEVEL_ENV):
            raw["log_level"] = environ[LOG_LEVEL_ENV].upper()
        if environ.get(LOG_FILE_ENV):
            raw["log_file"] = Path(environ[LOG_FILE_ENV]).expanduser()

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
