from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = ("1", "true", "yes", "on")


class ParseConfig(BaseModel):
    """Caller options for a parse run."""

    # Estimate column widths from cell text length
    compute_auto_width: bool = False
    # Tables resolved concurrently when > 1
    max_workers: int = Field(default=1, ge=1)

    @classmethod
    def from_env(cls) -> "ParseConfig":
        """
        Build a config from the environment:
          - ``COMPUTE_AUTO_WIDTH``  (1/true/yes/on, default off)
          - ``PARSE_MAX_WORKERS``   (int, default 1)
        """
        return cls(
            compute_auto_width=os.getenv("COMPUTE_AUTO_WIDTH", "false").strip().lower() in _TRUTHY,
            max_workers=int(os.getenv("PARSE_MAX_WORKERS", "1")),
        )
