from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpellbookConfig:
    comment_prefix: str = "#"
    log_level: str = "WARNING"
    output_format: str = "text"  # "text" or "json"
    strict: bool = False  # treat warnings as failures in `check`
