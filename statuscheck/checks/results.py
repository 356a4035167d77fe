from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CheckResult:
    status_code: int | None = None
    error: str | None = None
