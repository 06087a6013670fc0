from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional


LineFilter = Callable[[str], str]


@dataclass(frozen=True)
class VerificationResult:
    status_code: int
    body: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200


@dataclass(frozen=True)
class StaticResource:
    key: str  # e.g. "files/provision.html"
    path: Path
    media_type: str
    line_filter: Optional[LineFilter] = None
