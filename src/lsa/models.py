# src/lsa/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from lsa.config import PLACEHOLDER


@dataclass(frozen=True)
class DisplayableContent:
    """File text as it goes into a snapshot, or the placeholder if it could not be read."""
    text: str
    failure: Optional[str] = None  # None, "decode" or "read"

    @classmethod
    def placeholder(cls, failure: str) -> "DisplayableContent":
        return cls(PLACEHOLDER, failure)

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class AssemblyResult:
    blob: str
    truncated: bool
    total_bytes: int
    included: int = 0

    def __iter__(self):
        # Allows `blob, truncated, total = assemble(...)`
        return iter((self.blob, self.truncated, self.total_bytes))


class ClipboardOutcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "tool-not-found"
    FAILED = "write-error"


@dataclass(frozen=True)
class ClipboardAttempt:
    backend: str
    outcome: ClipboardOutcome
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.backend}: {self.outcome.value} ({self.detail})"
        return f"{self.backend}: {self.outcome.value}"


@dataclass(frozen=True)
class DeliveryReport:
    backend: str
    failures: List[ClipboardAttempt] = field(default_factory=list)


@dataclass(frozen=True)
class SnapshotReport:
    """What a snapshot operation produced, for the caller's diagnostics."""
    files: int
    total_bytes: int
    truncated: bool
    backend: str
