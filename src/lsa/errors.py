# src/lsa/errors.py
from typing import List

from lsa.models import ClipboardAttempt


class SnapshotError(Exception):
    """Base class for errors surfaced by a snapshot operation."""


class NotFound(SnapshotError, FileNotFoundError):
    """The requested path does not exist."""


class InvalidInput(SnapshotError, ValueError):
    """The path exists but is the wrong kind (file vs. directory)."""


class FilesystemError(SnapshotError, OSError):
    """The snapshot root could not be read."""


class DeliveryError(SnapshotError):
    """Every clipboard backend failed."""

    def __init__(self, attempts: List[ClipboardAttempt]):
        self.attempts = list(attempts)
        reasons = "; ".join(str(a) for a in self.attempts) or "no backends configured"
        super().__init__(f"Could not copy to clipboard ({reasons})")
