# src/lsa/core/clipboard.py
import subprocess
import sys
from typing import Callable, List, Optional, Sequence, Tuple, Union

import pyperclip

from lsa.errors import DeliveryError
from lsa.models import ClipboardAttempt, ClipboardOutcome, DeliveryReport

BackendResult = Union[ClipboardOutcome, Tuple[ClipboardOutcome, str]]
Backend = Tuple[str, Callable[[str], BackendResult]]


def _pipe_to(command: List[str]) -> Callable[[str], BackendResult]:
    """Backend that feeds the text to an external copy tool on stdin."""

    def run(text: str) -> BackendResult:
        try:
            # The tools fork to keep serving the selection; inherited pipes would block us
            proc = subprocess.run(
                command,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except FileNotFoundError:
            return ClipboardOutcome.NOT_FOUND, f"{command[0]} not installed"
        except OSError as e:
            return ClipboardOutcome.FAILED, str(e)
        if proc.returncode != 0:
            return ClipboardOutcome.FAILED, f"exit status {proc.returncode}"
        return ClipboardOutcome.SUCCESS

    return run


def _pyperclip_copy(text: str) -> BackendResult:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        # The base class is what pyperclip raises when it found no mechanism at all
        if type(e) is pyperclip.PyperclipException:
            return ClipboardOutcome.NOT_FOUND, str(e)
        return ClipboardOutcome.FAILED, str(e)
    except Exception as e:
        return ClipboardOutcome.FAILED, str(e)
    return ClipboardOutcome.SUCCESS


DEFAULT_BACKENDS: List[Backend] = [
    ("wl-copy", _pipe_to(["wl-copy"])),
    ("xclip", _pipe_to(["xclip", "-selection", "clipboard"])),
    ("pyperclip", _pyperclip_copy),
]


def _normalize(result: BackendResult) -> Tuple[ClipboardOutcome, str]:
    if isinstance(result, tuple):
        return result
    return result, ""


def deliver(text: str, backends: Optional[Sequence[Backend]] = None) -> DeliveryReport:
    """
    Tries each backend once, in order, until one succeeds.
    Raises DeliveryError with every attempt if none does.
    """
    if backends is None:
        backends = DEFAULT_BACKENDS

    failures: List[ClipboardAttempt] = []
    for name, backend in backends:
        outcome, detail = _normalize(backend(text))
        if outcome is ClipboardOutcome.SUCCESS:
            return DeliveryReport(backend=name, failures=failures)
        attempt = ClipboardAttempt(name, outcome, detail)
        if outcome is ClipboardOutcome.FAILED:
            print(f"  > [Warning] Clipboard backend {attempt}", file=sys.stderr)
        failures.append(attempt)

    raise DeliveryError(failures)
