# src/lsa/core/assembler.py
import os
from pathlib import Path
from typing import Iterable, Optional

from lsa.config import SEPARATOR
from lsa.models import AssemblyResult, DisplayableContent
from lsa.utils.format import format_size


def read_content(path: Path) -> DisplayableContent:
    """
    Reads a file as strict UTF-8. Binary, undecodable or unreadable files come
    back as the placeholder instead of raising.
    """
    try:
        raw = path.read_bytes()
    except OSError:
        return DisplayableContent.placeholder("read")
    try:
        return DisplayableContent(raw.decode("utf-8"))
    except UnicodeDecodeError:
        return DisplayableContent.placeholder("decode")


def displayable(name: str) -> str:
    """Undecodable bytes in a path (surrogate-escaped by os.walk) become U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def render_header(root: Path) -> str:
    return f"📦 Workspace: {displayable(str(root))}\n\n"


def render_section(rel_path: str, content: DisplayableContent) -> str:
    rel_path = displayable(rel_path)
    label = rel_path if os.path.isabs(rel_path) else f"./{rel_path}"
    return f"{label}\n{SEPARATOR}\n{content.text}\n\n"


def render_truncation_notice(budget: int) -> str:
    return f"... truncated: snapshot reached the {format_size(budget)} budget ({budget} bytes)\n"


def assemble(root: Path, entries: Iterable[str], budget: Optional[int] = None) -> AssemblyResult:
    """
    Concatenates a header and one section per entry, in the given order.

    With a budget, a section that would push the running total past it is dropped
    whole, assembly stops there, and a single truncation notice closes the blob.
    `total_bytes` counts the header and included sections, not the notice.
    If the header alone exceeds the budget, the blob is just the notice.
    """
    root = Path(root)
    header = render_header(root)
    header_bytes = len(header.encode("utf-8"))
    if budget is not None and header_bytes > budget:
        return AssemblyResult(render_truncation_notice(budget), True, 0, 0)

    parts = [header]
    total_bytes = header_bytes
    included = 0

    for rel_path in entries:
        section = render_section(rel_path, read_content(root / rel_path))
        section_bytes = len(section.encode("utf-8"))
        if budget is not None and total_bytes + section_bytes > budget:
            parts.append(render_truncation_notice(budget))
            return AssemblyResult("".join(parts), True, total_bytes, included)
        parts.append(section)
        total_bytes += section_bytes
        included += 1

    return AssemblyResult("".join(parts), False, total_bytes, included)
