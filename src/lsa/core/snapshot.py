# src/lsa/core/snapshot.py
"""
The three snapshot operations: whole workspace, single file, single folder.

Each one walks/reads, assembles, prints a short size report and hands the blob
to the clipboard chain. Only NotFound, InvalidInput, FilesystemError and
DeliveryError escape; per-file problems end up as placeholders in the blob.
"""
import os
from pathlib import Path
from typing import Optional, Sequence

from lsa.config import SIZE_ADVISORY_THRESHOLD
from lsa.core.assembler import assemble, displayable, read_content, render_section
from lsa.core.classifier import filter_source
from lsa.core.clipboard import Backend, deliver
from lsa.core.walker import walk
from lsa.errors import InvalidInput, NotFound
from lsa.models import SnapshotReport
from lsa.utils.format import format_size
from lsa.utils.tokenizer import count_tokens


def _report_size(blob: str, total_bytes: int) -> None:
    tokens = count_tokens(blob)
    print(f"Size: {format_size(total_bytes)} ({total_bytes} bytes, ~{tokens} tokens)")


def _advise_if_large(total_bytes: int, hint: str) -> None:
    if total_bytes > SIZE_ADVISORY_THRESHOLD:
        print(f"Note: snapshot is larger than {format_size(SIZE_ADVISORY_THRESHOLD)}. {hint}")


def copy_workspace(
    source_only: bool = False,
    max_size_kb: Optional[int] = None,
    cwd: Optional[Path] = None,
    backends: Optional[Sequence[Backend]] = None,
) -> SnapshotReport:
    """Snapshots the current working directory to the clipboard."""
    root = Path(cwd or os.getcwd()).resolve()
    entries = walk(root)
    if source_only:
        entries = filter_source(entries)

    budget = max_size_kb * 1024 if max_size_kb is not None else None
    result = assemble(root, entries, budget)

    print(f"Workspace: {displayable(str(root))} ({result.included} of {len(entries)} file(s))")
    _report_size(result.blob, result.total_bytes)
    if result.truncated:
        print(f"Truncated at {max_size_kb} KB: {len(entries) - result.included} file(s) left out.")
    _advise_if_large(
        result.total_bytes,
        "Try --source-only to skip non-source files or --max-size <KB> to cap it.",
    )

    delivery = deliver(result.blob, backends)
    print(f"Copied to clipboard via {delivery.backend}")
    return SnapshotReport(result.included, result.total_bytes, result.truncated, delivery.backend)


def copy_file(file_path: str, backends: Optional[Sequence[Backend]] = None) -> SnapshotReport:
    """Copies a single file, wrapped in the same section format, to the clipboard."""
    path = Path(file_path)
    if not path.exists():
        raise NotFound(f"File not found: {file_path}")
    if not path.is_file():
        raise InvalidInput(f"Not a regular file: {file_path}")

    blob = render_section(path.as_posix(), read_content(path))
    total_bytes = len(blob.encode("utf-8"))

    print(f"File: {displayable(file_path)}")
    _report_size(blob, total_bytes)

    delivery = deliver(blob, backends)
    print(f"Copied to clipboard via {delivery.backend}")
    return SnapshotReport(1, total_bytes, False, delivery.backend)


def copy_folder(folder_path: str, backends: Optional[Sequence[Backend]] = None) -> SnapshotReport:
    """Snapshots one folder (same ignore rules, rooted at the folder) to the clipboard."""
    path = Path(folder_path)
    if not path.exists():
        raise NotFound(f"Folder not found: {folder_path}")
    if not path.is_dir():
        raise InvalidInput(f"Not a directory: {folder_path}")

    root = path.resolve()
    result = assemble(root, walk(root))

    print(f"Folder: {displayable(str(root))} ({result.included} file(s))")
    _report_size(result.blob, result.total_bytes)
    _advise_if_large(result.total_bytes, "Consider copying a smaller folder or single files instead.")

    delivery = deliver(result.blob, backends)
    print(f"Copied to clipboard via {delivery.backend}")
    return SnapshotReport(result.included, result.total_bytes, result.truncated, delivery.backend)
