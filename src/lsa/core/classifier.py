# src/lsa/core/classifier.py
from pathlib import PurePath
from typing import Iterable, List, Union

from lsa.config import SOURCE_EXTENSIONS, SOURCE_FILENAMES


def is_source(path: Union[str, PurePath]) -> bool:
    """True if the extension (case-insensitive) or, for extensionless names, the filename is allow-listed."""
    p = PurePath(path)
    suffix = p.suffix
    if suffix:
        return suffix[1:].lower() in SOURCE_EXTENSIONS
    return p.name.lower() in SOURCE_FILENAMES


def filter_source(entries: Iterable[str]) -> List[str]:
    """Keeps source files, preserving input order."""
    return [e for e in entries if is_source(e)]
