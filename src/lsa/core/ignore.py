# src/lsa/core/ignore.py
import configparser
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from lsa.config import IGNORE_FILE_NAMES, VCS_DIR_NAME


@dataclass(frozen=True)
class IgnoreLayer:
    """Compiled patterns from one ignore file, anchored at the directory they apply to."""
    base: Path
    spec: pathspec.PathSpec
    source: str = ""


def find_repo_root(start: Path) -> Optional[Path]:
    """Returns the nearest directory at or above `start` that holds a `.git` entry."""
    for candidate in [start, *start.parents]:
        if (candidate / VCS_DIR_NAME).exists():
            return candidate
    return None


def global_ignore_file(home: Optional[Path] = None) -> Optional[Path]:
    """
    Locates the user-wide ignore file the way git does:
    core.excludesFile from ~/.gitconfig, else $XDG_CONFIG_HOME/git/ignore,
    else ~/.config/git/ignore.
    """
    home = home or Path.home()

    gitconfig = home / ".gitconfig"
    if gitconfig.is_file():
        parser = configparser.ConfigParser(strict=False, interpolation=None, allow_no_value=True)
        try:
            parser.read(gitconfig, encoding="utf-8")
            excludes = parser.get("core", "excludesfile", fallback=None)
        except (configparser.Error, OSError, UnicodeDecodeError) as e:
            print(f"  > [Warning] Could not parse {gitconfig}: {e}", file=sys.stderr)
            excludes = None
        if excludes:
            return Path(os.path.expanduser(excludes.strip().strip('"')))

    xdg = os.environ.get("XDG_CONFIG_HOME")
    config_home = Path(xdg) if xdg else home / ".config"
    candidate = config_home / "git" / "ignore"
    return candidate if candidate.is_file() else None


def load_ignore_layer(ignore_file: Path, base: Path) -> Optional[IgnoreLayer]:
    """
    Loads rules from one ignore file. Returns None when the file is absent or empty;
    an unreadable file is reported and treated as empty.
    """
    try:
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        print(f"  > [Warning] Ignoring unreadable {ignore_file}: {e}", file=sys.stderr)
        return None

    try:
        spec = pathspec.PathSpec.from_lines("gitignore", lines)
    except ValueError as e:
        print(f"  > [Warning] Error parsing ignore rules in {ignore_file}: {e}", file=sys.stderr)
        return None
    if not any(p.include is not None for p in spec.patterns):
        return None
    return IgnoreLayer(base=base, spec=spec, source=str(ignore_file))


def load_directory_layers(directory: Path) -> List[IgnoreLayer]:
    """Loads `.gitignore` then `.ignore` from one directory, lowest precedence first."""
    layers = []
    for name in IGNORE_FILE_NAMES:
        layer = load_ignore_layer(directory / name, directory)
        if layer is not None:
            layers.append(layer)
    return layers


def load_base_layers(root: Path, home: Optional[Path] = None) -> List[IgnoreLayer]:
    """
    Builds every layer that applies before the walk starts, lowest precedence first:
    the global ignore file, the repository exclude file, and per-directory ignore
    files of the ancestors between the repository root and `root` (exclusive).
    """
    repo_root = find_repo_root(root)
    anchor = repo_root or root
    layers: List[IgnoreLayer] = []

    global_file = global_ignore_file(home)
    if global_file is not None:
        layer = load_ignore_layer(global_file, anchor)
        if layer is not None:
            layers.append(layer)

    if repo_root is not None:
        layer = load_ignore_layer(repo_root / VCS_DIR_NAME / "info" / "exclude", repo_root)
        if layer is not None:
            layers.append(layer)

        ancestors = [p for p in root.parents if p == repo_root or repo_root in p.parents]
        for ancestor in reversed(ancestors):
            layers.extend(load_directory_layers(ancestor))

    return layers


def is_path_ignored(path: Path, layers: Iterable[IgnoreLayer], is_directory: bool = False) -> bool:
    """
    Decides whether an absolute `path` is ignored. Layers are checked in order and,
    inside each layer, patterns in file order; the last pattern that matches wins,
    so `!negations` and deeper ignore files override earlier rules.
    """
    ignored = False
    for layer in layers:
        try:
            rel = path.relative_to(layer.base).as_posix()
        except ValueError:
            continue
        if is_directory:
            rel += "/"
        for pattern in layer.spec.patterns:
            if pattern.include is None:
                continue
            if pattern.match_file(rel) is not None:
                ignored = pattern.include
    return ignored
