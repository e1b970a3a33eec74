# src/lsa/core/walker.py
import os
import sys
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from lsa.config import VCS_DIR_NAME
from lsa.core.ignore import IgnoreLayer, is_path_ignored, load_base_layers, load_directory_layers
from lsa.errors import FilesystemError


class IgnoreAwareWalker:
    """
    Enumerates regular files under a root, honoring .gitignore/.ignore files, the
    repository exclude file and the user's global ignore file. Hidden files are kept
    unless a rule excludes them; `.git` is always skipped.
    """

    def __init__(self, root_dir: Path, home: Optional[Path] = None):
        self.root_dir = Path(root_dir).resolve()
        self.home = home

    def _check_root(self) -> None:
        try:
            os.listdir(self.root_dir)
        except OSError as e:
            raise FilesystemError(f"Cannot read directory '{self.root_dir}': {e}") from e

    def _on_error(self, err: OSError) -> None:
        print(f"  > [Warning] Skipping {err.filename} ({err.strerror or err})", file=sys.stderr)

    def scan(self) -> Iterator[str]:
        """
        Yields POSIX paths relative to the root, in filesystem order. Ignored
        directories are pruned so nothing below them is visited.
        """
        self._check_root()
        base_layers = load_base_layers(self.root_dir, self.home)
        # walk path -> (layers in effect, real paths of the directory and its ancestors)
        pending: Dict[str, Tuple[List[IgnoreLayer], FrozenSet[str]]] = {}
        root_state = (base_layers, frozenset({os.path.realpath(self.root_dir)}))

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_error, followlinks=True):
            root_path = Path(root)
            parent_layers, ancestors = pending.pop(root, root_state)
            layers = parent_layers + load_directory_layers(root_path)

            # --- 1. Prune directories (in-place, os.walk follows what is left) ---
            for d in list(dirs):
                dir_abs_path = root_path / d
                if d == VCS_DIR_NAME:
                    dirs.remove(d)
                    continue
                real = os.path.realpath(dir_abs_path)
                if real in ancestors:
                    # symlink back into a directory we are already inside
                    dirs.remove(d)
                    continue
                if is_path_ignored(dir_abs_path, layers, is_directory=True):
                    dirs.remove(d)
                    continue
                pending[os.path.join(root, d)] = (layers, ancestors | {real})

            # --- 2. Files ---
            for f in files:
                if f == VCS_DIR_NAME:
                    continue
                file_abs_path = root_path / f
                # is_file() follows symlinks: broken links, sockets and devices drop out here
                if not file_abs_path.is_file():
                    continue
                if is_path_ignored(file_abs_path, layers, is_directory=False):
                    continue
                yield file_abs_path.relative_to(self.root_dir).as_posix()


def walk(root: Path, home: Optional[Path] = None) -> List[str]:
    """Returns every non-ignored regular file under `root` as a relative POSIX path."""
    return list(IgnoreAwareWalker(root, home=home).scan())
