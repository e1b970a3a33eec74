# tests/test_classifier.py
from pathlib import Path

import pytest

from lsa.core.classifier import filter_source, is_source


@pytest.mark.parametrize("path", [
    "main.rs",
    "src/app.py",
    "web/index.tsx",
    "Cargo.toml",
    "docs/guide.md",
    "config.yaml",
    "Makefile",
    "Dockerfile",
    "README",
    "LICENSE",
    ".env",
])
def test_source_files(path):
    assert is_source(path) is True


@pytest.mark.parametrize("path", [
    "logo.png",
    "archive.tar.gz",
    "bin/tool.exe",
    "notes",
    ".DS_Store",
    "readme.unknownext",
])
def test_non_source_files(path):
    assert is_source(path) is False


def test_extension_matching_is_case_insensitive():
    assert is_source("MAIN.RS") is True
    assert is_source("Script.Py") is True
    assert is_source("README.MD") is True


def test_filename_list_only_applies_without_extension():
    # "makefile" is allow-listed as a bare name, but ".bak" is not an allowed extension
    assert is_source("Makefile.bak") is False


def test_accepts_path_objects():
    assert is_source(Path("src") / "lib.rs") is True


def test_is_pure():
    for _ in range(3):
        assert is_source("a.rs") is True
        assert is_source("b.png") is False


def test_filter_source_keeps_order():
    entries = ["z.py", "b.png", "a.rs", "Makefile", "m.jpg", "c.go"]
    assert filter_source(entries) == ["z.py", "a.rs", "Makefile", "c.go"]
