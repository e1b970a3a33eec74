# tests/conftest.py
import pytest

from lsa.core import clipboard
from lsa.models import ClipboardOutcome
from lsa.utils import tokenizer


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keeps the user's real ~/.gitconfig and global ignore file out of the tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home


@pytest.fixture(autouse=True)
def offline_tokenizer(monkeypatch):
    """tiktoken downloads its encodings on first use; tests use the chars/4 estimate."""
    def no_encoding():
        raise RuntimeError("offline")
    monkeypatch.setattr(tokenizer, "get_encoding", no_encoding)


@pytest.fixture(autouse=True)
def fake_clipboard(monkeypatch):
    """Replaces the real clipboard chain; the copied texts land in the returned list."""
    copied = []

    def backend(text):
        copied.append(text)
        return ClipboardOutcome.SUCCESS

    monkeypatch.setattr(clipboard, "DEFAULT_BACKENDS", [("fake", backend)])
    return copied


@pytest.fixture
def project(tmp_path):
    """
    A small repository:
    1. source files (.py, .rs, Makefile)
    2. a binary asset
    3. .git metadata
    4. .gitignore rules, a nested .gitignore and a re-included file
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / ".git" / "info").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("print('main')\n", encoding="utf-8")
    (src / "lib.rs").write_text("pub fn add() {}\n", encoding="utf-8")
    (src / "debug.log").write_text("noise\n", encoding="utf-8")
    (src / "keep.log").write_text("keep me\n", encoding="utf-8")

    (root / "Makefile").write_text("all:\n\techo hi\n", encoding="utf-8")
    (root / ".env").write_text("TOKEN=x\n", encoding="utf-8")

    build = root / "build"
    build.mkdir()
    (build / "out.txt").write_text("artifact\n", encoding="utf-8")

    assets = root / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe")

    (root / ".gitignore").write_text("build/\n*.log\n", encoding="utf-8")
    (src / ".gitignore").write_text("!keep.log\n", encoding="utf-8")

    return root
