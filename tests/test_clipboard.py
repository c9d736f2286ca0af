"""Tests for resource backends and backend selection."""

import subprocess

import pyperclip
import pytest

from reprompt.core.errors import ResourceAccessError
from reprompt.core.settings import Settings
from reprompt.io import clipboard
from reprompt.io.clipboard import NativeClipboard, WslClipboard, is_wsl, select_backend
from reprompt.io.resource import MemoryResource, ResourceAccess


def completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestSelectBackend:
    """Strategy selection happens once, by name."""

    def test_named_backends(self):
        assert isinstance(select_backend("memory"), MemoryResource)
        assert isinstance(select_backend("native"), NativeClipboard)
        assert isinstance(select_backend("WSL"), WslClipboard)

    def test_auto_inside_wsl(self, monkeypatch):
        monkeypatch.setattr(clipboard, "is_wsl", lambda: True)
        assert isinstance(select_backend("auto"), WslClipboard)

    def test_auto_elsewhere(self, monkeypatch):
        monkeypatch.setattr(clipboard, "is_wsl", lambda: False)
        assert isinstance(select_backend(), NativeClipboard)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            select_backend("floppy")

    def test_backends_satisfy_protocol(self):
        for backend in (MemoryResource(), NativeClipboard(), WslClipboard()):
            assert isinstance(backend, ResourceAccess)

    def test_is_wsl_from_environment(self, monkeypatch):
        monkeypatch.setenv("WSL_DISTRO_NAME", "Ubuntu")
        assert is_wsl() is True


class TestWslClipboard:
    """PowerShell / clip.exe bridge, with subprocess stubbed out."""

    def test_read_normalizes_line_endings(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", lambda *a, **kw: completed(stdout=b"a\r\nb\r\n"))
        assert WslClipboard().read() == "a\nb"

    def test_read_failure(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", lambda *a, **kw: completed(1, stderr=b"denied"))
        with pytest.raises(ResourceAccessError, match="denied"):
            WslClipboard().read()

    def test_missing_executable(self, monkeypatch):
        def run(*args, **kwargs):
            raise FileNotFoundError("powershell.exe")
        monkeypatch.setattr(subprocess, "run", run)
        with pytest.raises(ResourceAccessError):
            WslClipboard().read()

    def test_write_sends_utf16(self, monkeypatch):
        calls = []

        def run(args, **kwargs):
            calls.append((args, kwargs["input"]))
            return completed()

        monkeypatch.setattr(subprocess, "run", run)
        WslClipboard().write("│ x")
        assert calls == [(["clip.exe"], "│ x".encode("utf-16"))]

    def test_write_failure(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", lambda *a, **kw: completed(2))
        with pytest.raises(ResourceAccessError):
            WslClipboard().write("x")


class TestNativeClipboard:
    """pyperclip errors become ResourceAccessError."""

    def test_round_trip(self, monkeypatch):
        store = {}
        monkeypatch.setattr(pyperclip, "copy", lambda text: store.update(text=text))
        monkeypatch.setattr(pyperclip, "paste", lambda: store["text"])
        board = NativeClipboard()
        board.write("hello")
        assert board.read() == "hello"

    def test_paste_failure(self, monkeypatch):
        def paste():
            raise pyperclip.PyperclipException("no clipboard mechanism")
        monkeypatch.setattr(pyperclip, "paste", paste)
        with pytest.raises(ResourceAccessError, match="no clipboard"):
            NativeClipboard().read()


class TestSettings:
    """Configuration comes from REPROMPT_* variables."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("REPROMPT_BACKEND", raising=False)
        settings = Settings()
        assert settings.backend == "auto"
        assert settings.validation_policy().min_content_length == 10

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("REPROMPT_MIN_CONTENT_LENGTH", "5")
        monkeypatch.setenv("REPROMPT_BACKEND", "memory")
        settings = Settings()
        assert settings.backend == "memory"
        assert settings.validation_policy().min_content_length == 5
