"""
System clipboard backends.

The backend is chosen once at startup by select_backend(); nothing in the
cleaning or transaction code knows which one is in use.
"""

from __future__ import annotations

import logging
import os
import platform
import subprocess

import pyperclip

from reprompt.core.errors import ResourceAccessError
from reprompt.io.resource import MemoryResource, ResourceAccess

logger = logging.getLogger(__name__)

POWERSHELL_READ = ["powershell.exe", "-NoProfile", "-Command", "Get-Clipboard"]
CLIP_WRITE = ["clip.exe"]


def is_wsl() -> bool:
    """True when running inside Windows Subsystem for Linux."""
    if os.environ.get("WSL_DISTRO_NAME"):
        return True
    return "microsoft" in platform.uname().release.lower()


class WslClipboard:
    """Windows clipboard reached from WSL through PowerShell and clip.exe."""

    def read(self) -> str:
        try:
            proc = subprocess.run(POWERSHELL_READ, capture_output=True)
        except OSError as exc:
            raise ResourceAccessError(f"could not run powershell.exe: {exc}") from exc
        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            raise ResourceAccessError(f"Get-Clipboard failed: {stderr}")

        text = proc.stdout.decode("utf-8", errors="replace").replace("\r\n", "\n")
        # Get-Clipboard terminates its output with a newline of its own
        return text.removesuffix("\n")

    def write(self, text: str) -> None:
        try:
            proc = subprocess.run(CLIP_WRITE, input=text.encode("utf-16"), capture_output=True)
        except OSError as exc:
            raise ResourceAccessError(f"could not run clip.exe: {exc}") from exc
        if proc.returncode != 0:
            raise ResourceAccessError(f"clip.exe exited with status {proc.returncode}")


class NativeClipboard:
    """Host clipboard through pyperclip."""

    def read(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ResourceAccessError(str(exc)) from exc

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ResourceAccessError(str(exc)) from exc


BACKENDS: dict[str, type] = {
    "wsl": WslClipboard,
    "native": NativeClipboard,
    "memory": MemoryResource,
}


def select_backend(name: str = "auto") -> ResourceAccess:
    """
    Instantiate the resource backend called name.

    "auto" picks the WSL bridge inside WSL and the native clipboard
    everywhere else.
    """
    name = name.lower()
    if name == "auto":
        name = "wsl" if is_wsl() else "native"
    try:
        backend = BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown backend: {name} (choose from auto, {', '.join(BACKENDS)})"
        ) from None
    logger.debug("using %s resource backend", name)
    return backend()
