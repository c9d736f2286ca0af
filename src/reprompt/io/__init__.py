"""Access to the external text resource."""

from reprompt.io.clipboard import NativeClipboard, WslClipboard, select_backend
from reprompt.io.resource import MemoryResource, ResourceAccess

__all__ = ["MemoryResource", "NativeClipboard", "ResourceAccess", "WslClipboard", "select_backend"]
