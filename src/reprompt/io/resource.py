"""The read/write capability the transaction works against."""

from typing import Protocol, runtime_checkable

from reprompt.core.errors import ResourceAccessError


@runtime_checkable
class ResourceAccess(Protocol):
    """
    A shared text store, such as the system clipboard.

    Implementations raise ResourceAccessError on failure. A successful
    write followed by read must return the written text, up to line-ending
    and trailing-whitespace normalization.
    """

    def read(self) -> str:
        ...

    def write(self, text: str) -> None:
        ...


class MemoryResource:
    """In-process text store."""

    def __init__(self, content: str = ""):
        self.content = content

    def read(self) -> str:
        return self.content

    def write(self, text: str) -> None:
        if not isinstance(text, str):
            raise ResourceAccessError(f"expected str, got {type(text).__name__}")
        self.content = text
