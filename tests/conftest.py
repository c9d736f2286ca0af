"""Shared fixtures: in-memory resources with scriptable failures."""

from typing import Iterable

import pytest

from reprompt.core.errors import ResourceAccessError
from reprompt.io.resource import MemoryResource


class FlakyResource(MemoryResource):
    """
    MemoryResource that can fail reads, fail selected writes, or lie once
    on the first read after a write.

    fail_writes holds 1-based write numbers that raise.
    """

    def __init__(
        self,
        content: str = "",
        *,
        fail_read: bool = False,
        fail_writes: Iterable[int] = (),
        fail_readback: bool = False,
        corrupt_readback: str | None = None,
    ):
        super().__init__(content)
        self.fail_read = fail_read
        self.fail_writes = set(fail_writes)
        self.fail_readback = fail_readback
        self.corrupt_readback = corrupt_readback
        self.writes: list[str] = []
        self.reads = 0

    def read(self) -> str:
        self.reads += 1
        if self.fail_read:
            raise ResourceAccessError("read denied")
        if self.writes and self.fail_readback:
            raise ResourceAccessError("readback denied")
        if self.writes and self.corrupt_readback is not None:
            text, self.corrupt_readback = self.corrupt_readback, None
            return text
        return self.content

    def write(self, text: str) -> None:
        self.writes.append(text)
        if len(self.writes) in self.fail_writes:
            raise ResourceAccessError(f"write #{len(self.writes)} denied")
        self.content = text


BOXED = "╭────────╮\n│ line 1 │\n│ line 2 │\n╰────────╯\nnormal line"


@pytest.fixture
def boxed_text() -> str:
    """A small agent box followed by an unframed line."""
    return BOXED


@pytest.fixture
def memory_resource() -> MemoryResource:
    return MemoryResource(BOXED)


@pytest.fixture
def flaky_resource():
    """Factory for FlakyResource instances."""
    def make(content: str = BOXED, **kwargs) -> FlakyResource:
        return FlakyResource(content, **kwargs)
    return make
