"""Pytest fixtures specific to unit tests.

Unit tests should be fast and isolated. The in-memory document here lets
the batch processor run without opening real files.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

import pytest

from pagefit.exceptions import FileLoadError
from pagefit.types import ContentStream, FixedPage


class InMemoryDocument:
    """PageDocument backed by a list of page extents.

    Each page starts with ``streams`` ContentStream children whose refs are
    ``"<page>-<n>"``. Written pages are kept in ``written``.
    """

    def __init__(self, path: Path, extents: list[tuple[float, float]], streams: int = 2):
        self.path = path
        self.extents = extents
        self.streams = streams
        self.written: dict[int, FixedPage] = {}
        self.saved_to: Path | None = None

    @property
    def page_count(self) -> int:
        return len(self.extents)

    def read_page(self, index: int) -> FixedPage:
        width, height = self.extents[index]
        page = FixedPage(width, height, number=index + 1)
        for n in range(self.streams):
            page.append_child(ContentStream(f"{index + 1}-{n}"))
        return page

    def write_page(self, index: int, page: FixedPage) -> None:
        self.written[index] = page

    def save(self, output_path: Path) -> None:
        output_path.write_bytes(b"%PDF-fake\n")
        self.saved_to = output_path


@pytest.fixture
def in_memory_opener() -> Callable[[dict[str, list[tuple[float, float]]]], Callable]:
    """Build an opener serving InMemoryDocuments by file name.

    Files not in the mapping raise FileLoadError, like an unreadable document.
    Opened documents are collected on ``opener.opened``.
    """

    def _factory(extents_by_name: dict[str, list[tuple[float, float]]]) -> Callable:
        opened: list[InMemoryDocument] = []

        @contextmanager
        def opener(path: Path) -> Iterator[InMemoryDocument]:
            if path.name not in extents_by_name:
                raise FileLoadError(f"Failed to open {path}")
            document = InMemoryDocument(path, extents_by_name[path.name])
            opened.append(document)
            yield document

        opener.opened = opened  # type: ignore[attr-defined]
        return opener

    return _factory
