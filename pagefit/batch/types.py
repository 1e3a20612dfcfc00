"""Data types for batch conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class FileResult:
    """Outcome of converting a single document.

    Attributes:
        input_path: Source document
        output_path: Written document (None until saved)
        page_count: Number of pages in the document
        pages_done: Number of pages refitted before finishing or failing
        status: "pending", "completed" or "failed"
        error: Error message if status == "failed"
        error_kind: Exception class name if status == "failed"
    """

    input_path: Path
    output_path: Path | None = None
    page_count: int = 0
    pages_done: int = 0
    status: str = "pending"
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "completed"

    def mark_completed(self, output_path: Path) -> None:
        """Mark file as successfully written."""
        self.status = "completed"
        self.output_path = output_path
        self.error = None
        self.error_kind = None

    def mark_failed(self, exc: BaseException) -> None:
        """Mark file as failed, recording the error kind and message."""
        self.status = "failed"
        self.error = str(exc)
        self.error_kind = type(exc).__name__

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "input_path": str(self.input_path),
            "page_count": self.page_count,
            "pages_done": self.pages_done,
            "status": self.status,
        }
        if self.output_path is not None:
            result["output_path"] = str(self.output_path)
        if self.error is not None:
            result["error"] = self.error
            result["error_kind"] = self.error_kind
        return result


@dataclass
class BatchSummary:
    """Summary of a batch run over one input folder.

    Attributes:
        input_dir: Folder that was scanned
        output_dir: Folder receiving converted documents
        page_size: Name of the requested page size
        files: Per-file results in processing order
    """

    input_dir: Path
    output_dir: Path
    page_size: str
    files: list[FileResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(1 for f in self.files if f.ok)

    @property
    def failed(self) -> int:
        return sum(1 for f in self.files if f.status == "failed")

    @property
    def total_pages(self) -> int:
        return sum(f.pages_done for f in self.files)

    @property
    def succeeded(self) -> bool:
        """True if no file failed (an empty batch succeeds)."""
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "input_dir": str(self.input_dir),
            "output_dir": str(self.output_dir),
            "page_size": self.page_size,
            "processed": self.processed,
            "failed": self.failed,
            "total_pages": self.total_pages,
            "files": [f.to_dict() for f in self.files],
        }
