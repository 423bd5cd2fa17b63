from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from pypdf import PdfReader
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pdf_concat.memory import MemoryTracker


def _write_pdf(path: Path, pages: int, *, tag: str, pagesize: tuple[float, float] = letter) -> Path:
    c = canvas.Canvas(str(path), pagesize=pagesize)
    for n in range(1, pages + 1):
        c.setFont("Helvetica", 12)
        c.drawString(72, 72, f"{tag}-p{n}")
        c.showPage()
    c.save()
    return path


def _page_texts(path: Path) -> list[str]:
    return [page.extract_text() or "" for page in PdfReader(str(path)).pages]


@pytest.fixture
def write_pdf() -> Callable[..., Path]:
    return _write_pdf


@pytest.fixture
def page_texts() -> Callable[[Path], list[str]]:
    return _page_texts


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    d = tmp_path / "in"
    d.mkdir()
    return d


@pytest.fixture
def make_pdf(source_dir: Path) -> Callable[..., Path]:
    def _make(index: int, pages: int, **kwargs) -> Path:
        return _write_pdf(source_dir / f"{index}.pdf", pages, tag=f"doc{index}", **kwargs)

    return _make


@pytest.fixture
def tracker() -> Iterator[MemoryTracker]:
    yield MemoryTracker(sampler=lambda: 1024)
