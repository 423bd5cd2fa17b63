from __future__ import annotations

import io
import time
from pathlib import Path

from pypdf import PageObject, PasswordType, PdfReader, PdfWriter
from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .errors import ErrorKind, MergeError
from .report import format_elapsed

WATERMARK_FONT = "Helvetica"
WATERMARK_FONT_SIZE = 14
WATERMARK_COLOR = colors.lime


def create_document() -> PdfWriter:
    try:
        return PdfWriter()
    except Exception as e:
        raise MergeError(ErrorKind.ENGINE_INIT, str(e)) from e


def load_document(path: Path) -> PdfReader:
    """Open a source PDF and make sure its page tree is readable.

    Any failure is reported as a LOAD error carrying the engine's reason.
    Encrypted files get one try with an empty password.
    """

    try:
        reader = PdfReader(str(path))
        locked = reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED
        if not locked:
            # Walk the page tree now so a broken one fails here, not at append time.
            len(reader.pages)
    except Exception as e:
        raise MergeError(ErrorKind.LOAD, str(e) or type(e).__name__) from e

    if locked:
        raise MergeError(ErrorKind.LOAD, "document is encrypted")
    return reader


def measure_label(
    text: str,
    *,
    font_name: str = WATERMARK_FONT,
    font_size: float = WATERMARK_FONT_SIZE,
) -> tuple[float, float]:
    width = pdfmetrics.stringWidth(text, font_name, font_size)
    ascent, descent = pdfmetrics.getAscentDescent(font_name, font_size)
    return width, ascent - descent


def label_origin(width: float, height: float, label_width: float, label_height: float) -> tuple[float, float]:
    # Horizontally centered, pinned to the top edge.
    return (width - label_width) / 2, height - label_height


def display_size(page: PageObject) -> tuple[float, float]:
    """Width and height of the visible (cropped) page as a viewer shows it."""

    box = page.cropbox
    width, height = float(box.width), float(box.height)
    if page.rotation % 180 == 90:
        return height, width
    return width, height


def label_position(page: PageObject, label: str) -> tuple[float, float]:
    # Origin in the displayed frame: lower-left of the visible page, after /Rotate.
    return label_origin(*display_size(page), *measure_label(label))


def label_placement(page: PageObject, label: str) -> tuple[float, float, int]:
    """Label origin and text angle in the page's own (unrotated) user space."""

    u, v = label_position(page, label)
    box = page.cropbox
    width, height = float(box.width), float(box.height)
    rotation = page.rotation % 360
    if rotation == 90:
        x, y = width - v, u
    elif rotation == 180:
        x, y = width - u, height - v
    elif rotation == 270:
        x, y = v, height - u
    else:
        x, y = u, v
    return float(box.left) + x, float(box.bottom) + y, rotation


def _label_overlay(text: str, x: float, y: float, angle: int, page_size: tuple[float, float]) -> PageObject:
    packet = io.BytesIO()
    c = canvas.Canvas(packet, pagesize=page_size)
    c.translate(x, y)
    c.rotate(angle)
    c.setFont(WATERMARK_FONT, WATERMARK_FONT_SIZE)
    c.setFillColor(WATERMARK_COLOR)
    c.drawString(0, 0, text)
    c.save()
    packet.seek(0)
    return PdfReader(packet).pages[0]


def watermark_document(reader: PdfReader) -> PdfWriter:
    """Stamp "Page N" on top of every page, N counting from 1 within this document.

    The pages are stamped on a writer-owned copy, which is returned.
    """

    started = time.perf_counter()
    try:
        stamped = PdfWriter(clone_from=reader)
        for index, page in enumerate(stamped.pages):
            label = f"Page {index + 1}"
            x, y, angle = label_placement(page, label)
            box = page.mediabox
            page.merge_page(_label_overlay(label, x, y, angle, (float(box.right), float(box.top))))
    except Exception as e:
        raise MergeError(ErrorKind.WATERMARK, str(e)) from e

    print(f"Watermarking {len(stamped.pages)} pages took: {format_elapsed(time.perf_counter() - started)}")
    return stamped


def append_document(document: PdfWriter, source: PdfReader | PdfWriter) -> int:
    try:
        for page in source.pages:
            document.add_page(page)
    except Exception as e:
        raise MergeError(ErrorKind.APPEND, str(e)) from e
    return len(source.pages)


def save_document(document: PdfWriter, target: Path) -> None:
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("wb") as f:
            document.write(f)
    except Exception as e:
        raise MergeError(ErrorKind.SAVE, f"{target}: {e}") from e


def file_size(target: Path) -> int:
    """Space the file takes on disk: allocated 512-byte blocks where the platform reports them."""

    try:
        st = target.stat()
    except OSError as e:
        raise MergeError(ErrorKind.STAT, f"{target}: {e}") from e

    blocks = getattr(st, "st_blocks", None)
    if blocks is None:
        return st.st_size
    return blocks * 512
