from __future__ import annotations

import argparse
from pathlib import Path

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Write a numbered <n>.pdf corpus to benchmark pdf-concat with.")
    p.add_argument("--output", required=True, help="Folder to write the PDFs into")
    p.add_argument("--start", type=int, default=7_000_000, help="First index to write")
    p.add_argument("--count", type=int, default=100, help="Number of indices to cover")
    p.add_argument("--pages", type=int, default=3, help="Pages per document")
    p.add_argument(
        "--gap",
        type=int,
        default=0,
        help="Leave every Nth index missing so the skip path gets exercised (0 = no gaps)",
    )
    return p


def write_sample(path: Path, index: int, pages: int) -> None:
    width, height = letter
    c = canvas.Canvas(str(path), pagesize=letter)
    for n in range(1, pages + 1):
        c.setFont("Helvetica", 24)
        c.drawCentredString(width / 2, height / 2, f"Document {index}, page {n} of {pages}")
        c.showPage()
    c.save()


def main() -> int:
    args = build_parser().parse_args()
    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = 0
    for offset, index in enumerate(range(args.start, args.start + args.count), start=1):
        if args.gap and offset % args.gap == 0:
            continue
        write_sample(out_dir / f"{index}.pdf", index, max(1, args.pages))
        written += 1

    print(f"Wrote {written} PDFs into: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
