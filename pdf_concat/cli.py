from __future__ import annotations

import argparse
import sys

from .errors import MergeError
from .merge import run_merge
from .model import MergeConfig
from .report import print_summary

VERSION = "1.0.0"


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    defaults = MergeConfig()
    p = argparse.ArgumentParser(
        prog="pdf-concat",
        description="Concats several PDF documents into one.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    p.add_argument(
        "-s",
        "--start",
        type=_non_negative_int,
        default=defaults.start,
        help="The number of the document to start with",
    )
    p.add_argument(
        "-c",
        "--count",
        type=_non_negative_int,
        default=defaults.count,
        help="The number of documents to process",
    )
    p.add_argument(
        "-w",
        "--watermark",
        action="store_true",
        help="Stamp a centered 'Page N' label at the top of every imported page",
    )
    p.add_argument(
        "-d",
        "--source-directory",
        default=defaults.source_directory,
        help="The directory where the <n>.pdf files to process are stored",
    )
    p.add_argument("-t", "--target", default=defaults.target, help="The path to the merged PDF file")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = MergeConfig.from_namespace(args)

    try:
        result = run_merge(config)
    except MergeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Stopped by user.", file=sys.stderr)
        return 130

    print_summary(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
