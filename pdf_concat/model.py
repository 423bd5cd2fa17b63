from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class MergeConfig:
    start: int = 7_000_000
    count: int = 100
    watermark: bool = False
    source_directory: str = "."
    target: str = "merged.pdf"

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "MergeConfig":
        return cls(
            start=int(args.start),
            count=int(args.count),
            watermark=bool(args.watermark),
            source_directory=str(args.source_directory),
            target=str(args.target),
        )

    def indices(self) -> range:
        return range(self.start, self.start + self.count)

    def source_path(self, index: int) -> Path:
        return Path(self.source_directory) / f"{index}.pdf"


@dataclass
class MergeResult:
    config: MergeConfig
    imported: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    page_count: int = 0
    elapsed_s: float = 0.0
    peak_memory: int = 0
    target_size: int = 0
