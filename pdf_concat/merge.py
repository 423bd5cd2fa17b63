from __future__ import annotations

import time
from pathlib import Path

from .errors import MergeError
from .memory import MemoryTracker
from .model import MergeConfig, MergeResult
from .pdf import append_document, create_document, file_size, load_document, save_document, watermark_document


def run_merge(config: MergeConfig, *, tracker: MemoryTracker | None = None) -> MergeResult:
    """Concatenate `<source_directory>/<i>.pdf` for every i in the configured range.

    Missing files are skipped and unreadable ones are reported and left out.
    Everything else that goes wrong raises MergeError and ends the run.
    """

    started = time.perf_counter()
    tracker = tracker or MemoryTracker()
    result = MergeResult(config=config)

    document = create_document()

    print(f"Merging {config.count} documents")
    tracker.sample()

    for index in config.indices():
        path = config.source_path(index)
        if not path.exists():
            print(f"Skipping {path} as it does not exist.")
            result.skipped.append(str(path))
            continue

        print(f"Adding {path}")
        try:
            source = load_document(path)
        except MergeError as e:
            print(f"Error while importing {path}: {e.message}")
            result.failed.append((str(path), e.message))
            continue
        print(f"Imported document {path}")

        if config.watermark:
            source = watermark_document(source)

        result.page_count += append_document(document, source)
        result.imported.append(str(path))
        tracker.sample()

    target = Path(config.target)
    print(f"Creating {target}")
    tracker.sample()
    save_document(document, target)
    tracker.sample()

    result.elapsed_s = time.perf_counter() - started
    result.peak_memory = tracker.peak
    result.target_size = file_size(target)
    return result
