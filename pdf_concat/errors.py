from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    ENGINE_INIT = "engine-init"
    LOAD = "load"
    WATERMARK = "watermark"
    APPEND = "append"
    SAVE = "save"
    STAT = "stat"


class MergeError(Exception):
    """A failure in one of the merge steps.

    `kind` says which step failed; the engine's own description is kept in
    `message` (and the original exception is chained as `__cause__`).
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message
