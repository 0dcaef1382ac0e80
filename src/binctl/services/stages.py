"""Stage counters for one encode or decode run.

Every pipeline step records what it produced (a count and its unit, such
as ``chars``, ``bytes`` or ``digits``) and how long it took. ``binctl -v``
asks the service to attach the list to ``ServiceResult.meta["stages"]``.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any

import structlog

_log = structlog.get_logger("binctl.stages")


@dataclass
class Stage:
    name: str
    unit: str
    count: int = 0
    elapsed_ms: float = 0.0
    ok: bool = True


class StageLog:
    """Ordered stages of a single codec call."""

    def __init__(self, op: str) -> None:
        self.op = op
        self.stages: list[Stage] = []

    @contextmanager
    def stage(self, name: str, unit: str) -> Iterator[Stage]:
        """Time the body and record it; the body fills in ``count``.

        A stage whose body raises is recorded with ``ok=False`` and the
        exception continues upward.
        """
        record = Stage(name=name, unit=unit)
        started = time.perf_counter()
        try:
            yield record
        except Exception:
            record.ok = False
            raise
        finally:
            record.elapsed_ms = round((time.perf_counter() - started) * 1000, 3)
            self.stages.append(record)
            _log.debug("codec_stage", op=self.op, **asdict(record))

    @property
    def failed_stage(self) -> str | None:
        return next((s.name for s in self.stages if not s.ok), None)

    def to_meta(self) -> dict[str, Any]:
        return {"stages": [asdict(s) for s in self.stages]}
