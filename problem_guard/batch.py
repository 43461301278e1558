"""
Batch checking of decoded merged problem records.

Runs the shape guard over every element of a decoded JSON listing and
collects per-record verdicts plus a summary. What to do with rejected
records is left to the caller; this module only reports them.

Usage (example from CLI):
    from problem_guard.batch import check_records, load_records

    result = check_records(load_records("merged-problems.json"))
    print(result.summary())
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List, Optional

from problem_guard.utils.logging import get_logger
from problem_guard.utils.probe import get_property
from problem_guard.validation.guard import ShapeViolation, find_violation

log = get_logger(__name__)


@dataclass(frozen=True)
class RecordVerdict:
    """Outcome of the shape guard for one element of a listing."""

    index: int
    accepted: bool
    problem_id: Optional[str] = None
    violation: Optional[ShapeViolation] = None

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "accepted": self.accepted,
            "problem_id": self.problem_id,
            "field": self.violation.field if self.violation else None,
            "reason": self.violation.reason if self.violation else None,
        }


@dataclass
class BatchResult:
    verdicts: List[RecordVerdict] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.verdicts)

    @property
    def accepted(self) -> int:
        return sum(1 for v in self.verdicts if v.accepted)

    @property
    def rejected(self) -> int:
        return self.total - self.accepted

    @property
    def rejections(self) -> List[RecordVerdict]:
        return [v for v in self.verdicts if not v.accepted]

    def summary(self) -> dict:
        return {"total": self.total, "accepted": self.accepted, "rejected": self.rejected}


def _readable_id(value: Any) -> Optional[str]:
    problem_id = get_property(value, "id")
    return problem_id if isinstance(problem_id, str) else None


def check_records(records: Iterable[Any]) -> BatchResult:
    """
    Run the shape guard over each record.

    Parameters
    ----------
    records : iterable
        Decoded values, typically the elements of a JSON array.

    Returns
    -------
    BatchResult
        One verdict per input, in input order.
    """
    result = BatchResult()
    for index, value in enumerate(records):
        violation = find_violation(value)
        verdict = RecordVerdict(
            index=index,
            accepted=violation is None,
            problem_id=_readable_id(value),
            violation=violation,
        )
        if violation is not None:
            log.debug(
                f"[REJECTED] record #{index}: {violation}",
                extra={"index": index, "problem_id": verdict.problem_id, "field": violation.field},
            )
        result.verdicts.append(verdict)

    log.info(
        f"[CHECK COMPLETE] {result.accepted}/{result.total} records accepted",
        extra=result.summary(),
    )
    return result


def load_records(path: Path | str) -> List[Any]:
    """
    Decode a JSON file holding a list of records.

    A single top-level object is treated as a one-record listing.

    Raises
    ------
    OSError
        If the file cannot be read.
    json.JSONDecodeError
        If the file is not valid JSON.
    """
    with Path(path).open("r", encoding="utf-8") as f:
        decoded = json.load(f)
    if isinstance(decoded, list):
        return decoded
    return [decoded]


def persist_result(result: BatchResult, path: Path | str, source: Optional[str] = None) -> Path:
    """Write the summary and rejected verdicts of a batch run as JSON."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source": source,
        **result.summary(),
        "rejections": [v.to_dict() for v in result.rejections],
    }
    with output.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"output": str(output)})
    return output


__all__ = [
    "BatchResult",
    "RecordVerdict",
    "check_records",
    "load_records",
    "persist_result",
]
