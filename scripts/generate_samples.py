"""
Sample data generator for problem_guard.

Produces deterministic pseudo-random merged problem records shaped like the
upstream ``merged-problems.json`` listing, with a configurable share of
deliberately malformed records, and writes them as a JSON array.
"""

from __future__ import annotations

import json
import random
import sys
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, List

import typer

from problem_guard.config import get_settings
from problem_guard.domain.schema import MERGED_PROBLEM_SCHEMA, Kind, Presence

app = typer.Typer(help="Generate synthetic merged problem records as JSON.")

CONTEST_PREFIXES = ["abc", "arc", "agc"]
USERS = ["tourist", "kenkoooo", "chokudai", "snuke", "rng_58", "maspy"]
TITLES = ["Sum", "Product", "Shortest Path", "Coloring", "Digit DP", "Xor Query"]

# Nullable fields only; dropping one of these keys must be rejected.
_NULLABLE_FIELDS = [rule.name for rule in MERGED_PROBLEM_SCHEMA if rule.presence is Presence.NULLABLE]
_STRING_FIELDS = [rule.name for rule in MERGED_PROBLEM_SCHEMA if rule.kind is Kind.STRING]
_NUMBER_FIELDS = [rule.name for rule in MERGED_PROBLEM_SCHEMA if rule.kind is Kind.NUMBER]


def _make_record(rng: random.Random, index: int) -> Dict[str, Any]:
    contest_id = f"{rng.choice(CONTEST_PREFIXES)}{index // 6 + 1:03d}"
    problem_id = f"{contest_id}_{'abcdef'[index % 6]}"
    solved = rng.random() > 0.15

    record: Dict[str, Any] = {
        "id": problem_id,
        "contest_id": contest_id,
        "title": f"{'ABCDEF'[index % 6]}. {rng.choice(TITLES)}",
    }
    for prefix in ("first", "fastest", "shortest"):
        record[f"{prefix}_user_id"] = rng.choice(USERS) if solved else None
        record[f"{prefix}_contest_id"] = contest_id if solved else None
        record[f"{prefix}_submission_id"] = rng.randint(1_000_000, 9_999_999) if solved else None
    record["execution_time"] = rng.randint(1, 2_000) if solved else None
    record["source_code_length"] = rng.randint(20, 5_000) if solved else None
    record["solver_count"] = rng.randint(1, 10_000) if solved else 0

    # point is optional: sometimes absent, sometimes null, usually a number
    roll = rng.random()
    if roll < 0.7:
        record["point"] = float(rng.choice([100, 200, 300, 400, 500, 600]))
    elif roll < 0.85:
        record["point"] = None
    return record


def _corrupt(rng: random.Random, record: Dict[str, Any]) -> Dict[str, Any]:
    corrupted = dict(record)
    mode = rng.choice(["drop_nullable", "wrong_string", "wrong_number", "string_point"])
    if mode == "drop_nullable":
        del corrupted[rng.choice(_NULLABLE_FIELDS)]
    elif mode == "wrong_string":
        corrupted[rng.choice(_STRING_FIELDS)] = rng.randint(0, 100)
    elif mode == "wrong_number":
        corrupted[rng.choice(_NUMBER_FIELDS)] = str(rng.randint(0, 100))
    else:
        corrupted["point"] = str(rng.choice([100, 200, 300]))
    return corrupted


def _generate_records(count: int, corruption_rate: float, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    records = []
    for i in range(count):
        record = _make_record(rng, i)
        if rng.random() < corruption_rate:
            record = _corrupt(rng, record)
        records.append(record)
    return records


def _write_records_json(json_path: Path, records: List[Dict[str, Any]]) -> None:
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False)


@app.command()
def main(
    count: int | None = typer.Option(
        None,
        "--count",
        "-c",
        help="Number of records to generate (default from settings).",
    ),
    corruption_rate: float | None = typer.Option(
        None,
        "--corruption-rate",
        help="Share of records made malformed, 0.0-1.0 (default from settings).",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional JSON output path (if omitted, a temp file will be used).",
    ),
) -> None:
    """
    Generate synthetic merged problem records and write them as a JSON array.
    """
    settings = get_settings()
    count = count if count is not None else settings.sample_records
    rate = corruption_rate if corruption_rate is not None else settings.sample_corruption_rate

    start = time.perf_counter()
    if output:
        json_path = output
        json_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="merged_problems_"))
        json_path = tmpdir / "merged-problems.json"

    typer.echo(f"Generating {count:,} records -> {json_path} (corruption={rate:.0%}, seed={seed})")
    _write_records_json(json_path, _generate_records(count, rate, seed))
    duration = time.perf_counter() - start
    typer.echo(f"Generation completed in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
