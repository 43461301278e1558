from __future__ import annotations

import json
import logging

import pytest

from problem_guard.batch import check_records, load_records, persist_result
from problem_guard.reporter import build_rejection_table, print_report

EXPECTED_TOTAL = 4
EXPECTED_ACCEPTED = 2
EXPECTED_REJECTED = 2


@pytest.fixture
def mixed_records(unsolved_problem, solved_problem):
    missing_key = dict(unsolved_problem)
    del missing_key["first_user_id"]
    return [solved_problem, missing_key, unsolved_problem, "not a record"]


def test_check_records_counts(mixed_records):
    result = check_records(mixed_records)

    assert result.total == EXPECTED_TOTAL
    assert result.accepted == EXPECTED_ACCEPTED
    assert result.rejected == EXPECTED_REJECTED
    assert result.summary() == {
        "total": EXPECTED_TOTAL,
        "accepted": EXPECTED_ACCEPTED,
        "rejected": EXPECTED_REJECTED,
    }


def test_check_records_verdicts_keep_input_order(mixed_records):
    result = check_records(mixed_records)

    assert [v.index for v in result.verdicts] == [0, 1, 2, 3]
    assert [v.accepted for v in result.verdicts] == [True, False, True, False]
    rejected = result.rejections
    assert rejected[0].problem_id == "abc_1"
    assert rejected[0].violation.field == "first_user_id"
    assert rejected[1].problem_id is None


def test_check_records_empty_input():
    result = check_records([])
    assert result.summary() == {"total": 0, "accepted": 0, "rejected": 0}


def test_check_records_logs_summary(mixed_records, caplog):
    with caplog.at_level(logging.DEBUG, logger="problem_guard.batch"):
        check_records(mixed_records)

    messages = [r.getMessage() for r in caplog.records]
    assert any("[REJECTED] record #1" in m for m in messages)
    assert any("2/4 records accepted" in m for m in messages)


def test_load_records_list_and_single_object(write_json, solved_problem):
    assert load_records(write_json([solved_problem, solved_problem])) == [solved_problem] * 2
    assert load_records(write_json(solved_problem, "single.json")) == [solved_problem]


def test_load_records_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_records(path)


def test_persist_result_writes_rejections(mixed_records, tmp_path):
    output = persist_result(check_records(mixed_records), tmp_path / "out" / "summary.json", source="x.json")

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["source"] == "x.json"
    assert payload["rejected"] == EXPECTED_REJECTED
    assert [r["index"] for r in payload["rejections"]] == [1, 3]
    assert payload["rejections"][0]["field"] == "first_user_id"
    assert payload["rejections"][0]["reason"] == "missing"


def test_rejection_table_truncates(mixed_records):
    table = build_rejection_table(check_records(mixed_records), max_rejections=1)
    assert table.row_count == 1
    assert "1 more" in str(table.caption)


def test_print_report_mentions_counts(mixed_records):
    from rich.console import Console

    console = Console(record=True, width=120)
    print_report(check_records(mixed_records), console=console)
    text = console.export_text()
    assert "Accepted 2 / 4 records" in text
    assert "first_user_id" in text


def test_rejection_reason_is_not_parsed_as_markup(unsolved_problem):
    from rich.console import Console

    class Bracketed:
        pass

    Bracketed.__name__ = "[bold]Bracketed[/bold]"
    record = {**unsolved_problem, "point": Bracketed()}

    console = Console(record=True, width=200)
    print_report(check_records([record]), console=console)
    assert "got [bold]Bracketed[/bold]" in console.export_text()
