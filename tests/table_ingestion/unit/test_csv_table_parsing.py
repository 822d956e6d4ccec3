"""CSV decision table parsing tests."""

from __future__ import annotations

from pathlib import Path

from decision_table_testgen.table_ingestion import (
    UNDEFINED,
    Priority,
    TableFormat,
    parse_decision_table,
)
from decision_table_testgen.table_ingestion.csv_reader import read_csv_rows


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_parse_csv_table_with_auto_ids_and_derived_feature(tmp_path: Path) -> None:
    table_path = _write(
        tmp_path,
        "user-login-decision-table.csv",
        "username,password,Expected Result\n"
        "admin,secret,Login successful\n"
        "\n"
        "guest,,Login failed\n",
    )

    table = parse_decision_table(table_path)

    assert table.feature == "User Login"
    assert table.metadata.format is TableFormat.CSV
    assert table.metadata.row_count == 2
    assert [case.id for case in table.test_cases] == ["TC001", "TC002"]
    first, second = table.test_cases
    assert dict(first.conditions) == {"username": "admin", "password": "secret"}
    assert first.name == "username: admin, password: secret → Login successful"
    assert dict(second.conditions) == {"username": "guest"}
    assert second.priority is Priority.MEDIUM


def test_parse_csv_keeps_explicit_ids_and_typed_conditions(tmp_path: Path) -> None:
    table_path = _write(
        tmp_path,
        "payments.csv",
        'Test ID,amount,valid,coupon,Expected,Priority\n'
        'PAY-1,99.99,true,undefined,"Paid, Receipt",high\n',
    )

    table = parse_decision_table(table_path)

    (test_case,) = table.test_cases
    assert test_case.id == "PAY-1"
    assert test_case.conditions["amount"] == 99.99
    assert test_case.conditions["valid"] is True
    assert test_case.conditions["coupon"] is UNDEFINED
    assert test_case.expected_results == ("Paid", "Receipt")
    assert test_case.priority is Priority.HIGH


def test_header_only_csv_yields_no_test_cases(tmp_path: Path) -> None:
    table_path = _write(tmp_path, "empty.csv", "a,b,Expected Result\n")

    table = parse_decision_table(table_path)

    assert table.test_cases == ()
    assert table.metadata.row_count == 0


def test_read_csv_rows_pads_short_rows_and_strips_bom() -> None:
    rows = read_csv_rows("\ufeffa, b ,c\n1,2\n3,4,5,6\n")

    assert rows == [{"a": "1", "b": "2", "c": ""}, {"a": "3", "b": "4", "c": "5"}]


def test_explicit_format_overrides_extension(tmp_path: Path) -> None:
    table_path = _write(tmp_path, "rules.txt", "flag,Expected Result\nfalse,Hidden\n")

    table = parse_decision_table(table_path, "csv")

    assert table.test_cases[0].conditions == {"flag": False}
