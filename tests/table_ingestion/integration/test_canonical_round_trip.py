"""Canonical document re-parsing tests."""

from __future__ import annotations

import json
from pathlib import Path

from decision_table_testgen.table_ingestion import decision_table_to_dict, parse_decision_table


def test_canonical_output_reparses_to_the_same_test_cases(tmp_path: Path) -> None:
    csv_path = tmp_path / "checkout.csv"
    csv_path.write_text(
        "ID,amount,member,Actions,Expected Result,Priority,Tags\n"
        "TC001,10,true,Add item,Discount applied,high,cart\n"
        "TC002,0.5,false,,No discount,,\n",
        encoding="utf-8",
    )
    table = parse_decision_table(csv_path)
    json_path = tmp_path / "checkout.json"
    json_path.write_text(json.dumps(decision_table_to_dict(table)), encoding="utf-8")

    reparsed = parse_decision_table(json_path)

    assert reparsed.feature == table.feature
    assert reparsed.test_cases == table.test_cases


def test_undefined_conditions_are_omitted_from_canonical_output(tmp_path: Path) -> None:
    csv_path = tmp_path / "flags.csv"
    csv_path.write_text("flag,other,Expected\nundefined,null,Shown\n", encoding="utf-8")

    document = decision_table_to_dict(parse_decision_table(csv_path))

    assert document["test_cases"][0]["conditions"] == {"other": None}
    assert document["metadata"] == {"source": str(csv_path), "format": "csv", "row_count": 1}
    assert "description" not in document["test_cases"][0]


def test_repeated_parsing_yields_identical_tables(tmp_path: Path) -> None:
    table_path = tmp_path / "cart.md"
    table_path.write_text(
        "# Cart\n\n| qty | Expected |\n|---|---|\n| 1 | Added |\n| 0 | Rejected |\n",
        encoding="utf-8",
    )

    assert parse_decision_table(table_path) == parse_decision_table(table_path)
