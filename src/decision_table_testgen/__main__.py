"""Module entry point for `python -m decision_table_testgen`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
