"""Terminal renderer for the demo user table.

Drives the same ``TableModel`` as the Qt view and prints the rows as an
aligned text table (or JSON). Repeating ``--sort`` for the same column walks
the toggle cycle: once ascending, twice descending, three times unsorted.

Example:
  python cli/render_table.py --sort status
  python cli/render_table.py --sort age --desc --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from config import settings
from table_engine import ColumnDef, ConfigurationError, SortEntry, TableModel, use_host_collation
from gui.demo_data import default_users, format_cell, user_columns, user_row_id


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render the demo user table in the terminal")
    p.add_argument(
        "--sort",
        action="append",
        default=[],
        metavar="COLUMN",
        help="Toggle sorting on COLUMN (repeatable; repeated toggles walk asc -> desc -> off)",
    )
    p.add_argument(
        "--desc",
        action="store_true",
        help="Sort the single --sort column descending instead of toggling",
    )
    p.add_argument("--json", action="store_true", help="Emit JSON instead of a text table")
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    args = p.parse_args(argv)
    if args.desc and len(args.sort) != 1:
        p.error("--desc requires exactly one --sort column")
    return args


def build_table(sort: List[str], descending: bool = False) -> TableModel:
    model = TableModel(default_users(), user_columns(), get_row_id=user_row_id)
    if descending:
        model.set_sort_state([SortEntry(sort[0], True)])
        return model
    for column_id in sort:
        model.toggle_sorting(column_id)
    return model


def render_text(model: TableModel) -> str:
    headers = [h.text for h in model.headers()]
    columns: List[ColumnDef] = model.columns
    body = [[format_cell(col, row.get_value(col.id)) for col in columns] for row in model.rows()]
    widths = [max([len(h)] + [len(r[i]) for r in body]) for i, h in enumerate(headers)]

    def fmt(cells: List[str]) -> str:
        out = []
        for col, cell, width in zip(columns, cells, widths):
            out.append(cell.rjust(width) if col.meta.get("is_numeric") else cell.ljust(width))
        return " | ".join(out).rstrip()

    lines = [fmt(headers), "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(r) for r in body)
    return "\n".join(lines)


def render_json(model: TableModel) -> Dict[str, Any]:
    columns = model.columns
    return {
        "sorting": [{"id": e.column_id, "desc": e.descending} for e in model.sort_state],
        "rows": [
            {
                "id": row.id,
                "cells": {
                    str(col.id): format_cell(col, row.get_value(col.id))
                    for col in columns
                },
            }
            for row in model.rows()
        ],
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    use_host_collation()
    try:
        model = build_table(args.sort, args.desc)
    except ConfigurationError as exc:
        print(f"Invalid sort: {exc}", file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(render_json(model), ensure_ascii=False, indent=2))
    else:
        print(render_text(model))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
