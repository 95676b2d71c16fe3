"""Markdown-table and JSON rendering of switch records."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Iterable

OUTPUT_FORMATS = ("md", "json")


def _as_dict(record: Any) -> dict[str, Any]:
    if is_dataclass(record):
        return asdict(record)
    return dict(record)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def markdown_table(records: Iterable[Any]) -> str:
    """Render *records* as a markdown table, columns padded to the widest cell."""
    rows = [_as_dict(r) for r in records]
    if not rows:
        return ""
    headers = list(rows[0].keys())
    cells = [[_cell(row.get(h, "")) for h in headers] for row in rows]
    widths = [max(len(h), *(len(c[i]) for c in cells)) for i, h in enumerate(headers)]

    def line(values: list[str]) -> str:
        return "| " + " | ".join(v.ljust(w) for v, w in zip(values, widths)) + " |"

    out = [line(headers), "|" + "|".join("-" * (w + 2) for w in widths) + "|"]
    out.extend(line(c) for c in cells)
    return "\n".join(out)


def json_document(title: str, records: Iterable[Any]) -> str:
    return json.dumps({title: [_as_dict(r) for r in records]}, indent=2)


def render(title: str, records: Iterable[Any], fmt: str = "md") -> str:
    if fmt == "json":
        return json_document(title, records)
    return markdown_table(records)
