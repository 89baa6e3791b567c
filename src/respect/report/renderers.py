from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

from respect.core.diff import Diff


def diffs_to_payload(diffs: list[Diff]) -> dict[str, Any]:
    kind_counts = Counter(diff.kind for diff in diffs)
    return {
        "respects": not diffs,
        "diff_count": len(diffs),
        "kinds": dict(sorted(kind_counts.items())),
        "diffs": [diff.to_dict() for diff in diffs],
    }


def render_text(diffs: list[Diff]) -> str:
    return "Diff:\n" + "\n".join(str(diff) for diff in diffs)


def render_markdown(title: str, diffs: list[Diff]) -> str:
    lines: list[str] = []
    lines.append(f"## Respect Report: {title}")
    lines.append("")
    status = "Does not respect" if diffs else "Respects"
    lines.append(f"- Status: **{status}**")
    lines.append(f"- Diagnostics: **{len(diffs)}**")

    lines.append("")
    lines.append("### Diagnostics")
    lines.append("")
    if not diffs:
        lines.append("No diagnostics.")
    else:
        for diff in diffs:
            location = f" at `{diff.path}`" if diff.path else ""
            lines.append(f"- `{diff.kind}`{location}: {diff.message}")

    lines.append("")
    return "\n".join(lines)


def write_reports(title: str, diffs: list[Diff], json_path: Path, md_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    md_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.write_text(json.dumps(diffs_to_payload(diffs), indent=2, sort_keys=True, default=str), encoding="utf-8")
    md_path.write_text(render_markdown(title=title, diffs=diffs), encoding="utf-8")
