"""Write the JSON schema of every registered tool for the chat framework.

Usage:
    python scripts/export_tool_schemas.py --output tool_schemas.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from benefitwise.skills.benefits_tools import TOOLS


def build_manifest(names: list[str] | None = None) -> list[dict[str, Any]]:
    """Collect tool schemas, optionally restricted to ``names``."""
    selected = names or list(TOOLS)
    missing = [n for n in selected if n not in TOOLS]
    if missing:
        raise SystemExit(f"Unknown tool(s): {', '.join(missing)}")
    return [TOOLS[n].schema() for n in selected]


def main() -> None:
    parser = argparse.ArgumentParser(description="Export benefit tool schemas")
    parser.add_argument("--output", type=Path, default=None, help="File to write (stdout if omitted)")
    parser.add_argument("--tool", action="append", dest="tools", help="Limit to this tool (repeatable)")
    args = parser.parse_args()

    manifest = build_manifest(args.tools)
    text = json.dumps(manifest, indent=2)
    if args.output is None:
        print(text)
        return
    args.output.write_text(text + "\n", encoding="utf-8")
    print(f"  Wrote {len(manifest)} tool schema(s) to {args.output}")


if __name__ == "__main__":
    main()
