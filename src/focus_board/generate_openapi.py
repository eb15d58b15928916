"""
Utility script to generate and write the OpenAPI schema for the FastAPI app.

This script imports the FastAPI application instance and serializes its OpenAPI
schema to a JSON file so that API clients and documentation tools can consume
a stable contract without running the server.

Usage:
    python -m focus_board.generate_openapi [output_path]

Notes:
- The script ensures every tag declared in ``openapi_tags`` is present.
- The default output path is interfaces/openapi.json under the current directory.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional

from .main import app, openapi_tags

DEFAULT_OUTPUT = os.path.join("interfaces", "openapi.json")


def _add_missing_tags(schema: Dict[str, Any]) -> None:
    tags: List[Dict[str, Any]] = list(schema.get("tags") or [])
    known = {t["name"] for t in tags}
    tags.extend(t for t in openapi_tags if t["name"] not in known)
    schema["tags"] = tags


# PUBLIC_INTERFACE
def generate_openapi(out_path: Optional[str] = None) -> str:
    """Write the OpenAPI schema to ``out_path`` (creating directories) and return the path."""
    schema = app.openapi()
    _add_missing_tags(schema)

    path = os.path.abspath(out_path or DEFAULT_OUTPUT)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    return path


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = generate_openapi(args[0] if args else None)
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
