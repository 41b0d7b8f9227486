#!/usr/bin/env python3
"""
Fail if the request/resolution core imports the MCP boundary.
Checks client.py, models.py, resolve.py and everything under api/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PKG_DIR = REPO_ROOT / "src" / "arcane_mcp"

FORBIDDEN_PREFIXES = (
    "mcp",
    "fastmcp",
    "arcane_mcp.core",
    "arcane_mcp.tools",
    "arcane_mcp.server",
)


def core_files() -> list[Path]:
    files = [PKG_DIR / name for name in ("client.py", "models.py", "resolve.py")]
    files.extend(sorted((PKG_DIR / "api").rglob("*.py")))
    return files


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if node.level == 0 and mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in core_files():
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
