#!/usr/bin/env python3
"""
Fail if wordpress_mcp.core imports server/transport modules.
Checks every Python file under src/wordpress_mcp/core/, resolving relative
imports against the file's package.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Iterator

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = REPO_ROOT / "src"
CORE_DIR = SRC_DIR / "wordpress_mcp" / "core"

FORBIDDEN_PREFIXES = (
    "starlette",
    "uvicorn",
    "mcp.server",
    "fastmcp",
    "wordpress_mcp.server",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _package_of(path: Path) -> list[str]:
    # both pkg/__init__.py and pkg/mod.py resolve relative imports against pkg
    return list(path.relative_to(SRC_DIR).parts[:-1])


def imported_modules(path: Path) -> Iterator[str]:
    tree = ast.parse(path.read_text())
    package = _package_of(path)
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = package[: len(package) - node.level + 1]
                mod = ".".join(base + ([node.module] if node.module else []))
                yield mod
                if not node.module:
                    for alias in node.names:
                        yield f"{mod}.{alias.name}"
            elif node.module:
                yield node.module


def scan_file(path: Path) -> list[str]:
    return [
        f"{path}: forbidden import '{mod}'"
        for mod in imported_modules(path)
        if is_forbidden(mod)
    ]


def main() -> int:
    violations: list[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
