"""Architecture test for layer import boundaries.

Layering rules:
- domain/ imports NOTHING from other package layers
- config/ imports from domain/ only
- application/ imports from domain/ and config/
- infrastructure/ imports from domain/, application/ and config/
- bootstrap/ may import anything
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

PACKAGE = "access_token_api"
PACKAGE_DIR = Path(__file__).resolve().parents[2] / PACKAGE

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": {"domain"},
    "application": {"domain", "config"},
    "infrastructure": {"domain", "application", "config"},
}


def _imported_modules(py_file: Path) -> list[tuple[int, str]]:
    tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    modules: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            modules.append((node.lineno, node.module))
        elif isinstance(node, ast.Import):
            modules.extend((node.lineno, alias.name) for alias in node.names)
    return modules


def _violations(layer: str) -> list[str]:
    allowed = ALLOWED_IMPORTS[layer] | {layer}
    found: list[str] = []
    for py_file in (PACKAGE_DIR / layer).rglob("*.py"):
        for lineno, module in _imported_modules(py_file):
            parts = module.split(".")
            if parts[0] != PACKAGE or len(parts) < 2:
                continue
            if parts[1] not in allowed:
                found.append(f"{py_file.name}:{lineno}: {layer} imports {module}")
    return found


@pytest.mark.parametrize("layer", sorted(ALLOWED_IMPORTS))
def test_layer_respects_import_boundaries(layer: str) -> None:
    """Inner layers never import from outer layers."""
    assert (PACKAGE_DIR / layer).is_dir()
    assert _violations(layer) == []
