from __future__ import annotations

import ast
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

# Orchestration modules (CLI, I/O, exit codes handling).
# LOW-level code (core/...) must NEVER import these.
#
# errors.py is a shared contract (raised by core, mapped by the CLI): not ORCH.
ORCH_PREFIXES: tuple[str, ...] = ("bubblebabble.cli",)

PACKAGE_ROOT = "bubblebabble"


@dataclass(frozen=True)
class ImportEdge:
    src: str
    dst: str
    file: Path
    lineno: int


def _is_orch(mod: str) -> bool:
    return any(mod == p or mod.startswith(p + ".") for p in ORCH_PREFIXES)


def _module_name_from_path(src_dir: Path, py_file: Path) -> str | None:
    try:
        rel = py_file.relative_to(src_dir)
    except ValueError:
        return None

    parts = list(rel.parts)
    if not parts or parts[0] != PACKAGE_ROOT:
        return None

    if py_file.name == "__init__.py":
        parts = parts[:-1]
    else:
        parts[-1] = py_file.stem
    return ".".join(parts) if parts else None


def _resolve_relative(current_mod: str, level: int, module: str | None) -> str | None:
    if level <= 0:
        return module
    base = current_mod.split(".")[:-1]
    if level > len(base):
        return None
    base = base[: len(base) - level + 1]
    return ".".join(base + module.split(".")) if module else ".".join(base)


def _iter_import_edges(src_dir: Path) -> Iterable[ImportEdge]:
    for py in sorted(src_dir.rglob("*.py")):
        mod = _module_name_from_path(src_dir, py)
        if not mod:
            continue

        tree = ast.parse(py.read_text(encoding="utf-8"), filename=str(py))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name == PACKAGE_ROOT or alias.name.startswith(PACKAGE_ROOT + "."):
                        yield ImportEdge(mod, alias.name, py, getattr(node, "lineno", 0))
            elif isinstance(node, ast.ImportFrom):
                if node.module is None and node.level == 0:
                    continue
                abs_mod = _resolve_relative(mod, node.level, node.module)
                if abs_mod and (abs_mod == PACKAGE_ROOT or abs_mod.startswith(PACKAGE_ROOT + ".")):
                    yield ImportEdge(mod, abs_mod, py, getattr(node, "lineno", 0))


def _src_dir() -> Path:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if not src_dir.is_dir():
        raise AssertionError(f"Expected src/ directory at: {src_dir}")
    return src_dir


def test_core_never_imports_cli() -> None:
    """
    Hard dependency direction:
      ORCH (cli) -> may depend on core/errors
      core       -> must NOT depend on ORCH
    """
    violations = [
        e
        for e in _iter_import_edges(_src_dir())
        if e.src != e.dst and not _is_orch(e.src) and _is_orch(e.dst)
    ]
    if violations:
        lines = ["Forbidden imports detected (LOW -> ORCH):"]
        for v in sorted(violations, key=lambda e: (str(e.file), e.lineno, e.src, e.dst)):
            lines.append(f"  {v.file}:{v.lineno}  {v.src}  ->  {v.dst}")
        lines.append("")
        lines.append("Fix: move CLI/I-O logic out of core, or invert the dependency.")
        raise AssertionError("\n".join(lines))


def test_import_scanner_sees_cli_edges() -> None:
    # Guard against a scanner that silently finds nothing.
    edges = list(_iter_import_edges(_src_dir()))
    cli_deps = {e.dst for e in edges if e.src == "bubblebabble.cli"}
    assert "bubblebabble.core.codec_bubblebabble" in cli_deps
    assert "bubblebabble.errors" in cli_deps
