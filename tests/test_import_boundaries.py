from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

ROOT = Path(__file__).resolve().parents[1]


def _load_checker_module() -> ModuleType:
    module_path = ROOT / "tools" / "check_imports.py"
    spec = importlib.util.spec_from_file_location("check_imports_tool", module_path)
    assert spec is not None
    loader = spec.loader
    assert loader is not None
    module = importlib.util.module_from_spec(spec)
    loader.exec_module(module)
    return module


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_check_file_allows_core_internal_import(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "story_lens"
    core_file = source_root / "core" / "sentiment.py"
    _write(core_file, "from story_lens.core import lexicon\nfrom . import text_metrics\n")
    assert checker.check_file(core_file, source_root) == []


def test_check_file_rejects_core_importing_adapters(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "story_lens"
    core_file = source_root / "core" / "sentiment.py"
    _write(core_file, "from story_lens.adapters import sqlite_blob_store\n")
    violations = checker.check_file(core_file, source_root)
    assert len(violations) == 1
    assert "core must not import story_lens.adapters" in violations[0]


def test_check_file_resolves_relative_imports(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "story_lens"
    domain_file = source_root / "domain" / "ports.py"
    _write(domain_file, "from ..application import story_repository\nfrom .. import adapters\n")
    violations = checker.check_file(domain_file, source_root)
    assert len(violations) == 2
    assert all("domain must not import" in violation for violation in violations)


def test_application_layer_is_unrestricted(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "story_lens"
    app_file = source_root / "application" / "wiring.py"
    _write(app_file, "from story_lens.adapters import blob_store_factory\n")
    assert checker.check_file(app_file, source_root) == []


def test_source_tree_respects_layer_boundaries() -> None:
    checker = _load_checker_module()
    assert checker.check_import_boundaries(ROOT / "src" / "story_lens") == []


def test_check_file_rejects_adapters_importing_application(tmp_path: Path) -> None:
    checker = _load_checker_module()
    source_root = tmp_path / "src" / "story_lens"
    adapter_file = source_root / "adapters" / "observability.py"
    _write(
        adapter_file,
        "from story_lens.application.story_repository import StoryRepository\n"
        "from story_lens.settings import RuntimeSettings\n",
    )
    violations = checker.check_file(adapter_file, source_root)
    assert len(violations) == 1
    assert "adapters must not import story_lens.application" in violations[0]
