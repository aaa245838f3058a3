from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


class FakeMake:
    """Stands in for `make`: writes the report into its cwd like the real recipe."""

    def __init__(self) -> None:
        self.returncode = 0
        self.content = "X"
        self.produce = True
        self.calls: list[tuple[list[str], str | None]] = []
        self.recipes: list[Path] = []
        self.recipe_bytes: list[bytes] = []

    def __call__(self, args, cwd=None, check=False, **kwargs):
        args = list(args)
        self.calls.append((args, cwd))
        recipe = Path(args[args.index("-f") + 1])
        self.recipes.append(recipe)
        self.recipe_bytes.append(recipe.read_bytes())

        if self.produce:
            (Path(cwd) / "deps-report.md").write_text(self.content, encoding="utf-8")
        if self.returncode and check:
            raise subprocess.CalledProcessError(self.returncode, args)
        return subprocess.CompletedProcess(args, self.returncode)


@pytest.fixture
def fake_make(monkeypatch) -> FakeMake:
    make = FakeMake()
    monkeypatch.setattr("core.orchestrator.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("core.orchestrator.subprocess.run", make)
    return make


@pytest.fixture
def service_dir(tmp_path: Path) -> Path:
    svc = tmp_path / "svc"
    svc.mkdir()
    (svc / "go.mod").write_text("module example.com/svc\n\ngo 1.22\n", encoding="utf-8")
    return svc
