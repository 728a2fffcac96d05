from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

import rac.project.fetch as fetch_mod
import rac.project.install as install_mod
from rac.errors import CommandError

TEMPLATE_MANIFEST = {
    "name": "react-awesome-template",
    "private": True,
    "version": "0.0.0",
    "scripts": {"dev": "vite"},
}


class FakeCommands:
    """Stands in for git and the package managers.

    `git clone` materializes a small template checkout; every command is
    recorded together with the directory it ran in.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[List[str], Path]] = []
        self.fail_on: Optional[str] = None
        self.available: List[str] = ["npm"]

    def run(self, args: List[str], cwd: Optional[Path] = None) -> None:
        where = (cwd or Path.cwd()).resolve()
        self.calls.append((args, where))
        if self.fail_on and args[0] == self.fail_on:
            raise CommandError(args, 128)
        if args[:2] == ["git", "clone"]:
            project = where / args[3]
            (project / ".git").mkdir(parents=True)
            (project / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
            (project / "pnpm-lock.yaml").write_text("lockfileVersion: 6.0\n")
            (project / "LICENSE").write_text("MIT\n")
            (project / "README.md").write_text("# template\n")
            (project / "package.json").write_text(json.dumps(TEMPLATE_MANIFEST))

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.available else None

    def commands(self) -> List[List[str]]:
        return [args for args, _ in self.calls]


@pytest.fixture
def fake_commands(monkeypatch) -> FakeCommands:
    fake = FakeCommands()
    monkeypatch.setattr(fetch_mod, "run", fake.run)
    monkeypatch.setattr(install_mod, "run", fake.run)
    monkeypatch.setattr(install_mod.shutil, "which", fake.which)
    return fake
