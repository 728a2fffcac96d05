from __future__ import annotations

import os
from pathlib import Path

from rac.project.cleanup import clean_project, enter_project, init_project, write_env_file


def make_cloned_project(root: Path, name: str = "demo-app") -> Path:
    project = root / name
    (project / ".git" / "objects" / "ab").mkdir(parents=True)
    (project / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (project / ".git" / "objects" / "ab" / "cdef").write_bytes(b"\x00blob")
    (project / "pnpm-lock.yaml").write_text("lockfileVersion: 6.0\n")
    (project / "LICENSE").write_text("MIT\n")
    (project / "README.md").write_text("# template\n")
    (project / "src").mkdir()
    (project / "src" / "main.tsx").write_text("export {}\n")
    (project / "package.json").write_text('{"name": "demo-app"}\n')
    return project


def test_init_project_enters_writes_env_and_cleans(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    make_cloned_project(tmp_path)

    project_dir = init_project("demo-app")

    assert project_dir == (tmp_path / "demo-app").resolve()
    assert Path.cwd().resolve() == project_dir
    assert (project_dir / ".env").read_text(encoding="utf-8") == "VITE_APP_TITLE = 'demo-app'"
    for name in (".git", "pnpm-lock.yaml", "LICENSE", "README.md"):
        assert not (project_dir / name).exists()
    assert (project_dir / "src" / "main.tsx").exists()
    assert (project_dir / "package.json").exists()


def test_enter_project_resolves_absolute_path(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "outer" / "demo-app").mkdir(parents=True)
    monkeypatch.chdir(tmp_path / "outer")
    project_dir = enter_project("demo-app")
    assert project_dir.is_absolute()
    assert os.getcwd() == str(project_dir)


def test_clean_project_removes_every_known_lockfile(tmp_path: Path) -> None:
    for name in ("yarn.lock", "package-lock.json", "pnpm-lock.yaml"):
        (tmp_path / name).write_text("")
    removed = clean_project(tmp_path)
    assert sorted(removed) == ["package-lock.json", "pnpm-lock.yaml", "yarn.lock"]


def test_clean_project_tolerates_missing_targets(tmp_path: Path) -> None:
    project = make_cloned_project(tmp_path)
    assert clean_project(project) == [".git", "pnpm-lock.yaml", "LICENSE", "README.md"]
    # second pass has nothing left to remove and must not raise
    assert clean_project(project) == []

    empty = tmp_path / "empty"
    empty.mkdir()
    assert clean_project(empty) == []


def test_env_file_is_overwritten(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("VITE_APP_TITLE = 'template'\nOTHER=1\n")
    write_env_file(tmp_path, "demo-app")
    assert (tmp_path / ".env").read_text(encoding="utf-8") == "VITE_APP_TITLE = 'demo-app'"
