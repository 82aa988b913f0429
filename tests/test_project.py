import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustlings.project import Crate, RustAnalyzerProject


def test_empty_project_json():
    assert RustAnalyzerProject().to_json() == '{"sysroot_src":"","crates":[]}'


def test_path_to_json_only_rust_files():
    project = RustAnalyzerProject()
    project.path_to_json(Path("exercises/intro/intro1.rs"))
    project.path_to_json(Path("exercises/README.md"))
    project.path_to_json(Path("exercises/intro"))
    assert project.crates == [Crate(root_module=str(Path("exercises/intro/intro1.rs")))]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


def test_exercises_to_json_walks_tree(tmp_path):
    (tmp_path / "intro").mkdir()
    (tmp_path / "intro" / "intro1.rs").write_text("fn main() {}")
    (tmp_path / "intro" / "README.md").write_text("text")
    (tmp_path / "quiz1.rs").write_text("fn main() {}")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = sorted(crate.root_module for crate in project.crates)
    assert roots == sorted([str(tmp_path / "intro" / "intro1.rs"), str(tmp_path / "quiz1.rs")])


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sysroot")
    project.path_to_json("a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    data = json.loads(target.read_text())
    assert data == json.loads(project.to_json())
    assert data["sysroot_src"] == "/sysroot"
    assert data["crates"][0]["root_module"] == "a.rs"


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with patch("rustlings.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"
    run.assert_not_called()


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    completed = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with patch("rustlings.project.subprocess.run", return_value=completed) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src) == Path(
        "/opt/toolchain", "lib", "rustlib", "src", "rust", "library"
    )
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out