from pathlib import Path

import pytest

from staticpp.cli import main


@pytest.fixture
def site(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = Path("blog_src")
    for name in ("posts", "pages", "assets"):
        (src / name).mkdir(parents=True)
    (src / "pages" / "about.md").write_text("# about \nlearn more.")
    return src


@pytest.mark.parametrize("argv", [[], ["build"], ["serve", "x"]])
def test_usage_errors(argv, capsys):
    assert main(argv) == 1
    assert "Usage: ssg build <src_path> [-o output_path]" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["build", "src", "-x", "out"], ["build", "src", "extra"]])
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    assert "Invalid arguments." in capsys.readouterr().err


def test_build_with_output(site):
    assert main(["build", str(site), "-o", "out"]) == 0
    assert "learn more." in Path("out/pages/about.html").read_text()


def test_build_without_output(site):
    assert main(["build", str(site)]) == 0
    assert not Path("dist").exists()


def test_build_missing_source_still_succeeds(tmp_path, capsys):
    assert main(["build", str(tmp_path / "none")]) == 0
    assert "err: provided path does not exist" in capsys.readouterr().err