"""Tests for recursive script discovery."""

import os
from pathlib import Path

import pytest

from ue_angelscript.scan_for_scripts import SKIP_DIRS, scan_for_scripts


def _touch(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_scan_no_roots() -> None:
    """Verify that scanning no roots yields nothing."""
    assert scan_for_scripts([]) == []


def test_scan_missing_root_is_skipped(tmp_path: Path) -> None:
    """Verify that non-existent roots are skipped without error."""
    _touch(tmp_path / "real" / "A.as")
    files = scan_for_scripts([str(tmp_path / "missing"), str(tmp_path / "real")])
    assert [f.relative_path for f in files] == ["A.as"]


def test_scan_file_root_is_skipped(tmp_path: Path) -> None:
    """Verify that a root pointing at a file is skipped."""
    _touch(tmp_path / "root.as")
    assert scan_for_scripts([str(tmp_path / "root.as")]) == []


def test_scan_collects_fields(tmp_path: Path) -> None:
    """Verify absolute path, forward-slash relative path, root and size."""
    root = tmp_path / "Script"
    _touch(root / "Gameplay" / "Actors" / "Hero.as", "class AHero {}\n")
    files = scan_for_scripts([str(root)])

    assert len(files) == 1
    f = files[0]
    assert f.relative_path == "Gameplay/Actors/Hero.as"
    assert f.absolute_path == os.path.join(str(root), "Gameplay", "Actors", "Hero.as")
    assert f.root == str(root)
    assert f.size == len("class AHero {}\n")
    assert f.absolute_path.startswith(f.root + os.sep)


def test_scan_filters_extension(tmp_path: Path) -> None:
    """Verify that only the target extension is collected."""
    root = tmp_path / "Script"
    _touch(root / "A.as")
    _touch(root / "notes.txt")
    _touch(root / "B.asx")
    _touch(root / "C.as.bak")
    assert [f.relative_path for f in scan_for_scripts([str(root)])] == ["A.as"]


def test_scan_custom_extension(tmp_path: Path) -> None:
    """Verify that the extension can be overridden."""
    root = tmp_path / "Script"
    _touch(root / "A.as")
    _touch(root / "B.txt")
    files = scan_for_scripts([str(root)], extension=".txt")
    assert [f.relative_path for f in files] == ["B.txt"]


def test_scan_prunes_skip_dirs(tmp_path: Path) -> None:
    """Verify that skip-listed directories are never descended into."""
    root = tmp_path / "Script"
    for name in SKIP_DIRS:
        _touch(root / name / "Hidden.as")
        _touch(root / "Nested" / name / "Deeper" / "Hidden.as")
    _touch(root / "Nested" / "Visible.as")

    files = scan_for_scripts([str(root)])
    assert [f.relative_path for f in files] == ["Nested/Visible.as"]


def test_scan_only_skip_dirs_is_empty(tmp_path: Path) -> None:
    """Verify that a root holding only skipped directories yields nothing."""
    root = tmp_path / "Script"
    _touch(root / ".git" / "A.as")
    _touch(root / "Intermediate" / "B.as")
    assert scan_for_scripts([str(root)]) == []


def test_scan_custom_skip_dirs(tmp_path: Path) -> None:
    """Verify that a caller-supplied skip set replaces the default."""
    root = tmp_path / "Script"
    _touch(root / "Generated" / "A.as")
    _touch(root / "Saved" / "B.as")
    files = scan_for_scripts([str(root)], skip_dirs={"Generated"})
    assert [f.relative_path for f in files] == ["Saved/B.as"]


def test_scan_orders_by_code_point(tmp_path: Path) -> None:
    """Verify locale-naive ordering: uppercase sorts before lowercase."""
    root = tmp_path / "Script"
    _touch(root / "a.as")
    _touch(root / "B.as")
    _touch(root / "_c.as")
    _touch(root / "Sub" / "z.as")
    files = scan_for_scripts([str(root)])
    assert [f.relative_path for f in files] == ["B.as", "Sub/z.as", "_c.as", "a.as"]


def test_scan_merges_roots_and_keeps_root_order_on_ties(tmp_path: Path) -> None:
    """Verify global ordering across roots with root order as the tiebreak."""
    first = tmp_path / "first"
    second = tmp_path / "second"
    _touch(second / "Common.as")
    _touch(first / "Common.as")
    _touch(second / "Alpha.as")
    _touch(first / "Zulu.as")

    files = scan_for_scripts([str(first), str(second)])
    assert [(f.relative_path, f.root) for f in files] == [
        ("Alpha.as", str(second)),
        ("Common.as", str(first)),
        ("Common.as", str(second)),
        ("Zulu.as", str(first)),
    ]

    files = scan_for_scripts([str(second), str(first)])
    common_roots = [f.root for f in files if f.relative_path == "Common.as"]
    assert common_roots == [str(second), str(first)]


def test_scan_is_idempotent(tmp_path: Path) -> None:
    """Verify that repeated scans of an unchanged tree are identical."""
    root = tmp_path / "Script"
    for name in ["b.as", "A.as", "x/y.as", "x/Z.as", "m/n/o.as"]:
        _touch(root / name, name)
    assert scan_for_scripts([str(root)]) == scan_for_scripts([str(root)])


def test_scan_reflects_current_disk_state(tmp_path: Path) -> None:
    """Verify that every scan re-walks the filesystem."""
    root = tmp_path / "Script"
    _touch(root / "A.as")
    assert len(scan_for_scripts([str(root)])) == 1
    _touch(root / "B.as")
    assert len(scan_for_scripts([str(root)])) == 2  # noqa: PLR2004


def test_scan_unreadable_directory_is_skipped(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a directory that cannot be listed does not abort the scan."""
    root = tmp_path / "Script"
    _touch(root / "Locked" / "Secret.as")
    _touch(root / "Open" / "Fine.as")
    _touch(tmp_path / "Other" / "More.as")

    real_scandir = os.scandir
    locked = str(root / "Locked")

    def fake_scandir(path: str) -> object:
        if os.fspath(path) == locked:
            raise PermissionError(13, "Permission denied", locked)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    files = scan_for_scripts([str(root), str(tmp_path / "Other")])

    assert [f.relative_path for f in files] == ["More.as", "Open/Fine.as"]
    assert "Failed to read directory" in caplog.text


def test_scan_unstattable_file_is_skipped(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a file vanishing mid-scan is logged and skipped."""
    root = tmp_path / "Script"
    _touch(root / "Gone.as")
    _touch(root / "Kept.as")

    real_stat = os.stat
    gone = os.path.join(str(root), "Gone.as")

    def fake_stat(path: str, *args: object, **kwargs: object) -> os.stat_result:
        if os.fspath(path) == gone:
            raise FileNotFoundError(2, "No such file or directory", gone)
        return real_stat(path, *args, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(os, "stat", fake_stat)
    files = scan_for_scripts([str(root)])

    assert [f.relative_path for f in files] == ["Kept.as"]
    assert "Failed to stat file" in caplog.text


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes are POSIX")
def test_scan_skips_non_regular_files(tmp_path: Path) -> None:
    """Verify a named pipe with the script extension is not listed."""
    _touch(tmp_path / "Real.as")
    os.mkfifo(tmp_path / "Pipe.as")
    files = scan_for_scripts([str(tmp_path)])
    assert [f.relative_path for f in files] == ["Real.as"]
