from __future__ import annotations

import os
from pathlib import Path

import pytest

from pdf_assembler.discovery import find_images, find_pdfs, resolve_output_path
from pdf_assembler.exceptions import NoInputsError


def _touch(folder: Path, *names: str) -> None:
    for name in names:
        (folder / name).write_bytes(b"")


def test_find_images_sorted_lexicographically(tmp_path: Path) -> None:
    _touch(tmp_path, "b.jpg", "a.png", "c.jpeg", "10.png", "2.png", "notes.txt")

    found = find_images(tmp_path)

    assert [path.name for path in found] == ["10.png", "2.png", "a.png", "b.jpg", "c.jpeg"]
    assert all(path.is_absolute() for path in found)


def test_find_pdfs_ignores_subfolders(tmp_path: Path) -> None:
    _touch(tmp_path, "one.pdf")
    (tmp_path / "nested").mkdir()
    _touch(tmp_path / "nested", "two.pdf")

    assert [path.name for path in find_pdfs(tmp_path)] == ["one.pdf"]


def test_find_pdfs_accepts_single_file(tmp_path: Path) -> None:
    _touch(tmp_path, "one.pdf")

    assert find_pdfs(tmp_path / "one.pdf") == [(tmp_path / "one.pdf").resolve()]


def test_no_inputs(tmp_path: Path) -> None:
    with pytest.raises(NoInputsError, match="Found no images"):
        find_images(tmp_path)


def test_resolve_output_path_defaults_to_folder_name(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    folder = tmp_path / "holiday"
    folder.mkdir()
    monkeypatch.chdir(tmp_path)

    assert resolve_output_path(None, folder) == (tmp_path / "holiday.pdf").resolve()
    assert resolve_output_path("album", folder) == (tmp_path / "album.pdf").resolve()
    assert resolve_output_path("out/album.pdf", folder) == Path(os.getcwd(), "out", "album.pdf").resolve()
