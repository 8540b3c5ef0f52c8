from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfReader

from pdf_assembler.backends import PypdfBackend
from pdf_assembler.document import AssemblyDocument
from pdf_assembler.exceptions import InvalidPDFError


def test_load_reads_whole_file(pdf_factory: Callable[..., Path]) -> None:
    source = pdf_factory("a.pdf", rotations=(0, 90, 180))

    document = PypdfBackend().load(str(source))

    assert document.num_pages == 3
    assert document.file_size == source.stat().st_size
    assert document.get_page(1).rotation == 90


def test_load_bytes_rejects_garbage() -> None:
    with pytest.raises(InvalidPDFError, match="<memory>"):
        PypdfBackend().load_bytes(b"garbage")


def test_load_handles_encrypted_with_empty_password(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    sample = tmp_path / "sample.pdf"
    sample.write_bytes(b"%PDF-1.4\n")

    class DummyReader:
        def __init__(self, *_: object, **__: object) -> None:
            self.is_encrypted = True
            self.pages = []

        def decrypt(self, password: str) -> int:
            self.decrypt_called = password  # type: ignore[attr-defined]
            return 1

    monkeypatch.setattr("pdf_assembler.backends.pypdf_backend.PdfReader", DummyReader)

    document = PypdfBackend().load(str(sample))
    assert document.num_pages == 0
    assert getattr(document.reader, "decrypt_called") == ""


def test_cloned_writer_serializes(pdf_factory: Callable[..., Path], tmp_path: Path) -> None:
    backend = PypdfBackend()
    source = backend.load(str(pdf_factory("a.pdf", rotations=(0, 0))))

    writer = backend.new_writer(source)
    data = backend.serialize(writer)

    out = tmp_path / "copy.pdf"
    out.write_bytes(data)
    assert len(PdfReader(str(out)).pages) == 2
    assert AssemblyDocument(backend=backend).page_count == 0
