"""Tests for atomic text IO helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from speclint.io import write_text_atomic


def test_write_text_atomic_replaces_existing_file(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "ignore.yaml"
    out_path.parent.mkdir()
    out_path.write_text("old\n", encoding="utf-8")

    write_text_atomic(path=out_path, content="new\n", temp_prefix=".tmp-", temp_suffix=".yaml")

    assert out_path.read_text(encoding="utf-8") == "new\n"
    assert [item.name for item in out_path.parent.iterdir()] == ["ignore.yaml"]


def test_write_text_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "ignore.yaml"
    temp_prefix = ".tmp-"
    temp_suffix = ".yaml"

    with pytest.raises(TypeError):
        write_text_atomic(
            path=out_path,
            content=b"not text",  # type: ignore[arg-type]
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()
