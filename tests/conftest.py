from pathlib import Path

import pytest

from fake_filesystem import FakeFileSystem


@pytest.fixture
def make_fake_fs():
    def _make(tree: dict) -> FakeFileSystem:
        return FakeFileSystem(tree)

    return _make


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A small directory on disk: two files, a nested file, an empty dir."""
    (tmp_path / "a.bin").write_bytes(b"\x00" * 100)
    (tmp_path / "b.txt").write_text("hello")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.bin").write_bytes(b"\xff" * 20)
    (tmp_path / "empty").mkdir()
    return tmp_path
