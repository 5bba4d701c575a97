"""
test_files.py - atomic_write_bytes 테스트

검증:
- 내용 그대로 저장
- 같은 이름 덮어쓰기 (last write wins)
- 실패 시 temp 파일 남지 않음
"""

import os
from pathlib import Path

import pytest

from src.core.files import atomic_write_bytes


class TestAtomicWriteBytes:
    """원자적 쓰기 테스트."""

    def test_writes_content(self, tmp_path: Path):
        target = tmp_path / "Gilroy-Black.ttf"

        atomic_write_bytes(target, b"\x00\x01font")

        assert target.read_bytes() == b"\x00\x01font"

    def test_overwrites_existing(self, tmp_path: Path):
        target = tmp_path / "logo.svg"
        target.write_bytes(b"old")

        atomic_write_bytes(target, b"new")

        assert target.read_bytes() == b"new"

    def test_no_temp_files_left(self, tmp_path: Path):
        target = tmp_path / "logo.png"

        atomic_write_bytes(target, b"png")

        assert [p.name for p in tmp_path.iterdir()] == ["logo.png"]

    def test_missing_parent_raises(self, tmp_path: Path):
        """부모 디렉터리 없음 → OSError."""
        with pytest.raises(OSError):
            atomic_write_bytes(tmp_path / "missing" / "a.ttf", b"x")

    def test_replace_failure_cleans_temp(self, tmp_path: Path, monkeypatch):
        """rename 실패 → temp 삭제 후 예외 전파."""
        target = tmp_path / "a.ttf"

        def fail_replace(src, dst):
            raise PermissionError("denied")

        monkeypatch.setattr(os, "replace", fail_replace)

        with pytest.raises(PermissionError):
            atomic_write_bytes(target, b"x")

        assert list(tmp_path.iterdir()) == []

    def test_fsync_failure_still_writes(self, tmp_path: Path, monkeypatch, caplog):
        """fsync 실패 → 경고만, 쓰기는 완료."""
        target = tmp_path / "a.ttf"

        def fail_fsync(fd):
            raise OSError("fsync unsupported")

        monkeypatch.setattr(os, "fsync", fail_fsync)

        atomic_write_bytes(target, b"x")

        assert target.read_bytes() == b"x"
        assert "fsync failed" in caplog.text
