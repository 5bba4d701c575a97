"""
파일 쓰기 유틸리티.

업로드 파일은 temp → rename으로 교체하여 읽는 쪽이 반쯤 쓰인 파일을
보지 않도록 한다. 동일 파일명 동시 업로드는 마지막 rename이 이김 (락 없음).
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    원자적 바이너리 쓰기.

    동작:
    - 중간 상태 없음: temp → replace
    - 같은 이름 파일이 있으면 덮어씀
    - fsync 실패 시 경고 남기고 계속 진행
    - 실패 시 temp 파일 삭제 후 예외 재발생

    Args:
        path: 저장할 파일 경로 (부모 디렉터리는 존재해야 함)
        data: 파일 내용

    Raises:
        OSError: 쓰기/rename 실패
    """
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(data)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                logger.warning(f"Failed to remove temp file {temp_path}")
        raise
