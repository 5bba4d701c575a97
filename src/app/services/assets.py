"""
Asset Directory Service: 폰트/로고 목록 조회 + 업로드.

구조:
<public_root>/
├── fonts/   # /fonts/<filename> 으로 정적 서빙
└── logos/   # /logos/<filename> 으로 정적 서빙

규칙:
- 확장자 allow-list (대소문자 무시) 로만 필터링
- 디렉터리 없음 → 빈 목록 (에러 아님)
- 업로드 검증(파일명/확장자/용량)은 I/O 전에 수행
- 쓰기는 에셋 디렉터리 안으로 제한
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from src.core.files import atomic_write_bytes
from src.domain.constants import ASSET_ALLOWED_EXTENSIONS, ASSET_MAX_SIZE_MB
from src.domain.errors import AssetError, ErrorCodes
from src.domain.schemas import AssetKind, AssetRecord, UploadResult

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


def is_allowed_extension(kind: AssetKind, filename: str) -> bool:
    """파일 확장자가 kind의 allow-list에 있는지 (대소문자 무시)."""
    return Path(filename).suffix.lower() in ASSET_ALLOWED_EXTENSIONS[kind.value]


def build_asset_record(kind: AssetKind, filename: str) -> AssetRecord:
    """파일명 → AssetRecord."""
    path = Path(filename)
    return AssetRecord(
        name=path.stem,
        filename=filename,
        url=f"/{kind.value}/{filename}",
        extension=path.suffix,
    )


class AssetDirectoryService:
    """
    public/<kind>/ 디렉터리 기반 에셋 관리자.

    저장된 인덱스 없음: list_assets() 호출마다 디렉터리를 다시 읽는다.
    """

    def __init__(
        self,
        public_root: Path,
        max_size_mb: Mapping[str, float] | None = None,
    ):
        """
        Args:
            public_root: public/ 루트 경로
            max_size_mb: kind별 업로드 최대 용량 (MB), 없으면 기본값
        """
        self.public_root = public_root
        self.max_size_mb = {**ASSET_MAX_SIZE_MB, **(max_size_mb or {})}

    def directory(self, kind: AssetKind) -> Path:
        """kind의 에셋 디렉터리 경로."""
        return self.public_root / kind.value

    def max_size_bytes(self, kind: AssetKind) -> int:
        return int(self.max_size_mb[kind.value] * BYTES_PER_MB)

    # =========================================================================
    # List
    # =========================================================================

    def list_assets(self, kind: AssetKind) -> list[AssetRecord]:
        """
        에셋 목록 조회.

        Args:
            kind: fonts 또는 logos

        Returns:
            파일명 순으로 정렬된 AssetRecord 목록
            (디렉터리가 없으면 빈 목록)

        Raises:
            AssetError: LIST_FAILED (디렉터리 읽기 실패)
        """
        asset_dir = self.directory(kind)
        if not asset_dir.exists():
            logger.debug(f"Asset directory missing, returning empty list: {asset_dir}")
            return []

        try:
            entries = sorted(asset_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise AssetError(
                ErrorCodes.LIST_FAILED,
                f"Failed to list {kind.value}",
                directory=str(asset_dir),
                errno_code=e.errno,
            ) from e

        return [
            build_asset_record(kind, entry.name)
            for entry in entries
            if entry.is_file() and is_allowed_extension(kind, entry.name)
        ]

    # =========================================================================
    # Upload
    # =========================================================================

    def validate_upload(self, kind: AssetKind, filename: str | None, size: int) -> str:
        """
        업로드 입력 검증 (I/O 없음).

        순서: 파일 존재 → 파일명 → 확장자 → 용량

        Returns:
            검증된 파일명

        Raises:
            AssetError: MISSING_FILE, INVALID_FILENAME, INVALID_EXTENSION, FILE_TOO_LARGE
        """
        if not filename:
            raise AssetError(
                ErrorCodes.MISSING_FILE,
                f"No {kind.value.rstrip('s')} file provided",
            )

        # 경로 구분자/상위 경로 → 에셋 디렉터리 밖 쓰기 방지
        if (
            Path(filename).name != filename
            or "\\" in filename
            or filename in (".", "..")
        ):
            raise AssetError(
                ErrorCodes.INVALID_FILENAME,
                "Invalid file name. Path components are not allowed",
                filename=filename,
            )

        if not is_allowed_extension(kind, filename):
            allowed = ", ".join(ASSET_ALLOWED_EXTENSIONS[kind.value])
            raise AssetError(
                ErrorCodes.INVALID_EXTENSION,
                f"Invalid file type. Only {allowed} are allowed",
                filename=filename,
            )

        max_bytes = self.max_size_bytes(kind)
        if size > max_bytes:
            raise AssetError(
                ErrorCodes.FILE_TOO_LARGE,
                f"File too large. Maximum size is {self.max_size_mb[kind.value]:g}MB",
                filename=filename,
                size=size,
                max_size=max_bytes,
            )

        return filename

    def upload(
        self,
        kind: AssetKind,
        filename: str | None,
        file_bytes: bytes,
    ) -> UploadResult:
        """
        에셋 파일 저장.

        검증 통과 후에만 디렉터리 생성 + 쓰기.
        같은 이름 파일은 덮어씀 (last write wins).

        Args:
            kind: fonts 또는 logos
            filename: 업로드 파일명
            file_bytes: 파일 내용

        Returns:
            UploadResult (저장된 파일명, 공개 URL)

        Raises:
            AssetError: 검증 실패 (400 계열), WRITE_FAILED
        """
        filename = self.validate_upload(kind, filename, len(file_bytes))

        asset_dir = self.directory(kind)
        target = asset_dir / filename

        try:
            asset_dir.mkdir(parents=True, exist_ok=True)
            atomic_write_bytes(target, file_bytes)
        except OSError as e:
            logger.error(f"Failed to write {target}: {e}")
            raise AssetError(
                ErrorCodes.WRITE_FAILED,
                str(e) or f"Failed to upload {kind.value.rstrip('s')}",
                filename=filename,
                errno_code=e.errno,
            ) from e

        logger.info(f"Stored {kind.value} asset: {target} ({len(file_bytes)} bytes)")
        record = build_asset_record(kind, filename)
        return UploadResult(filename=record.filename, url=record.url)
