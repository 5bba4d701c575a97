#!/usr/bin/env python3
"""
manage_assets.py - public/fonts, public/logos 관리 스크립트

명령:
- list:   에셋 목록 출력
- import: 로컬 파일을 에셋 디렉터리로 복사 (검증 포함)
- css:    업로드된 폰트의 @font-face CSS 출력

import는 기본 dry-run (검증만). 실제 복사는 --execute.

사용법:
    # 폰트 목록
    uv run python scripts/manage_assets.py list fonts

    # 로고 가져오기 (dry-run)
    uv run python scripts/manage_assets.py import logos ~/Downloads/brand.svg

    # 실제 복사
    uv run python scripts/manage_assets.py import fonts ./Gilroy-Black.ttf --execute

    # @font-face CSS
    uv run python scripts/manage_assets.py css --base-url https://cdn.example.com
"""

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path

from src.app.services.assets import AssetDirectoryService
from src.core.logging import configure_logging
from src.domain.errors import AssetError
from src.domain.schemas import AssetKind
from src.render.font_faces import build_font_face_css

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Import 결과."""
    imported: list[str] = field(default_factory=list)
    validated: list[str] = field(default_factory=list)  # dry-run 통과
    errors: list[str] = field(default_factory=list)


def import_assets(
    service: AssetDirectoryService,
    kind: AssetKind,
    sources: list[Path],
    execute: bool = False,
) -> ImportResult:
    """
    로컬 파일들을 에셋 디렉터리로 가져오기.

    Args:
        service: AssetDirectoryService
        kind: fonts 또는 logos
        sources: 가져올 파일 경로들
        execute: False면 검증만 (dry-run)

    Returns:
        ImportResult
    """
    result = ImportResult()

    for source in sources:
        if not source.is_file():
            result.errors.append(f"{source}: file not found")
            continue

        try:
            if execute:
                upload = service.upload(kind, source.name, source.read_bytes())
                result.imported.append(upload.filename)
                logger.info(f"  가져옴: {source} → {upload.url}")
            else:
                service.validate_upload(kind, source.name, source.stat().st_size)
                result.validated.append(source.name)
                logger.info(f"  [dry-run] 가져올 예정: {source.name}")
        except (AssetError, OSError) as e:
            result.errors.append(f"{source}: {e}")

    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="폰트/로고 에셋 관리 스크립트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--public-root",
        type=str,
        default="public",
        help="public 디렉터리 경로 (기본: public)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="에셋 목록")
    list_parser.add_argument("kind", choices=[k.value for k in AssetKind])

    import_parser = subparsers.add_parser("import", help="로컬 파일 가져오기")
    import_parser.add_argument("kind", choices=[k.value for k in AssetKind])
    import_parser.add_argument("files", nargs="+", type=Path)
    import_parser.add_argument(
        "--execute",
        action="store_true",
        help="실제 복사 실행 (기본: dry-run)",
    )

    css_parser = subparsers.add_parser("css", help="@font-face CSS 출력")
    css_parser.add_argument("--base-url", type=str, default=None)

    args = parser.parse_args(argv)

    configure_logging("INFO")
    service = AssetDirectoryService(Path(args.public_root))

    if args.command == "list":
        kind = AssetKind(args.kind)
        records = service.list_assets(kind)
        if not records:
            logger.info(f"{kind.value}: 없음 ({service.directory(kind)})")
        for record in records:
            print(f"{record.name}\t{record.filename}\t{record.url}")
        return 0

    if args.command == "css":
        print(build_font_face_css(service.list_assets(AssetKind.FONTS), args.base_url))
        return 0

    kind = AssetKind(args.kind)
    if not args.execute:
        logger.info("=" * 50)
        logger.info("DRY-RUN 모드 (실제 복사 없음)")
        logger.info("실제 실행: --execute 옵션 추가")
        logger.info("=" * 50)

    result = import_assets(service, kind, args.files, execute=args.execute)

    logger.info(
        f"결과: 가져옴 {len(result.imported)}, 검증 통과 {len(result.validated)}, "
        f"에러 {len(result.errors)}"
    )
    for err in result.errors[:5]:  # 최대 5개만 출력
        logger.warning(f"    - {err}")

    return 0 if not result.errors else 1


if __name__ == "__main__":
    exit(main())
