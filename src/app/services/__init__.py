"""
Application Services.

역할:
- assets: public/fonts, public/logos 목록 + 업로드
"""

from .assets import AssetDirectoryService, build_asset_record, is_allowed_extension

__all__ = [
    "AssetDirectoryService",
    "build_asset_record",
    "is_allowed_extension",
]
