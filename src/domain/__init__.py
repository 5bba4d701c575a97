"""Domain layer: constants, errors and schemas."""

from .errors import AssetError, ErrorCodes, TemplateError
from .schemas import (
    AssetKind,
    AssetRecord,
    ContentImageData,
    ContentImageMode,
    ContentImageShadow,
    RenderContext,
    TemplateSummary,
    UploadResult,
)

__all__ = [
    "AssetError",
    "ErrorCodes",
    "TemplateError",
    "AssetKind",
    "AssetRecord",
    "UploadResult",
    "ContentImageData",
    "ContentImageMode",
    "ContentImageShadow",
    "RenderContext",
    "TemplateSummary",
]
