"""
FastAPI Routes.

페이지 라우트 (HTML) + API 라우트 (JSON)
"""

from . import assets, modules, templates

__all__ = ["assets", "modules", "templates"]
