"""
App layer: HTTP 서버 (FastAPI + HTMX).

역할:
- 에셋 목록/업로드 API, 템플릿 갤러리, 모듈 렌더 API
- 도메인 에러 → JSON 응답 변환 (요청 경계)

주의: 폴더 구분
- src/templates/ → 코드 (catalog.py)
- templates/ (루트) → 템플릿 JSON 저장소
- public/ (루트) → 업로드된 폰트/로고
"""
