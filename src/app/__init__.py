"""
App layer: 데모/미리보기 서버 (FastAPI + Jinja2).

역할:
- 데모 폼 페이지 (모든 입력 종류, 레이아웃 전환)
- 필드 미리보기 API
- ⚠️ 렌더링 로직 없음 (src/forms에 위임)

주의: 폴더 구분
- src/app/templates/ → 페이지 Jinja2 HTML
- src/widgets/templates/ → 위젯 partial (toolbar)
"""
