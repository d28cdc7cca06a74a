"""
Rich-text editor 초기화 스크립트.

빈 상태 판정:
- quill.getText()의 공백 제거 결과로 state.empty 플래그 유지
- placeholder는 editor 요소의 ql-empty 클래스 + data-placeholder (CSS)로 표시
- HTML 문자열 비교로 빈 상태를 추정하지 않음
"""

import json
from typing import Any

_EDITOR_SCRIPT = """(function () {
    var input = document.getElementById(%(input_id)s);
    var container = document.getElementById(%(editor_id)s);
    var quill = new Quill(container, {
        theme: "snow",
        modules: {
            toolbar: %(toolbar_selector)s,
            "image-tooltip": true,
            "link-tooltip": true
        }
    });
    var state = {empty: true};
    function syncEmpty() {
        state.empty = quill.getText().trim().length === 0;
        container.classList.toggle("ql-empty", state.empty);
    }
    quill.setHTML(input.value);
    syncEmpty();
    quill.on("text-change", function () {
        syncEmpty();
        input.value = state.empty ? "" : quill.getHTML();
    });
    jQuery(input).data("quill", quill);%(upload)s
})();"""

_UPLOAD_SCRIPT = """
    jQuery(%(upload_selector)s).upload(%(upload_options)s);"""


def build_editor_script(
    input_id: str,
    toolbar_id: str,
    editor_id: str,
    upload: dict[str, Any] | None = None,
) -> str:
    """
    editor 초기화 JS 생성.

    Args:
        input_id: 내용을 저장하는 hidden input id
        toolbar_id: toolbar 컨테이너 id
        editor_id: editor 컨테이너 id
        upload: upload 플러그인 옵션 (None이면 upload 바인딩 생략)

    Returns:
        JS 코드 (값은 JSON 인코딩되어 삽입됨)
    """
    upload_js = ""
    if upload is not None:
        upload_js = _UPLOAD_SCRIPT % {
            "upload_selector": json.dumps(f'#{toolbar_id} [data-toggle="upload"]'),
            "upload_options": json.dumps(upload, ensure_ascii=False),
        }

    return _EDITOR_SCRIPT % {
        "input_id": json.dumps(input_id),
        "editor_id": json.dumps(editor_id),
        "toolbar_selector": json.dumps(f"#{toolbar_id}"),
        "upload": upload_js,
    }
