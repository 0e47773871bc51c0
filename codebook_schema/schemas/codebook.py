"""코드북 편집기 응답 스키마.

Codebook editor schemas — Data holders handed to the annotation editor.
"""

from pydantic import BaseModel


class CodebookResponse(BaseModel):
    """코드북 응답 스키마.

    Codebook response schema.

    Attributes:
        id: 코드북 UUID (Codebook unique identifier)
        project_id: 프로젝트 UUID (Project identifier)
        name: 코드북 이름 (Codebook name)
        ui_name: 표시 이름 (Display name)
        description: 설명 (Description, nullable)
        codebook_order: 표시 순서 (Display order index)
    """

    id: str  # 코드북 UUID 문자열 (Codebook UUID as string)
    project_id: str  # 프로젝트 UUID 문자열 (Project UUID as string)
    name: str
    ui_name: str
    description: str | None = None
    codebook_order: int


class CodebookEditorModel(BaseModel):
    """코드북 편집기 모델 — 편집 중인 코드북과 선택된 코드.

    Codebook editor model — The codebook being edited and the code the
    annotator has currently selected (None until one is chosen).
    """

    codebook: CodebookResponse | None = None
    code: str | None = None  # 선택된 코드 값 (Selected code value)
