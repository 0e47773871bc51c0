"""커스텀 도메인 예외 클래스 모듈.

Custom domain exception classes module.
Provides the error kinds raised by the codebook schema core so callers can
tell "not found" and "unsupported feature" apart from store-level errors.
Constraint violations are raised by SQLAlchemy (IntegrityError) and are
not wrapped here.

Usage:
    from codebook_schema.utils.exceptions import NotFoundError
    raise NotFoundError("Codebook not found")
"""

from typing import Any


class AppError(Exception):
    """코어 예외의 공통 부모 클래스.

    Common parent of all errors raised by the codebook schema core.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail: str = detail


class NotFoundError(AppError):
    """조회 결과 없음 예외 — 식별자/이름/순서로 찾는 레코드가 없을 때 사용.

    Raised when a point lookup by identity, name or order index matched no row.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(detail)


class UnsupportedFeatureError(AppError):
    """지원되지 않는 피처 예외 — 피처를 담당할 피처 지원이 없을 때 사용.

    Raised when no feature support can be resolved for a feature.
    Indicates a configuration error (no supports registered), never retried.

    Args:
        feature: 처리할 수 없는 피처 (The feature that could not be resolved)
    """

    def __init__(self, feature: Any) -> None:
        super().__init__(f"Unsupported feature: [{feature.name}]")
        self.feature = feature
