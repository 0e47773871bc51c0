"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services orchestrate repositories and the feature support registry and
never commit; the caller that owns the session does.
"""
