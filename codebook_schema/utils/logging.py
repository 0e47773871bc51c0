"""로깅 설정 모듈 — 표준 로거 + Axiom 전송.

Logging setup — stdlib loggers with optional Axiom shipping.
Records logged under the package logger go to stderr and, when Axiom is
configured, are ingested as structured events. Fields passed through
``extra`` (e.g. ``project_id``) become event attributes.
"""

import logging

from axiom_py import Client as AxiomClient
from axiom_py.logging import AxiomHandler

from codebook_schema.config import settings

PACKAGE_LOGGER: str = "codebook_schema"

_configured: bool = False


def configure_logging() -> logging.Logger:
    """패키지 로거를 한 번만 구성합니다.

    Configure the package logger once; later calls return it unchanged.

    Returns:
        logging.Logger: 구성된 패키지 로거 (The configured package logger)
    """
    global _configured
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _configured:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    logger.addHandler(handler)

    # Axiom 미설정시 스트림 로그만 사용 — Stream only if Axiom not configured
    if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
        client = AxiomClient(token=settings.AXIOM_API_TOKEN)
        logger.addHandler(AxiomHandler(client, settings.AXIOM_DATASET))

    logger.setLevel(settings.LOG_LEVEL.upper())
    _configured = True
    return logger
