"""핵심 모듈

공통으로 사용되는 로깅 설정을 제공합니다.
"""

from .log import setup_logging

__all__ = [
    "setup_logging",
]
