"""CLI 계층 - 사용자 인터페이스 처리"""

from .completer import CommandCompleter

__all__ = [
    "CommandCompleter",
]
