"""콘솔 예외 정의"""


class ConsoleError(Exception):
    """콘솔 관련 예외의 기본 클래스"""


class NoHandlerError(ConsoleError):
    """매칭된 명령어에 핸들러가 없는 경우"""

    def __init__(self, name: str):
        super().__init__("command has no handler")
        self.name = name


class DuplicateCommandError(ConsoleError):
    """이미 등록된 명령어와 이름/별칭이 겹치는 경우"""

    def __init__(self, conflicts: set[str]):
        super().__init__(
            "command matches an existing command: " + ", ".join(sorted(conflicts))
        )
        self.conflicts = conflicts


class PipeDetectionError(ConsoleError):
    """표준 입력의 파이프 여부를 확인할 수 없는 경우"""


class PromptAborted(ConsoleError):
    """사용자가 Ctrl+C로 입력을 중단한 경우"""


class ConsoleClosedError(ConsoleError):
    """이미 닫혔거나 실행 중인 콘솔을 다시 시작하려는 경우"""
