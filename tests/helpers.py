"""테스트용 입력기 대역"""

from __future__ import annotations

import threading

from cli_console.history import ConsoleHistory


class ScriptedLineReader:
    """미리 정한 입력을 차례로 돌려주는 테스트용 입력기

    항목이 예외 인스턴스면 해당 예외를 발생시키고, 입력이 모두 소진되면 EOFError.
    """

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.ctrl_c_aborts = True
        self.history = ConsoleHistory()
        self.prompts: list[str] = []
        self.completer = None
        self.closed = False

    def set_completer(self, candidates, describe=None) -> None:
        self.completer = candidates

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if self.closed or not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def append_history(self, line: str) -> None:
        self.history.append_entry(line)

    def read_history(self, stream) -> int:
        return self.history.read_from(stream)

    def write_history(self, stream) -> int:
        return self.history.write_to(stream)

    def close(self) -> None:
        self.closed = True


class BlockingLineReader(ScriptedLineReader):
    """close()가 호출될 때까지 prompt()에서 블로킹되는 입력기"""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self._released = threading.Event()

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        self.entered.set()
        self._released.wait(timeout=10)
        raise EOFError

    def close(self) -> None:
        super().close()
        self._released.set()
