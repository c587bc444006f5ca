"""줄 단위 입력기 (prompt_toolkit 기반)

터미널에서는 PromptSession으로 편집/히스토리/자동완성을 제공하고,
파이프나 리다이렉트된 입력에서는 프롬프트 없이 한 줄씩 읽는다.
"""

from __future__ import annotations

import sys
from typing import IO, Callable

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.application import Application

from .cli.completer import CommandCompleter
from .errors import PromptAborted
from .history import ConsoleHistory
from .styles import prompt_style


def _isatty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _abort_prompt(app: Application) -> None:
    """실행 중인 프롬프트를 EOF로 종료 (이벤트 루프 스레드에서 호출)"""
    if app.is_running and not app.is_done:
        app.exit(exception=EOFError)


class LineReader:
    """콘솔용 줄 입력기

    동시에 여러 스레드에서 prompt()를 호출하면 안 된다.
    """

    def __init__(
        self,
        stdin: IO[str] | None = None,
        *,
        input=None,
        output=None,
        history: ConsoleHistory | None = None,
        ctrl_c_aborts: bool = True,
    ):
        """
        :param stdin: 비대화형 모드에서 읽을 스트림 (기본값 sys.stdin)
        :param input: prompt_toolkit Input (테스트용 주입, 지정 시 항상 대화형)
        :param output: prompt_toolkit Output (테스트용 주입)
        :param history: 히스토리 저장소
        :param ctrl_c_aborts: True면 Ctrl+C 시 PromptAborted 발생
        """
        self._stdin = stdin if stdin is not None else sys.stdin
        self._input = input
        self._output = output
        self.history = history if history is not None else ConsoleHistory()
        self.ctrl_c_aborts = ctrl_c_aborts
        self._completer: CommandCompleter | None = None
        self._session: PromptSession | None = None
        self._closed = False

    @property
    def interactive(self) -> bool:
        """터미널 편집 기능 사용 여부"""
        if self._input is not None:
            return True
        return _isatty(self._stdin)

    @property
    def closed(self) -> bool:
        return self._closed

    def set_completer(
        self,
        candidates: Callable[[str], list[str]],
        describe: Callable[[str], str] | None = None,
    ) -> None:
        """자동완성 후보 함수 설정"""
        self._completer = CommandCompleter(candidates, describe)
        if self._session is not None:
            self._session.completer = self._completer

    def _get_session(self) -> PromptSession:
        """PromptSession 지연 생성 (콘솔 생성 시 터미널에 접근하지 않도록)"""
        if self._session is None:
            self._session = PromptSession(
                style=prompt_style,
                completer=self._completer,
                complete_while_typing=False,
                history=self.history,
                multiline=False,
                input=self._input,
                output=self._output,
            )
        return self._session

    def prompt(self, message: str) -> str:
        """한 줄 입력

        Raises:
            PromptAborted: Ctrl+C로 중단한 경우 (ctrl_c_aborts=True)
            EOFError: 입력이 끝났거나 입력기가 닫힌 경우
        """
        if self._closed:
            raise EOFError
        if not self.interactive:
            return self._read_plain()

        session = self._get_session()
        while True:
            try:
                return session.prompt(message)
            except KeyboardInterrupt:
                if self.ctrl_c_aborts:
                    raise PromptAborted("prompt aborted") from None
                # 현재 줄을 버리고 다시 입력
                continue

    def _read_plain(self) -> str:
        """파이프/리다이렉트 입력에서 한 줄 읽기 (프롬프트 출력 없음)"""
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def append_history(self, line: str) -> None:
        self.history.append_entry(line)

    def read_history(self, stream: IO[str]) -> int:
        return self.history.read_from(stream)

    def write_history(self, stream: IO[str]) -> int:
        return self.history.write_to(stream)

    def close(self) -> None:
        """입력기 해제. 다른 스레드에서 실행 중인 프롬프트는 EOF로 종료된다"""
        if self._closed:
            return
        self._closed = True
        if self._session is None:
            return
        app = self._session.app
        loop = getattr(app, "loop", None)
        if app.is_running and loop is not None:
            logger.debug("실행 중인 프롬프트 종료 요청")
            loop.call_soon_threadsafe(_abort_prompt, app)
