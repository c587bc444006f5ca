"""대화형 콘솔

입력을 한 줄씩 읽어 등록된 명령어와 매칭하고 핸들러를 실행한다.
"""

from __future__ import annotations

import dataclasses
import io
import os
import stat
import sys
import threading
from pathlib import Path
from typing import IO

from loguru import logger
from rich.console import Console as RichConsole

from .builtins import default_commands, quit_command
from .command import Command
from .config import ConsoleConfig, settings
from .context import CancelScope
from .errors import (
    ConsoleClosedError,
    DuplicateCommandError,
    PipeDetectionError,
    PromptAborted,
)
from .line_reader import LineReader
from .styles import ERROR_STYLE, WELCOME_STYLE

PROMPT = "> "


def is_pipe(stream: IO[str]) -> bool:
    """스트림이 named pipe(FIFO)인지 확인

    Raises:
        PipeDetectionError: 파일 상태를 확인할 수 없는 경우
    """
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        # 파일 디스크립터가 없는 스트림 (테스트 러너의 stdin 대체 등)
        return False
    except ValueError as e:
        raise PipeDetectionError(f"error checking if stdin is a pipe: {e}") from e

    try:
        mode = os.fstat(fd).st_mode
    except OSError as e:
        raise PipeDetectionError(f"error checking if stdin is a pipe: {e}") from e
    return stat.S_ISFIFO(mode)


class Console:
    """명령어 기반 대화형 콘솔

    사용법:
        console = Console(welcome_message="Hello!")
        console.register_commands(Command(name="echo", handler=echo))
        with console:
            console.start()

    명령어 등록은 start() 호출 전에 끝내야 한다 (실행 중 등록은 지원하지 않음).
    """

    def __init__(self, config: ConsoleConfig | None = None, **options):
        config = config if config is not None else ConsoleConfig()
        if options:
            config = dataclasses.replace(config, **options)
        self.config = config

        self.out = config.output if config.output is not None else RichConsole()
        self.history_file = (
            Path(config.history_file)
            if config.history_file is not None
            else settings.HISTORY_FILE
        )
        self.welcome_message = config.welcome_message

        stdin = config.stdin if config.stdin is not None else sys.stdin
        self.is_pipe_input = is_pipe(stdin)

        if config.line_reader is not None:
            self.line_reader = config.line_reader
        else:
            self.line_reader = LineReader(stdin)
        self.line_reader.ctrl_c_aborts = config.handle_ctrl_c

        self._commands: list[Command] = []
        for cmd in default_commands():
            self._attach(cmd)

        self._exit_command: Command | None = None
        if config.enable_exit_command:
            exit_cmd = (
                config.exit_command
                if config.exit_command is not None
                else quit_command()
            )
            conflicts = self._find_conflicts(exit_cmd, self._commands)
            if conflicts:
                raise DuplicateCommandError(conflicts)
            exit_cmd.console = self
            self._exit_command = exit_cmd

        self._scope = CancelScope(parent=config.context)
        self._started = False
        self._closed = False
        self._history_loaded = False

        self.line_reader.set_completer(self.complete, self._describe)

    def __enter__(self) -> Console:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def commands(self) -> tuple[Command, ...]:
        """등록된 일반 명령어 (등록 순서)"""
        return tuple(self._commands)

    @property
    def exit_command(self) -> Command | None:
        return self._exit_command

    @property
    def registered_commands(self) -> tuple[Command, ...]:
        """일반 명령어 + 종료 명령어"""
        if self._exit_command is None:
            return tuple(self._commands)
        return (*self._commands, self._exit_command)

    @property
    def context(self) -> CancelScope:
        """콘솔 수명 범위"""
        return self._scope

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # 명령어 등록
    # ------------------------------------------------------------------

    @staticmethod
    def _find_conflicts(cmd: Command, others) -> set[str]:
        identifiers = cmd.identifiers
        conflicts: set[str] = set()
        for existing in others:
            conflicts |= identifiers & existing.identifiers
        return conflicts

    def _attach(self, cmd: Command) -> None:
        cmd.console = self
        self._commands.append(cmd)
        logger.debug("명령어 등록: {} (별칭: {})", cmd.name, cmd.aliases)

    def register_commands(self, *cmds: Command) -> None:
        """명령어 일괄 등록

        하나라도 기존 명령어(종료 명령어 포함) 또는 같은 호출의 다른 명령어와
        이름/별칭이 겹치면 아무것도 등록하지 않는다.

        Raises:
            DuplicateCommandError: 이름 또는 별칭이 중복된 경우
        """
        accepted: list[Command] = []
        for cmd in cmds:
            conflicts = self._find_conflicts(
                cmd, [*self.registered_commands, *accepted]
            )
            if conflicts:
                logger.warning("중복 명령어 등록 거부: {}", sorted(conflicts))
                raise DuplicateCommandError(conflicts)
            accepted.append(cmd)

        for cmd in accepted:
            self._attach(cmd)

    # ------------------------------------------------------------------
    # 자동완성
    # ------------------------------------------------------------------

    def complete(self, line: str) -> list[str]:
        """입력 앞부분과 일치하는 명령어 이름/별칭 목록"""
        prefix = line.lower()
        candidates: list[str] = []
        for cmd in self.registered_commands:
            if cmd.name.startswith(prefix):
                candidates.append(cmd.name)
                continue
            candidates.extend(a for a in cmd.aliases if a.startswith(prefix))
        return candidates

    def _describe(self, identifier: str) -> str:
        for cmd in self.registered_commands:
            if identifier in cmd.identifiers:
                return cmd.description
        return ""

    # ------------------------------------------------------------------
    # 수명 주기
    # ------------------------------------------------------------------

    def start(self) -> None:
        """콘솔 실행. 입력 루프가 끝나거나 수명 범위가 취소될 때까지 블로킹

        Raises:
            ConsoleClosedError: 이미 닫혔거나 시작된 콘솔인 경우
        """
        if self._closed:
            raise ConsoleClosedError("console is closed")
        if self._started:
            raise ConsoleClosedError("console already started")
        self._started = True

        logger.info("콘솔 시작 (pipe 입력: {})", self.is_pipe_input)
        if not self.is_pipe_input and self.welcome_message:
            self.out.print(
                self.welcome_message, style=WELCOME_STYLE, markup=False, highlight=False
            )
        self.read_history()
        self._read()

    def close(self) -> None:
        """히스토리 저장, 입력기 해제, 수명 범위 취소 (두 번째 호출부터는 무시)

        수명 범위는 마지막에 취소하므로 start()가 반환될 때 정리가 끝나 있다.
        """
        if self._closed:
            logger.debug("이미 닫힌 콘솔")
            return
        self._closed = True
        logger.info("콘솔 종료")

        if self._history_loaded:
            self.write_history()
        self.line_reader.close()
        self._scope.cancel()

    def _read(self) -> None:
        """입력 루프를 별도 스레드에서 실행하고, 루프 종료와 취소 중 먼저 오는 쪽을 기다림

        취소는 블로킹된 입력 읽기를 중단하지 않는다. 남은 입력 스레드는
        close()가 입력기를 해제할 때 종료된다.
        """
        stopped = threading.Event()
        unlink = self._scope.add_done_callback(stopped.set)
        reader = threading.Thread(
            target=self._read_loop,
            args=(stopped,),
            name="cli-console-reader",
            daemon=True,
        )
        reader.start()
        try:
            stopped.wait()
        finally:
            unlink()

    def _read_loop(self, stopped: threading.Event) -> None:
        try:
            while not self._scope.cancelled:
                try:
                    line = self.line_reader.prompt(PROMPT)
                except PromptAborted:
                    self.out.print("Aborted")
                    logger.info("입력 루프 종료: 사용자 중단")
                    break
                except EOFError:
                    logger.info("입력 루프 종료: 입력 끝")
                    break
                except Exception as e:
                    self._print_error(f"Error reading line: {e}")
                    logger.error("입력 읽기 실패: {}", e)
                    break

                line = line.strip()
                if not line:
                    continue
                self.line_reader.append_history(line)
                if self.handle_input(line):
                    logger.info("입력 루프 종료: 종료 명령어")
                    break
        finally:
            stopped.set()

    # ------------------------------------------------------------------
    # 디스패치
    # ------------------------------------------------------------------

    def handle_input(self, line: str) -> bool:
        """입력 한 줄 처리. 종료 명령어가 실행되었으면 True 반환

        종료 명령어를 먼저 확인하고, 그 다음 등록 순서대로 처음 매칭되는
        명령어 하나만 실행한다. 매칭되는 명령어가 없으면 무시한다.
        핸들러가 None이 아닌 값을 반환하면 그 값을 출력한다.
        """
        line = line.strip()
        if not line:
            return False

        exit_cmd = self._exit_command
        if exit_cmd is not None and exit_cmd.match(line):
            try:
                self._render_result(exit_cmd.handle(line))
            except Exception as e:
                logger.error("종료 명령어 실패: {} ({})", exit_cmd.name, e)
                self._print_error(str(e))
            return True

        for cmd in self._commands:
            if not cmd.match(line):
                continue
            logger.debug("명령어 실행: {}", cmd.name)
            try:
                self._render_result(cmd.handle(line))
            except Exception as e:
                logger.error("명령어 실행 실패: {} ({})", cmd.name, e)
                self._print_error(f"error running command {cmd.name}: {e}")
            return False

        logger.debug("매칭되는 명령어 없음: {}", line)
        return False

    # ------------------------------------------------------------------
    # 히스토리
    # ------------------------------------------------------------------

    def read_history(self) -> None:
        """히스토리 파일 로드 (파일이 없으면 건너뜀)"""
        self._history_loaded = True
        try:
            f = self.history_file.open(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            return
        except OSError as e:
            logger.warning("히스토리 파일 열기 실패: {}", e)
            self._print_error(f"Error opening history file: {e}")
            return

        with f:
            try:
                self.line_reader.read_history(f)
            except (OSError, ValueError) as e:
                logger.warning("히스토리 파일 읽기 실패: {}", e)
                self._print_error(f"Error reading history file: {e}")

    def write_history(self) -> None:
        """히스토리 파일 저장"""
        try:
            f = self.history_file.open(
                "w", encoding="utf-8", errors="surrogateescape"
            )
        except OSError as e:
            logger.warning("히스토리 파일 생성 실패: {}", e)
            self._print_error(f"Error creating history file: {e}")
            return

        with f:
            try:
                self.line_reader.write_history(f)
            except OSError as e:
                logger.warning("히스토리 파일 쓰기 실패: {}", e)
                self._print_error(f"Error writing history file: {e}")

    def _render_result(self, result) -> None:
        if result is not None:
            self.out.print(result, markup=False, highlight=False)

    def _print_error(self, message: str) -> None:
        self.out.print(message, style=ERROR_STYLE, markup=False, highlight=False)
