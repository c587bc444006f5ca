"""CLI Console - 명령어 기반 대화형 콘솔 라이브러리"""

from loguru import logger

from .builtins import clear_command, help_command, quit_command
from .command import Command, split_command_args
from .config import ConsoleConfig, settings
from .console import PROMPT, Console, is_pipe
from .context import CancelScope
from .core import setup_logging
from .errors import (
    ConsoleClosedError,
    ConsoleError,
    DuplicateCommandError,
    NoHandlerError,
    PipeDetectionError,
    PromptAborted,
)
from .history import ConsoleHistory
from .line_reader import LineReader

# 라이브러리 로그는 setup_logging() 호출 시에만 활성화
logger.disable("cli_console")

__all__ = [
    # console
    "PROMPT",
    "Console",
    "is_pipe",
    # command
    "Command",
    "split_command_args",
    # builtins
    "clear_command",
    "help_command",
    "quit_command",
    # config
    "ConsoleConfig",
    "settings",
    # context
    "CancelScope",
    # errors
    "ConsoleClosedError",
    "ConsoleError",
    "DuplicateCommandError",
    "NoHandlerError",
    "PipeDetectionError",
    "PromptAborted",
    # line reader
    "ConsoleHistory",
    "LineReader",
    # log
    "setup_logging",
]
