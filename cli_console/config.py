"""설정 관리 모듈"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING

from dotenv import load_dotenv
from rich.console import Console as RichConsole

from .command import Command
from .context import CancelScope

if TYPE_CHECKING:
    from .line_reader import LineReader

# .env 파일 로드
load_dotenv()


class Settings:
    """환경 변수 기반 설정"""

    def __init__(self) -> None:
        self.HISTORY_FILE = Path(
            os.getenv(
                "CLI_CONSOLE_HISTORY_FILE",
                str(Path(tempfile.gettempdir()) / ".console_history"),
            )
        )
        self.LOG_DIR = Path(os.getenv("CLI_CONSOLE_LOG_DIR", "logs"))
        self.LOG_LEVEL = os.getenv("CLI_CONSOLE_LOG_LEVEL", "INFO")


settings = Settings()


@dataclass
class ConsoleConfig:
    """콘솔 생성 설정

    Attributes:
        exit_command: 종료 명령어 (None이면 기본 quit/exit 명령어 사용)
        enable_exit_command: False면 종료 명령어 없이 실행
        context: 부모 취소 범위 (콘솔 수명 범위는 여기서 파생)
        history_file: 히스토리 파일 경로
        welcome_message: 시작 시 출력할 메시지 (파이프 입력이면 출력하지 않음)
        handle_ctrl_c: True면 Ctrl+C가 현재 입력을 중단, False면 현재 줄만 비우고 계속
        stdin: 파이프 감지 및 비대화형 입력에 사용할 스트림 (기본값 sys.stdin)
        output: 출력용 rich Console
        line_reader: 입력기 (None이면 위 설정으로 LineReader 생성)
    """

    exit_command: Command | None = None
    enable_exit_command: bool = True
    context: CancelScope | None = None
    history_file: Path | str | None = None
    welcome_message: str = ""
    handle_ctrl_c: bool = True
    stdin: IO[str] | None = None
    output: RichConsole | None = None
    line_reader: LineReader | None = None
