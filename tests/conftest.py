from __future__ import annotations

import io
import os
from pathlib import Path

import pytest
from rich.console import Console as RichConsole

from cli_console import Console
from cli_console.config import settings
from tests.e2e_helpers import build_cli_env, make_session_log, spawn_cli
from tests.helpers import ScriptedLineReader


@pytest.fixture(autouse=True)
def isolated_history(tmp_path: Path, monkeypatch) -> Path:
    """기본 히스토리 파일을 임시 디렉토리로 격리"""
    history_file = tmp_path / ".console_history"
    monkeypatch.setattr(settings, "HISTORY_FILE", history_file)
    return history_file


@pytest.fixture
def out() -> RichConsole:
    return RichConsole(record=True, width=120)


@pytest.fixture
def make_console(out: RichConsole):
    """테스트용 콘솔 생성 (터미널 없이 동작)"""
    created: list[Console] = []

    def factory(**options) -> Console:
        options.setdefault("output", out)
        options.setdefault("stdin", io.StringIO())
        options.setdefault("line_reader", ScriptedLineReader())
        console = Console(**options)
        created.append(console)
        return console

    yield factory
    for console in created:
        console.close()


@pytest.fixture
def pipe_stdin():
    """named pipe로 연결된 표준 입력 대체"""
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r")
    yield stream
    stream.close()
    os.close(write_fd)


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def e2e_env(tmp_path: Path) -> dict[str, str]:
    return build_cli_env(tmp_path)


@pytest.fixture
def session_log(tmp_path: Path):
    log = make_session_log(tmp_path)
    yield log
    log.close()


@pytest.fixture
def cli_process(repo_root: Path, e2e_env: dict[str, str], session_log):
    child = spawn_cli(env=e2e_env, cwd=repo_root, logfile=session_log.tee)
    yield child, session_log
    if child.isalive():
        # 테스트 종료 시 프로세스를 정리한다.
        child.terminate(force=True)
