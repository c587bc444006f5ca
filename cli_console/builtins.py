"""기본 제공 명령어 (help, clear, quit)

콘솔마다 새 Command 객체를 생성하여 콘솔 간에 상태를 공유하지 않는다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .command import Command

if TYPE_CHECKING:
    from .console import Console


def help_view(console: Console) -> str:
    """도움말 문자열 생성"""
    lines = ["Available commands:"]
    for cmd in console.commands:
        if cmd.name and cmd.description:
            lines.append(f"  {cmd.name} - {cmd.description}")
    exit_cmd = console.exit_command
    if exit_cmd is not None:
        lines.append(f"  {exit_cmd.name} - Exit the console")
    return "\n".join(lines)


def _show_help(console: Console, _: str) -> None:
    console.out.print(help_view(console), markup=False, highlight=False)


def _clear_screen(console: Console, _: str) -> None:
    console.out.clear()


def _quit(console: Console, _: str) -> None:
    console.close()


def help_command() -> Command:
    return Command(name="help", description="Show the help", handler=_show_help)


def clear_command() -> Command:
    return Command(
        name="clear",
        description="Clear the screen",
        ignore_pipe=True,
        handler=_clear_screen,
    )


def quit_command() -> Command:
    """기본 종료 명령어"""
    return Command(
        name="quit",
        aliases=["exit"],
        description="Quit the console",
        ignore_pipe=True,
        handler=_quit,
    )


def default_commands() -> list[Command]:
    """콘솔에 미리 등록되는 명령어 목록 (종료 명령어 제외)"""
    return [help_command(), clear_command()]
