"""CLI Console - echo 예제"""

import getpass
import sys

from cli_console import Command, Console, split_command_args
from cli_console.core import setup_logging


def _echo(console: Console, line: str) -> None:
    """인자를 공백 하나로 이어서 출력"""
    _, args = split_command_args(line)
    console.out.print(" ".join(args), markup=False, highlight=False)


def main() -> int:
    setup_logging()

    console = Console(
        welcome_message=f"Hello {getpass.getuser()}!",
        handle_ctrl_c=True,
    )
    with console:
        console.register_commands(
            Command(name="echo", description="echo", handler=_echo)
        )
        console.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
