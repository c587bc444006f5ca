"""Command 매칭/실행 테스트"""

import pytest

from cli_console import Command, NoHandlerError, split_command_args


def _echo_command(**kwargs) -> Command:
    return Command(name="echo", description="echo", **kwargs)


def test_match_echo_command():
    cmd = _echo_command()
    assert cmd.match("echo")
    assert cmd.match("echo test")


def test_mismatch_echo_command():
    cmd = _echo_command()
    assert not cmd.match("foo")
    assert not cmd.match("foo test")


def test_match_requires_whole_token():
    cmd = _echo_command()
    assert not cmd.match("echoo")
    assert not cmd.match("ech")
    assert not cmd.match("ECHO")


def test_match_splits_on_whitespace_run():
    cmd = _echo_command()
    assert cmd.match("echo   a\tb")
    assert cmd.match("echo\ta")


def test_match_leading_whitespace_yields_empty_token():
    cmd = _echo_command()
    assert not cmd.match(" echo")
    assert not cmd.match("\techo a")
    assert cmd.match("echo\t a")


def test_match_alias():
    cmd = Command(name="quit", aliases=["exit", "q"])
    assert cmd.match("exit")
    assert cmd.match("q now")
    assert not cmd.match("qq")


def test_custom_matcher_used_as_fallback():
    cmd = _echo_command(matcher=lambda line: line.startswith("!"))
    assert cmd.match("!ls")
    assert cmd.match("echo")
    assert not cmd.match("ls")


def test_custom_matcher_not_called_when_default_matches():
    calls = []

    def matcher(line: str) -> bool:
        calls.append(line)
        return False

    cmd = _echo_command(matcher=matcher)
    assert cmd.match("echo hi")
    assert calls == []

    assert not cmd.match("other")
    assert calls == ["other"]


def test_ignore_default_matcher():
    cmd = _echo_command(
        ignore_default_matcher=True,
        matcher=lambda line: line.startswith("say "),
    )
    assert not cmd.match("echo hi")
    assert cmd.match("say hi")


def test_ignore_default_matcher_without_matcher_never_matches():
    cmd = _echo_command(ignore_default_matcher=True)
    assert not cmd.match("echo")


def test_handle_without_handler():
    cmd = _echo_command()
    with pytest.raises(NoHandlerError) as exc_info:
        cmd.handle("echo")
    assert exc_info.value.name == "echo"
    assert str(exc_info.value) == "command has no handler"


def test_handle_without_handler_even_if_not_matching():
    cmd = _echo_command()
    with pytest.raises(NoHandlerError):
        cmd.handle("something else")


def test_handle_without_console_passes_none():
    received = []
    cmd = _echo_command(handler=lambda console, line: received.append((console, line)))
    cmd.handle("echo a b")
    assert received == [(None, "echo a b")]


def test_handle_returns_handler_result():
    cmd = _echo_command(handler=lambda console, line: line.upper())
    assert cmd.handle("echo x") == "ECHO X"


def test_handle_propagates_handler_error():
    def handler(console, line):
        raise ValueError("bad input")

    cmd = _echo_command(handler=handler)
    with pytest.raises(ValueError, match="bad input"):
        cmd.handle("echo")


def test_ignore_pipe_without_console_still_runs():
    received = []
    cmd = _echo_command(ignore_pipe=True, handler=lambda c, line: received.append(line))
    cmd.handle("echo")
    assert received == ["echo"]


def test_identifiers():
    cmd = Command(name="quit", aliases=["exit"])
    assert cmd.identifiers == {"quit", "exit"}


@pytest.mark.parametrize(
    "line, expected",
    [
        ("echo", ("echo", [])),
        ("echo a b", ("echo", ["a", "b"])),
        ("echo  a   b ", ("echo", ["a", "b"])),
        ('echo "a b"', ("echo", ['"a', 'b"'])),
        ("", ("", [])),
        ("   ", ("", [])),
    ],
)
def test_split_command_args(line, expected):
    assert split_command_args(line) == expected
