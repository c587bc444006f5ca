"""명령어 정의 및 매칭"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from .errors import NoHandlerError

if TYPE_CHECKING:
    from .console import Console

Matcher = Callable[[str], bool]
Handler = Callable[["Console | None", str], Any]


def split_command_args(line: str) -> tuple[str, list[str]]:
    """입력을 (명령어, 인자 목록)으로 분리

    공백 기준 단순 분리이며 따옴표나 이스케이프는 해석하지 않는다.
    """
    parts = line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


@dataclass(eq=False)
class Command:
    """콘솔에 등록되는 명령어

    Attributes:
        name: 명령어 이름 (필수, 콘솔 내에서 고유)
        aliases: 대체 이름 목록
        description: 도움말 설명 (비어있으면 도움말에서 제외)
        ignore_pipe: True면 입력이 파이프일 때 핸들러를 실행하지 않음
        matcher: 사용자 정의 매칭 함수 (기본 매칭 실패 시 또는 ignore_default_matcher일 때 사용)
        ignore_default_matcher: True면 이름/별칭 매칭을 건너뛰고 matcher만 사용
        handler: handler(console, line) 형태의 콜백
        console: 등록된 콘솔 (등록 시 설정)
    """

    name: str
    aliases: list[str] = field(default_factory=list)
    description: str = ""
    ignore_pipe: bool = False
    matcher: Matcher | None = None
    ignore_default_matcher: bool = False
    handler: Handler | None = None
    console: Console | None = field(default=None, repr=False)

    @property
    def identifiers(self) -> set[str]:
        """이름과 별칭의 합집합"""
        return {self.name, *self.aliases}

    def _default_match(self, line: str) -> bool:
        # 첫 공백 구간에서만 분리 (앞쪽 공백은 빈 토큰이 됨)
        token = re.split(r"\s+", line, maxsplit=1)[0]
        return token == self.name or token in self.aliases

    def match(self, line: str) -> bool:
        """입력이 이 명령어에 해당하는지 확인

        기본 매칭이 성공하면 사용자 정의 matcher는 호출하지 않는다.
        """
        if not self.ignore_default_matcher and self._default_match(line):
            return True
        if self.matcher is not None:
            return bool(self.matcher(line))
        return False

    def handle(self, line: str) -> Any:
        """핸들러 실행. 핸들러 반환값을 그대로 돌려준다 (콘솔은 None이 아니면 출력)

        Raises:
            NoHandlerError: 핸들러가 설정되지 않은 경우
        """
        if self.ignore_pipe and self.console is not None and self.console.is_pipe_input:
            return None
        if self.handler is None:
            raise NoHandlerError(self.name)
        return self.handler(self.console, line)
