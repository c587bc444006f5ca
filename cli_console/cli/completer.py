"""명령어 자동완성 관련 모듈"""

from typing import Callable, Iterable

from prompt_toolkit.completion import Completer, Completion


class CommandCompleter(Completer):
    """명령어 이름/별칭 자동완성

    - 커서 앞 전체 입력을 후보로 교체
    - 후보 목록은 외부 함수에서 받아서 사용 (느슨한 결합)
    """

    def __init__(
        self,
        candidates: Callable[[str], list[str]],
        describe: Callable[[str], str] | None = None,
    ):
        """
        :param candidates: 입력 문자열을 받아 완성 후보 목록을 반환하는 함수
        :param describe: 후보에 대한 설명을 반환하는 함수 (선택)
        """
        self.candidates = candidates
        self.describe = describe

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor

        for candidate in self.candidates(text):
            yield Completion(
                candidate,
                start_position=-len(text),
                display_meta=self.describe(candidate) if self.describe else "",
            )
