"""프롬프트 히스토리 (스크롤백 + 파일 저장 형식)"""

from typing import IO, Iterable

from loguru import logger
from prompt_toolkit.history import History

HISTORY_LIMIT = 1000


class ConsoleHistory(History):
    """
    콘솔 입력 히스토리

    prompt_toolkit의 History를 상속받아 방향키 탐색 기능 지원
    파일 형식: 한 줄에 한 항목, 오래된 항목부터 기록

    프롬프트 버퍼가 자동으로 기록하는 경로(append_string)는 무시하고,
    콘솔이 정리한 입력만 append_entry로 기록한다.
    """

    def __init__(self, limit: int = HISTORY_LIMIT):
        super().__init__()
        self.limit = limit
        self._entries: list[str] = []

    def load_history_strings(self) -> Iterable[str]:
        """최신 항목부터 반환 (prompt_toolkit 규약)"""
        return list(reversed(self._entries))

    def store_string(self, string: str) -> None:
        self._entries.append(string)
        if len(self._entries) > self.limit:
            del self._entries[: len(self._entries) - self.limit]

    def append_string(self, string: str) -> None:
        """프롬프트 버퍼의 자동 기록 무시"""

    def append_entry(self, string: str) -> None:
        """새 입력 기록 (방향키 탐색 목록에도 반영)"""
        History.append_string(self, string)

    def get_entries(self) -> list[str]:
        """모든 히스토리 항목 반환 (시간순)"""
        return list(self._entries)

    def read_from(self, stream: IO[str]) -> int:
        """스트림에서 히스토리를 읽어 추가. 읽은 항목 수 반환"""
        count = 0
        for line in stream:
            line = line.rstrip("\r\n")
            if not line:
                continue
            self.append_entry(line)
            count += 1
        logger.debug("히스토리 {}건 로드", count)
        return count

    def write_to(self, stream: IO[str]) -> int:
        """히스토리를 스트림에 기록. 기록한 항목 수 반환"""
        for entry in self._entries:
            stream.write(entry + "\n")
        logger.debug("히스토리 {}건 저장", len(self._entries))
        return len(self._entries)
