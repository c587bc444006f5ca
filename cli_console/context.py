"""취소 가능한 수명 범위 (CancelScope)

부모 범위가 취소되면 모든 자식 범위도 함께 취소된다.
취소는 협조적(cooperative)이며 블로킹된 입력 읽기를 강제로 중단하지 않는다.
"""

from __future__ import annotations

import threading
from typing import Callable


class CancelScope:
    """스레드 안전한 취소 신호"""

    def __init__(self, parent: CancelScope | None = None) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []
        self._parent = parent
        self._unlink: Callable[[], None] | None = None
        if parent is not None:
            self._unlink = parent.add_done_callback(self.cancel)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """범위 취소 (여러 번 호출해도 안전)"""
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        # 부모에 남아있는 참조 정리
        if self._unlink is not None:
            self._unlink()
            self._unlink = None

    def wait(self, timeout: float | None = None) -> bool:
        """취소될 때까지 대기. 취소되었으면 True 반환"""
        return self._event.wait(timeout)

    def add_done_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """취소 시 호출될 콜백 등록

        이미 취소된 경우 즉시 호출한다.

        Returns:
            콜백 등록을 해제하는 함수
        """
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return lambda: self._remove_callback(callback)
        callback()
        return lambda: None

    def _remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def child(self) -> CancelScope:
        """이 범위에서 파생된 자식 범위 생성"""
        return CancelScope(parent=self)
