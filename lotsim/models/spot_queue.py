"""
입차/출차 대기열로 사용하는 선입선출(FIFO) 큐
"""
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class SpotQueue(Generic[T]):
    """선입선출 대기열 클래스"""

    def __init__(self):
        """빈 대기열 초기화"""
        self._items: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """대기열 맨 뒤에 항목 추가"""
        self._items.append(item)

    def dequeue(self) -> T:
        """
        대기열 맨 앞의 항목을 꺼내 반환합니다.

        Raises:
            IndexError: 대기열이 비어 있는 경우
        """
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """
        대기열 맨 앞의 항목을 제거하지 않고 반환합니다.

        Raises:
            IndexError: 대기열이 비어 있는 경우
        """
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """앞에서부터 순서대로 순회 (대기열은 변경하지 않음)"""
        return iter(list(self._items))
