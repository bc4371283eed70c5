"""
Abstract contracts for the linked containers.
"""
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

T = TypeVar('T')


class Container(ABC, Generic[T]):
    """Size, emptiness and iteration shared by every container."""
    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.size()


class Stack(Container[T]):
    """LIFO contract: push, pop and peek at the top."""
    __slots__ = ()

    @abstractmethod
    def push(self, item: T) -> None:
        raise NotImplementedError

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the most recently pushed item."""
        raise NotImplementedError

    @abstractmethod
    def peek(self) -> T:
        """Return the most recently pushed item without removing it."""
        raise NotImplementedError


class Queue(Container[T]):
    """FIFO contract: enqueue at the back, dequeue at the front."""
    __slots__ = ()

    @abstractmethod
    def enqueue(self, item: T) -> None:
        raise NotImplementedError

    @abstractmethod
    def dequeue(self) -> T:
        """Remove and return the least recently enqueued item."""
        raise NotImplementedError


class Bag(Container[T]):
    """Unordered, insert-only collection."""
    __slots__ = ()

    @abstractmethod
    def add(self, item: T) -> None:
        raise NotImplementedError
