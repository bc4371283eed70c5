"""
Linked stack, queue and bag built on a shared node chain.

Each structure owns one private NodeChain and differs only in where items are
inserted and removed. Iterators fail fast when their container is mutated; use
snapshot() to walk a copy while changing the container.
"""
from typing import Iterable, List, Optional, TypeVar

from linked_containers.interfaces import Bag, Queue, Stack
from linked_containers.services.chain import ChainIterator, NodeChain

T = TypeVar('T')


class LinkedStack(Stack[T]):
    """A LIFO stack anchored at the top of a node chain.

    Operations: push, pop, peek, is_empty, size.
    Time: O(1).
    """
    __slots__ = ("_chain",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._chain: NodeChain[T] = NodeChain("stack")
        if items is not None:
            self._chain.extend_front(items)

    def push(self, value: T) -> None:
        self._chain.push_front(value)

    def pop(self) -> T:
        return self._chain.pop_front("pop")

    def peek(self) -> T:
        return self._chain.peek_front("peek")

    def is_empty(self) -> bool:
        return self._chain.is_empty()

    def size(self) -> int:
        return self._chain.size()

    def __iter__(self) -> ChainIterator[T]:
        """Iterate from top to bottom, most recently pushed first."""
        return iter(self._chain)

    def snapshot(self) -> List[T]:
        return self._chain.to_list()

    def __repr__(self) -> str:
        return f"LinkedStack({self.snapshot()!r})"


class LinkedQueue(Queue[T]):
    """A FIFO queue: enqueue at the back of the chain, dequeue at the front.

    Operations: enqueue, dequeue, peek, is_empty, size.
    Time: O(1).
    """
    __slots__ = ("_chain",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._chain: NodeChain[T] = NodeChain("queue")
        if items is not None:
            self._chain.extend_back(items)

    def enqueue(self, value: T) -> None:
        # Always link from the back node and advance it
        self._chain.push_back(value)

    def dequeue(self) -> T:
        return self._chain.pop_front("dequeue")

    def peek(self) -> T:
        return self._chain.peek_front("peek")

    def is_empty(self) -> bool:
        return self._chain.is_empty()

    def size(self) -> int:
        return self._chain.size()

    def __iter__(self) -> ChainIterator[T]:
        """Iterate from front to back, oldest remaining item first."""
        return iter(self._chain)

    def snapshot(self) -> List[T]:
        return self._chain.to_list()

    def __repr__(self) -> str:
        return f"LinkedQueue({self.snapshot()!r})"


class LinkedBag(Bag[T]):
    """An insert-only multiset. There is no removal operation.

    Iteration order is unspecified; it happens to be newest first.
    """
    __slots__ = ("_chain",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._chain: NodeChain[T] = NodeChain("bag")
        if items is not None:
            self._chain.extend_front(items)

    def add(self, value: T) -> None:
        self._chain.push_front(value)

    def is_empty(self) -> bool:
        return self._chain.is_empty()

    def size(self) -> int:
        return self._chain.size()

    def __iter__(self) -> ChainIterator[T]:
        return iter(self._chain)

    def snapshot(self) -> List[T]:
        return self._chain.to_list()

    def __repr__(self) -> str:
        return f"LinkedBag({self.snapshot()!r})"
