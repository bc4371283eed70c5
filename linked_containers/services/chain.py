"""
Singly linked node chain shared by the stack, queue and bag.

Each container owns one NodeChain and only decides where items go in and come
out: the stack and bag insert at the head, the queue appends at the tail, and
removal always happens at the head. Every operation except the integrity check
is O(1).

Iterators are fail-fast views rather than copies. A ChainIterator remembers the
chain's version when it is created, and any later insertion or removal makes
it raise ConcurrentModificationError on the next advance.
"""
import logging
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from linked_containers import settings
from linked_containers.exceptions import (
    ChainIntegrityError,
    ConcurrentModificationError,
    EmptyContainerError,
    IterationExhausted,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Node(Generic[T]):
    """One link of the chain: an item and the node after it."""
    __slots__ = ("item", "next")

    def __init__(self, item: T, next_node: "Optional[Node[T]]" = None) -> None:
        self.item: T = item
        self.next: Optional[Node[T]] = next_node

    def __repr__(self) -> str:
        return f"Node({self.item!r})"


class NodeChain(Generic[T]):
    """A singly linked chain with head and tail entry points.

    Operations: push_front, push_back, pop_front, peek_front, is_empty, clear.
    Time: O(1), except check_invariants which walks the chain.
    """
    __slots__ = ("_head", "_tail", "_size", "_version", "_label")

    def __init__(self, label: str = "chain") -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size: int = 0
        self._version: int = 0  # bumped on every mutation
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    @property
    def version(self) -> int:
        return self._version

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        return self._tail

    def push_front(self, item: T) -> None:
        node = Node(item, self._head)
        if self._tail is None:
            self._tail = node
        self._head = node
        self._size += 1
        self._mutated()

    def push_back(self, item: T) -> None:
        node = Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        self._mutated()

    def pop_front(self, operation: str = "pop") -> T:
        if self.is_empty():
            logger.debug(f"{operation} from empty {self._label}")
            raise EmptyContainerError(f"{operation} from empty {self._label}")
        node = self._head
        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        self._mutated()
        return node.item

    def peek_front(self, operation: str = "peek") -> T:
        if self.is_empty():
            logger.debug(f"{operation} from empty {self._label}")
            raise EmptyContainerError(f"{operation} from empty {self._label}")
        return self._head.item

    def extend_front(self, items: Iterable[T]) -> None:
        for item in items:
            self.push_front(item)

    def extend_back(self, items: Iterable[T]) -> None:
        for item in items:
            self.push_back(item)

    def clear(self) -> None:
        # Unlink node by node so long chains are released without deep recursion
        node = self._head
        while node is not None:
            node.next, node = None, node.next
        self._head = None
        self._tail = None
        self._size = 0
        self._mutated()

    def is_empty(self) -> bool:
        return self._size == 0 and self._head is None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> "ChainIterator[T]":
        return ChainIterator(self)

    def to_list(self) -> list:
        result = []
        node = self._head
        while node is not None:
            result.append(node.item)
            node = node.next
        return result

    def check_invariants(self) -> None:
        """
        Verify that the size counter and the links describe the same chain.

        Raises:
            ChainIntegrityError: if the count of reachable nodes differs from
                the size, if emptiness of the entry points disagrees with the
                size, or if the tail is not the last reachable node.
        """
        count = 0
        last = None
        node = self._head
        while node is not None:
            count += 1
            if count > self._size:
                break
            last = node
            node = node.next

        problem = None
        if count > self._size:
            problem = f"size is {self._size} but more nodes are reachable"
        elif count < self._size:
            problem = f"size is {self._size} but only {count} node(s) are reachable"
        elif (self._size == 0) != (self._head is None and self._tail is None):
            problem = f"size is {self._size} but head/tail emptiness disagrees"
        elif last is not self._tail:
            problem = "tail is not the last reachable node"

        if problem:
            logger.error(f"Integrity check failed for {self._label}: {problem}")
            raise ChainIntegrityError(f"{self._label}: {problem}")

    def _mutated(self) -> None:
        self._version += 1
        if settings.CHECK_INVARIANTS:
            self.check_invariants()


class ChainIterator(Generic[T]):
    """Forward, single-pass iterator over a NodeChain.

    Starts at the head the chain had when the iterator was created. It cannot
    be restarted; ask the container for a new iterator instead.
    """
    __slots__ = ("_chain", "_current", "_expected_version")

    def __init__(self, chain: NodeChain[T]) -> None:
        self._chain = chain
        self._current: Optional[Node[T]] = chain.head
        self._expected_version = chain.version

    def __iter__(self) -> Iterator[T]:
        return self

    def has_next(self) -> bool:
        return self._current is not None

    def __next__(self) -> T:
        if self._chain.version != self._expected_version:
            logger.debug(f"{self._chain.label} was modified during iteration")
            raise ConcurrentModificationError(f"{self._chain.label} was modified during iteration")
        if self._current is None:
            raise IterationExhausted()
        item = self._current.item
        self._current = self._current.next
        return item
