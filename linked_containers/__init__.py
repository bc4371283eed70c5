"""
Generic linked containers: a LIFO stack, a FIFO queue and an insert-only bag,
each backed by a private singly linked node chain.
"""
from linked_containers.exceptions import (
    ChainIntegrityError,
    ConcurrentModificationError,
    ContainerError,
    EmptyContainerError,
    IterationExhausted,
)
from linked_containers.services.structures import LinkedBag, LinkedQueue, LinkedStack

__all__ = [
    "LinkedStack",
    "LinkedQueue",
    "LinkedBag",
    "ContainerError",
    "EmptyContainerError",
    "IterationExhausted",
    "ConcurrentModificationError",
    "ChainIntegrityError",
]
