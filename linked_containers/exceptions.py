"""
Exceptions raised by the linked containers.
"""


class ContainerError(Exception):
    """Base exception for container errors."""
    pass


class EmptyContainerError(ContainerError, IndexError):
    """Raised when removing or peeking from a container that holds no items."""
    pass


class ConcurrentModificationError(ContainerError, RuntimeError):
    """Raised when an iterator is advanced after its container was mutated."""
    pass


class ChainIntegrityError(ContainerError):
    """Raised when a node chain's size and links disagree."""
    pass


class IterationExhausted(StopIteration):
    """Raised when an iterator is advanced past its last item."""
    pass
