"""
Unit tests for the linked stack.

Tests verify that:
- Items come back in LIFO order
- pop() and peek() on an empty stack raise EmptyContainerError
- Iteration runs top to bottom without mutating the stack
"""
from unittest import TestCase

from linked_containers import EmptyContainerError, LinkedStack


class LinkedStackTestCase(TestCase):
    """Test push/pop/peek behaviour."""

    def setUp(self):
        self.stack = LinkedStack()

    def test_new_stack_is_empty(self):
        self.assertTrue(self.stack.is_empty())
        self.assertEqual(self.stack.size(), 0)
        self.assertEqual(len(self.stack), 0)

    def test_push_pop_is_lifo(self):
        """push(a); push(b) then pop() returns b, then a."""
        self.stack.push("a")
        self.stack.push("b")

        self.assertEqual(self.stack.pop(), "b")
        self.assertEqual(self.stack.pop(), "a")

        with self.assertRaises(EmptyContainerError):
            self.stack.pop()
        with self.assertRaises(EmptyContainerError):
            self.stack.peek()

    def test_peek_does_not_remove(self):
        self.stack.push(1)
        self.stack.push(2)

        self.assertEqual(self.stack.peek(), 2)
        self.assertEqual(self.stack.peek(), 2)
        self.assertEqual(self.stack.size(), 2)

    def test_empty_error_is_index_error(self):
        """Callers catching IndexError keep working."""
        with self.assertRaises(IndexError):
            self.stack.pop()

    def test_size_tracks_push_and_pop(self):
        for i in range(5):
            self.stack.push(i)
            self.assertEqual(self.stack.size(), i + 1)
        self.stack.pop()
        self.assertEqual(self.stack.size(), 4)
        self.assertFalse(self.stack.is_empty())

    def test_returns_to_empty_after_drain(self):
        self.stack.push("x")
        self.stack.pop()

        self.assertTrue(self.stack.is_empty())
        self.assertEqual(list(self.stack), [])

    def test_none_is_a_valid_item(self):
        self.stack.push(None)

        self.assertFalse(self.stack.is_empty())
        self.assertIsNone(self.stack.pop())
        self.assertTrue(self.stack.is_empty())

    def test_constructor_pushes_items_in_order(self):
        stack = LinkedStack([1, 2, 3])

        self.assertEqual(stack.peek(), 3)
        self.assertEqual(stack.size(), 3)


class LinkedStackIterationTestCase(TestCase):
    """Test iteration order and non-mutation."""

    def test_iterates_top_to_bottom(self):
        stack = LinkedStack()
        for item in ["first", "second", "third"]:
            stack.push(item)

        self.assertEqual(list(stack), ["third", "second", "first"])
        self.assertEqual(stack.snapshot(), ["third", "second", "first"])

    def test_iteration_does_not_mutate(self):
        stack = LinkedStack([1, 2])

        list(stack)
        list(stack)

        self.assertEqual(stack.size(), 2)
        self.assertEqual(stack.pop(), 2)

    def test_iterating_empty_stack_yields_nothing(self):
        iterator = iter(LinkedStack())

        self.assertEqual(next(iterator, "done"), "done")

    def test_drain_order_for_various_sizes(self):
        """N pushes then N pops return items newest first, including N = 0 and N = 1."""
        for n in (0, 1, 2, 10, 1000):
            stack = LinkedStack(range(n))
            drained = []
            while not stack.is_empty():
                drained.append(stack.pop())

            self.assertEqual(drained, list(reversed(range(n))))
            self.assertEqual(stack.size(), 0)

    def test_repr_shows_top_first(self):
        self.assertEqual(repr(LinkedStack([1, 2])), "LinkedStack([2, 1])")
