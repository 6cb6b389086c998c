"""Array-based binary max-heap of token entries with slot back-pointers.

Entries are ordered by frequency (higher first) and, on equal frequency, by
first-occurrence rank (earlier first). Each entry's trie leaf records the
entry's current array index in ``heap_slot``, and every swap rewrites the
back-pointers of both swapped entries. This lets a repeated token be
incremented and resifted in O(log n) without searching the heap.
"""

from dataclasses import dataclass

from .errors import EmptyStructure
from .trie import TrieNode


@dataclass
class HeapEntry:
    """A distinct token tracked by the heap.

    Attributes:
        token: The normalized token.
        node: Trie leaf where the token terminates.
        frequency: Current occurrence count (mirrors ``node.frequency``).
        first_occurrence_rank: Order in which the token was first seen.
    """

    token: str
    node: TrieNode
    frequency: int
    first_occurrence_rank: int


def ranks_above(a: HeapEntry, b: HeapEntry) -> bool:
    """Return True if entry ``a`` has strictly higher priority than ``b``."""
    if a.frequency != b.frequency:
        return a.frequency > b.frequency
    return a.first_occurrence_rank < b.first_occurrence_rank


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left_child(i: int) -> int:
    return 2 * i + 1


def _right_child(i: int) -> int:
    return 2 * i + 2


class TokenHeap:
    """Max-heap over :class:`HeapEntry` with trie back-pointers."""

    def __init__(self) -> None:
        self._entries: list[HeapEntry] = []
        self._next_rank = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def _place(self, slot: int, entry: HeapEntry) -> None:
        self._entries[slot] = entry
        entry.node.heap_slot = slot

    def _swap(self, i: int, j: int) -> None:
        a, b = self._entries[i], self._entries[j]
        self._place(i, b)
        self._place(j, a)

    def _sift_up(self, slot: int) -> int:
        entries = self._entries
        while slot > 0:
            parent = _parent(slot)
            if not ranks_above(entries[slot], entries[parent]):
                break
            self._swap(slot, parent)
            slot = parent
        return slot

    def _sift_down(self, slot: int) -> int:
        entries = self._entries
        size = len(entries)
        while True:
            best = slot
            left, right = _left_child(slot), _right_child(slot)
            if left < size and ranks_above(entries[left], entries[best]):
                best = left
            if right < size and ranks_above(entries[right], entries[best]):
                best = right
            if best == slot:
                return slot
            self._swap(slot, best)
            slot = best

    def register_new(self, token: str, node: TrieNode) -> int:
        """Add a newly seen token with frequency 1.

        The entry receives the next first-occurrence rank, so it sorts after
        every existing entry of equal frequency.

        Args:
            token: The normalized token.
            node: The token's trie leaf; its ``heap_slot`` is kept current.

        Returns:
            The slot the entry settled into.
        """
        entry = HeapEntry(
            token=token,
            node=node,
            frequency=1,
            first_occurrence_rank=self._next_rank,
        )
        self._next_rank += 1
        node.frequency = 1
        self._entries.append(entry)
        node.heap_slot = len(self._entries) - 1
        return self._sift_up(node.heap_slot)

    def increment_and_resift(self, slot: int) -> int:
        """Increment the frequency of the entry at ``slot`` and restore order.

        Args:
            slot: Current index of the entry, as recorded in its trie leaf.

        Returns:
            The slot the entry settled into.

        Raises:
            IndexError: If ``slot`` is outside the heap.
        """
        if not 0 <= slot < len(self._entries):
            raise IndexError(f"Heap slot {slot} out of range (size {len(self._entries)})")
        entry = self._entries[slot]
        entry.frequency += 1
        entry.node.frequency = entry.frequency
        return self._sift_up(slot)

    def peek(self) -> HeapEntry:
        """Return the highest-priority entry without removing it."""
        if not self._entries:
            raise EmptyStructure()
        return self._entries[0]

    def extract_max(self) -> HeapEntry:
        """Remove and return the highest-priority entry.

        The extracted entry's trie leaf is marked as unassigned.

        Raises:
            EmptyStructure: If the heap is empty.
        """
        if not self._entries:
            raise EmptyStructure()
        top = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._place(0, last)
            self._sift_down(0)
        top.node.heap_slot = None
        return top

    def is_heap_ordered(self) -> bool:
        """Check the heap property and every back-pointer."""
        for slot, entry in enumerate(self._entries):
            if entry.node.heap_slot != slot:
                return False
            if slot > 0 and ranks_above(entry, self._entries[_parent(slot)]):
                return False
        return True
