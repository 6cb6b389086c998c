"""Trie over the 36-symbol token alphabet.

Each distinct token ends at exactly one leaf node. Leaves carry the token's
frequency and the index of its entry in the priority heap, so a repeated
token can be located in the heap without scanning it.
"""

from .errors import InvalidSymbol

ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
ALPHABET_SIZE = len(ALPHABET)

_SYMBOL_INDEX = {symbol: i for i, symbol in enumerate(ALPHABET)}


def symbol_index(symbol: str) -> int:
    """Map an alphabet symbol to its child slot.

    Letters occupy slots 0-25 and digits follow in slots 26-35.

    Raises:
        KeyError: If the symbol is not part of the alphabet.
    """
    return _SYMBOL_INDEX[symbol]


class TrieNode:
    """One character position along a token's path.

    Attributes:
        children: Child slots indexed by symbol, or None until the first child is added.
        is_leaf: True once some token has terminated at this node.
        frequency: Occurrences of the token ending here (valid only for leaves).
        heap_slot: Current index of the token's heap entry, or None if unassigned.
    """

    __slots__ = ("children", "is_leaf", "frequency", "heap_slot")

    def __init__(self) -> None:
        self.children: list["TrieNode | None"] | None = None
        self.is_leaf: bool = False
        self.frequency: int = 0
        self.heap_slot: int | None = None

    def child(self, slot: int) -> "TrieNode | None":
        """Return the child at a symbol slot, if present."""
        if self.children is None:
            return None
        return self.children[slot]

    def get_or_create_child(self, slot: int) -> "TrieNode":
        """Return the child at a symbol slot, creating it if needed."""
        if self.children is None:
            self.children = [None] * ALPHABET_SIZE
        node = self.children[slot]
        if node is None:
            node = TrieNode()
            self.children[slot] = node
        return node


class TokenTrie:
    """Trie mapping normalized tokens to their leaf nodes.

    The trie performs no normalization. Every token must consist only of
    ``a-z`` and ``0-9``; anything else raises :class:`InvalidSymbol`.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self.node_count = 1

    def _encode(self, token: str) -> list[int]:
        """Translate a token into child slots, validating every symbol first."""
        slots = []
        for position, symbol in enumerate(token):
            try:
                slots.append(symbol_index(symbol))
            except KeyError:
                raise InvalidSymbol(token, symbol, position) from None
        return slots

    def lookup_or_create(self, token: str) -> TrieNode:
        """Return the terminal node for a token, creating its path as needed.

        The token is validated in full before any node is created, so a
        rejected token leaves the trie unchanged.

        Args:
            token: Normalized token.

        Returns:
            The node where the token terminates.

        Raises:
            InvalidSymbol: If the token contains a character outside the alphabet.
        """
        node = self.root
        for slot in self._encode(token):
            if node.child(slot) is None:
                self.node_count += 1
            node = node.get_or_create_child(slot)
        return node

    def find(self, token: str) -> TrieNode | None:
        """Return the leaf for a token, or None if it was never inserted."""
        node = self.root
        for slot in self._encode(token):
            next_node = node.child(slot)
            if next_node is None:
                return None
            node = next_node
        return node if node.is_leaf else None

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        try:
            return self.find(token) is not None
        except InvalidSymbol:
            return False
