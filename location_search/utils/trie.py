"""
Prefix Trie for Fast Candidate Pre-filtering

Stores every place name (all levels) in lowercase so a query's first few
characters can be expanded into the set of stored names sharing that prefix.

Example:
    >>> trie = Trie()
    >>> for name in ['pune', 'punjab', 'patna']:
    ...     trie.insert(name)
    >>> sorted(trie.search_prefix('pun'))
    ['pune', 'punjab']
"""
from typing import Dict, Set


class TrieNode:
    __slots__ = ('children', 'is_end')

    def __init__(self):
        self.children: Dict[str, 'TrieNode'] = {}
        self.is_end = False


class Trie:
    """
    Character-per-edge prefix tree.

    Insert: O(L)
    Prefix lookup: O(P) to reach the subtree + O(subtree size) to enumerate
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        """Insert a word. Repeated inserts only re-mark the terminal node."""
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child

        if not node.is_end:
            node.is_end = True
            self._size += 1

    def _find_node(self, prefix: str):
        node = self.root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search_prefix(self, prefix: str) -> Set[str]:
        """
        Return every stored word starting with `prefix`.

        Empty prefix returns all words; an unknown prefix returns an empty set.
        """
        node = self._find_node(prefix)
        if node is None:
            return set()

        words = set()
        # Explicit stack instead of recursion (names can be long)
        stack = [(node, prefix)]
        while stack:
            current, path = stack.pop()
            if current.is_end:
                words.add(path)
            for char, child in current.children.items():
                stack.append((child, path + char))

        return words

    def __contains__(self, word: str) -> bool:
        node = self._find_node(word)
        return node is not None and node.is_end

    def __len__(self) -> int:
        return self._size
