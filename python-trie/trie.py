import logging
from collections import deque
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        children (dict[str, TrieNode]):
            Mapping from a lowercase character to the next TrieNode.
        is_end (bool):
            True if the path from the root to this node spells a stored word.
    """
    __slots__ = ("children", "is_end")

    def __init__(self):
        self.children = {}
        self.is_end = False


class Trie:
    """
    A case-insensitive trie (prefix tree) supporting insertion, search,
    prefix checks, deletion with node pruning, autocomplete and word counting.

    Every input string is lowercased before it touches the tree, so words
    returned by autocomplete or iteration are always lowercase.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = self._create_node()

    @staticmethod
    def _create_node() -> TrieNode:
        return TrieNode()

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie. Inserting the same word twice is a no-op.

        Args:
            word (str): The word to insert. The empty string marks the root.
        """
        node = self.root
        for ch in word.lower():
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = self._create_node()
                node.children[ch] = nxt
            node = nxt
        node.is_end = True

    def search(self, word: str) -> bool:
        """
        Exact membership test, ignoring case.

        Args:
            word (str): Candidate word.

        Returns:
            bool: True if the word was inserted, False if it is absent
                  or only a prefix of a stored word.
        """
        node = self._traverse(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """
        Check whether a path for `prefix` exists, ending a word or not.

        Args:
            prefix (str): Prefix to look up; the empty prefix always exists.

        Returns:
            bool: True if some stored word extends the prefix.
        """
        return self._traverse(prefix) is not None

    def _traverse(self, text: str) -> Optional[TrieNode]:
        """Follow `text` from the root; None as soon as an edge is missing."""
        node = self.root
        for ch in text.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def delete(self, word: str) -> bool:
        """
        Remove a word, pruning nodes no other word still needs.

        Recurses once per character, so words longer than
        `sys.getrecursionlimit()` raise RecursionError here. Nodes left
        with no children that do not end another word are unlinked on
        the way back up. The root is never removed.

        Args:
            word (str): Word to remove.

        Returns:
            bool: True if the word was stored and is now gone,
                  False if it was absent (the tree is left untouched).
        """
        word = word.lower()

        def _delete(node, idx):
            # returns (deleted, node is now prunable)
            if idx == len(word):
                if not node.is_end:
                    return False, False
                node.is_end = False
                return True, len(node.children) == 0

            ch = word[idx]
            child = node.children.get(ch)
            if child is None:
                return False, False

            deleted, should_prune = _delete(child, idx + 1)

            if not deleted:
                return False, False

            if not should_prune:
                return True, False

            del node.children[ch]
            logger.debug("pruned node %r under %r", ch, word[:idx])

            prune_self = len(node.children) == 0 and not node.is_end
            return True, prune_self

        deleted, _ = _delete(self.root, 0)
        if not deleted:
            logger.debug("delete of absent word %r ignored", word)
        return deleted

    def autocomplete(self, prefix: str) -> list[str]:
        """
        Retrieve all words in the trie that start with a given prefix.

        Words are collected depth-first, following the order in which
        child edges were first created. No ranking is applied.

        Args:
            prefix (str): The prefix to complete.

        Returns:
            list[str]: All stored words beginning with the prefix,
                       or an empty list if no word does.
        """
        node = self._traverse(prefix)
        if node is None:
            return []

        return list(self._walk(node, prefix.lower()))

    @staticmethod
    def _walk(start: TrieNode, prefix: str) -> Iterator[str]:
        """Pre-order walk below `start` with an explicit stack, yielding words."""
        stack = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_end:
                yield path
            # reversed so the first-created edge is popped first
            for ch, nxt in reversed(node.children.items()):
                stack.append((nxt, path + ch))

    def count_words(self) -> int:
        """
        Count the words stored in the trie.

        Visits every node once, breadth-first.

        Returns:
            int: Number of nodes that end a word.
        """
        count = 0
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.is_end:
                count += 1
            queue.extend(node.children.values())
        return count

    # -------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------

    def __iter__(self) -> Iterator[str]:
        """Yield every stored word, in the same order as autocomplete("")."""
        yield from self._walk(self.root, "")

    def __contains__(self, word) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        return self.count_words()


# --- Usage Example ---
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    dictionary = Trie()

    words_to_insert = [
        "apple",
        "application",
        "banana",
        "band",
        "bandwidth",
        "java",
        "javascript",
        "type",
        "typescript",
        "react",
    ]
    for w in words_to_insert:
        dictionary.insert(w)

    print('Search "apple":', dictionary.search("apple"))
    print('Search "app":', dictionary.search("app"))
    print('StartsWith "app":', dictionary.starts_with("app"))

    print('Autocomplete for "ban":', dictionary.autocomplete("ban"))
    print('Autocomplete for "type":', dictionary.autocomplete("type"))

    print('Deleting "band"...')
    dictionary.delete("band")
    print('Search "band":', dictionary.search("band"))
    print('Search "bandwidth":', dictionary.search("bandwidth"))
    print('Autocomplete for "ban":', dictionary.autocomplete("ban"))

    print("Total word count:", dictionary.count_words())
