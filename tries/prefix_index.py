"""
Prefix index (character-per-edge trie) for alphabetic auto-suggest.

This module stores lowercase ASCII words in a standard trie and answers
"which words start with this prefix" queries in sorted order.
Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts
  (`children=None` until the first child is added).
- **Total API:** No public method raises for any string input. Empty,
  whitespace-only or non-matching inputs produce a no-op insert or an empty
  result.
- **Incremental count:** `word_count` is updated on every newly terminal node,
  so `count()` is O(1).
- **Iterative traversals:** Enumeration is an iterative DFS (no recursion).


Classes
-------
TrieNode
    Minimal node holding `children` (dict[str, TrieNode] or None) and `is_terminal`.
PrefixIndex
    Public API for insert, query, count, plus membership and structural stats.


Normalization
-------------
- Words and prefixes are trimmed of space, tab, newline and carriage return,
  then ASCII-lowercased (`normalize`).
- On insert only, characters outside `a-z` are skipped while walking, so
  "Ice-Cream" is stored as "icecream". Queries are not stripped: a non-letter
  in a prefix never matches an edge and yields no suggestions.
- The empty string is never stored; `root.is_terminal` stays False.


Complexity (typical)
--------------------
- insert: O(L)
- query: O(L + K * M + K log K), K results of average length M
- count: O(1)
"""

import string

_TRIM_CHARS = " \t\n\r"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_LETTERS = frozenset(string.ascii_lowercase)


def normalize(raw):
  """Trim surrounding whitespace and lowercase ASCII letters.

  Only space, tab, newline and carriage return are trimmed. Non-ASCII
  characters are left untouched.
  """
  return raw.strip(_TRIM_CHARS).translate(_ASCII_LOWER)


def _letters_only(word):
  """Normalize `word` and drop every character that is not `a-z`."""
  return "".join(ch for ch in normalize(word) if ch in _LETTERS)


def has_letters(word):
  """True if `word` would store anything, i.e. it holds at least one `a-z`."""
  return any(ch in _LETTERS for ch in normalize(word))


class TrieNode:
  __slots__ = ("children", "is_terminal")

  def __init__(self):
    self.children = None
    self.is_terminal = False


class PrefixIndex:
  __slots__ = ("root", "word_count")

  def __init__(self, words=None):
    self.root = TrieNode()
    self.word_count = 0
    if words is not None:
      self.batch_insert(words)

  def insert(self, word):
    """Insert a single word into the index.

    Parameters
    ----------
    word : str
        Raw word. Trimmed, lowercased and stripped of non-letters before
        storage.

    Notes
    -----
    - A word with no letters left after normalization is ignored.
    - Re-inserting a stored word leaves `word_count` unchanged.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(word).
    """
    word = _letters_only(word)
    if not word:
      return

    node = self.root
    for ch in word:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = TrieNode()
        if children is None:
          node.children = {ch: nxt}
        else:
          children[ch] = nxt
      node = nxt

    if not node.is_terminal:
      node.is_terminal = True
      self.word_count += 1

  def batch_insert(self, words):
    """Bulk-insert many words using LCP reuse.

    Parameters
    ----------
    words : Iterable[str]
        Raw words, normalized exactly as in `insert`.

    Returns
    -------
    int
        Number of words that were not stored before.

    Notes
    -----
    Words are letter-stripped, deduplicated and sorted first. Each word then
    resumes from the Longest Common Prefix (LCP) with the previous one
    instead of re-walking from the root.
    """
    prepared = sorted({w for w in (_letters_only(raw) for raw in words) if w})

    added = 0
    prev = ""
    path = [self.root]

    for w in prepared:
      lp, lw = len(prev), len(w)
      i = 0
      while i < lp and i < lw and prev[i] == w[i]:
        i += 1

      path = path[:i + 1]
      node = path[-1]

      for ch in w[i:]:
        children = node.children
        nxt = None if children is None else children.get(ch)
        if nxt is None:
          nxt = TrieNode()
          if children is None:
            node.children = {ch: nxt}
          else:
            children[ch] = nxt
        path.append(nxt)
        node = nxt

      if not node.is_terminal:
        node.is_terminal = True
        added += 1
      prev = w

    self.word_count += added
    return added

  def prefix_search(self, prefix):
    """Return the match point for `prefix`, or None if the path is missing.

    An empty (or whitespace-only) prefix matches the root.
    """
    node = self.root
    for ch in normalize(prefix):
      node = None if node.children is None else node.children.get(ch)
      if node is None:
        return None
    return node

  def search(self, word):
    """Return the terminal node for `word` if stored, else None."""
    node = self.prefix_search(word)
    return node if node is not None and node.is_terminal else None

  def enumerate_prefix(self, prefix, k=None):
    """Yield stored words that start with `prefix` using an iterative DFS.

    Parameters
    ----------
    prefix : str
        Prefix to enumerate from. Use "" to export the whole index.
    k : int | None, default=None
        If None, yield all matches; otherwise stop after `k` matches.

    Yields
    ------
    str
        Matching words in traversal order (child insertion order), not
        sorted. Use `query` for lexicographic output.
    """
    node = self.prefix_search(prefix)
    if node is None or (k is not None and k <= 0):
      return

    yielded = 0
    buf = list(normalize(prefix))

    def child_iter(n):
      if not n.children:
        return iter(())
      return iter(n.children.keys())

    if node.is_terminal:
      yield "".join(buf)
      yielded += 1
      if k is not None and yielded >= k:
        return

    stack = [(node, child_iter(node), len(buf))]

    while stack:
      n, it, depth = stack[-1]
      ch = next(it, None)
      if ch is None:
        stack.pop()
        del buf[depth:]
        continue

      child = n.children[ch]
      del buf[depth:]
      buf.append(ch)
      if child.is_terminal:
        yield "".join(buf)
        yielded += 1
        if k is not None and yielded >= k:
          return
      stack.append((child, child_iter(child), len(buf)))

  def query(self, prefix):
    """Return every stored word starting with `prefix`, sorted ascending.

    A prefix with no matching path (including one containing non-letters)
    returns an empty list.
    """
    return sorted(self.enumerate_prefix(prefix))

  def count(self):
    return self.word_count

  def __len__(self):
    return self.word_count

  def __contains__(self, word):
    return self.search(word) is not None

  def iter_nodes(self):
    """Yield every node, root first, in depth-first order."""
    stack = [self.root]
    while stack:
      node = stack.pop()
      yield node
      if node.children:
        stack.extend(node.children.values())

  def count_nodes(self, get_avg_branch_factor=False):
    """Total node count (root included), or mean out-degree of internal nodes.

    An index with no words has a single node and a branching factor of 0.0.
    """
    degrees = []
    total = 0
    for node in self.iter_nodes():
      total += 1
      if node.children:
        degrees.append(len(node.children))
    if get_avg_branch_factor:
      return sum(degrees) / len(degrees) if degrees else 0.0
    return total
