"""Group words that are anagrams of each other."""

import sys
from collections import Counter
from itertools import chain

_DEFAULT_WORDS = ("kita", "atik", "tika", "aku", "kia", "makan", "kua")


def is_valid_anagram(s, t):
    """Return True when the lower-case words s and t use the same letters.

    Words of different byte length are never anagrams. Any character
    outside a-z raises ValueError.
    """
    if len(s.encode("utf-8")) != len(t.encode("utf-8")):
        return False
    for ch in chain(s, t):
        if not "a" <= ch <= "z":
            raise ValueError(f"unsupported character {ch!r}: only a-z is allowed")
    return Counter(s) == Counter(t)


def group_anagrams(words):
    """Split words into anagram groups, keeping first-seen order."""
    remaining = list(words)
    groups = []
    while remaining:
        head, *rest = remaining
        group = [head]
        remaining = []
        for word in rest:
            (group if is_valid_anagram(head, word) else remaining).append(word)
        groups.append(group)
    return groups


def _format_groups(groups):
    return "[" + " ".join("[" + " ".join(group) + "]" for group in groups) + "]"


def main(argv=None):
    """Print the anagram groups of the arguments, or of a built-in sample."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(_format_groups(group_anagrams(args or _DEFAULT_WORDS)))
    return 0


if __name__ == "__main__":
    sys.exit(main())