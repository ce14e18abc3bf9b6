"""Extract the text enclosed by the first pair of round brackets."""

import sys

OPEN_BRACKET = "("
CLOSE_BRACKET = ")"

_DEFAULT_INPUTS = (")(ibit", "bibi)t")


def find_first_string_in_bracket(text):
    """Return the text between the first "(" and the first ")".

    An empty string is returned when either bracket is missing or the
    first closing bracket comes before the first opening one.
    """
    open_idx = text.find(OPEN_BRACKET)
    close_idx = text.find(CLOSE_BRACKET)
    if 0 <= open_idx < close_idx:
        return text[open_idx + 1 : close_idx]
    return ""


def main(argv=None):
    """Print the bracketed text of each argument, or of a built-in sample."""
    args = sys.argv[1:] if argv is None else list(argv)
    for text in args or _DEFAULT_INPUTS:
        print(find_first_string_in_bracket(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())