"""
Whitespace tokenizer for spell strings.
"""


def tokenize(text: str) -> list[str]:
    """Split a spell string on runs of whitespace.

    No quoting, escaping or punctuation stripping is applied, and the
    tokens keep their original case.

    Example:
        >>> tokenize("  Ure\tignis   magno ")
        ['Ure', 'ignis', 'magno']
        >>> tokenize("   ")
        []
    """
    return text.split()
