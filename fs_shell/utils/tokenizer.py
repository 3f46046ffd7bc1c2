"""Shell-like splitting of a single input line.

Whitespace outside quotes separates tokens. Single and double quotes group
words and disable each other while open. A backslash takes the next character
literally, inside quotes too. Empty tokens are never produced, so ``cmd ""``
splits the same as ``cmd``; unterminated quotes are accepted as-is.
"""

from __future__ import annotations


def split_quoted(line: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    in_single = in_double = escaped = False

    for ch in line:
        if escaped:
            current.append(ch)
            escaped = False
            continue
        if ch == "\\":
            escaped = True
            continue
        if ch == "'" and not in_double:
            in_single = not in_single
            continue
        if ch == '"' and not in_single:
            in_double = not in_double
            continue
        if ch.isspace() and not in_single and not in_double:
            if current:
                tokens.append("".join(current))
                current.clear()
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))
    return tokens
