"""String exercises: bracket balance, redundant parentheses, palindromes, subsequences."""

from __future__ import annotations

_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPERATORS = frozenset("+-*/")


def is_balanced(text: str) -> bool:
    """Tell whether the brackets ``()[]{}`` in ``text`` are properly nested."""
    stack: list[str] = []
    for ch in text:
        if ch in "([{":
            stack.append(ch)
        elif ch in _CLOSING:
            if not stack or stack[-1] != _CLOSING[ch]:
                return False
            stack.pop()
    return not stack


def has_redundant_parentheses(expression: str) -> bool:
    """Tell whether some pair of parentheses encloses no operator."""
    stack: list[str] = []
    for ch in expression:
        if ch != ")":
            stack.append(ch)
            continue
        operator_found = False
        while stack and stack[-1] != "(":
            if stack.pop() in _OPERATORS:
                operator_found = True
        if not stack:
            raise ValueError("unmatched ')' in expression")
        stack.pop()
        if not operator_found:
            return True
    return False


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def is_subsequence(text: str, pattern: str) -> bool:
    """Tell whether ``pattern`` can be obtained from ``text`` by deleting characters."""
    remaining = iter(text)
    return all(ch in remaining for ch in pattern)