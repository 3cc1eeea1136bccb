"""Acceptance rules for single-character edits of the expression buffer.

Each rule looks only at the last non-blank character of the buffer and the
proposed character, so a rejected edit never needs the parser. The rules are
stricter than the tokenizer: two operator characters are never adjacent, even
where the second would read as a sign.
"""
import re

from expr_parser import DIGITS, is_op

NUMBER_CHARS = frozenset(DIGITS + ".")
_SEPARATORS = re.compile(r"[+\-*/()]")


def last_char(buffer):
    return buffer.strip()[-1:]


def trailing_number(buffer):
    """The text after the last operator or parenthesis.

    >>> trailing_number("12+3.5")
    '3.5'
    """
    return _SEPARATORS.split(buffer)[-1]


def paren_counts(buffer):
    return buffer.count("("), buffer.count(")")


def can_append(buffer, candidate):
    """Whether `candidate` may be appended to `buffer`.

    >>> can_append("0", "*"), can_append("0", "-"), can_append("2*", "*")
    (False, True, False)
    """
    last = last_char(buffer)
    if buffer == "0" and is_op(candidate) and candidate != "-":
        return False
    if is_op(last) and is_op(candidate):
        return False
    if candidate == "." and "." in trailing_number(buffer):
        return False
    if candidate == "%" and is_op(last):
        return False
    if candidate == "(" and last in NUMBER_CHARS:
        return False
    if candidate == ")" and (is_op(last) or last == "("):
        return False
    return True


def paren_entry(buffer):
    """What the single parenthesis key appends to `buffer`.

    Closes an open group when one is pending and the buffer ends in an
    operand; otherwise opens one, multiplying implicitly after an operand.

    >>> paren_entry("(2+3"), paren_entry("3"), paren_entry("3+")
    (')', '*(', '(')
    """
    last = last_char(buffer)
    opens, closes = paren_counts(buffer)
    if opens > closes and not is_op(last) and last != "(":
        return ")"
    if last in NUMBER_CHARS or last == ")":
        return "*("
    return "("
