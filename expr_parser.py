"""Tokenizer and shunting-yard conversion for calculator expressions.

The grammar is deliberately small: decimal literals, the five binary operators
``+ - * / %`` and parentheses. A ``-`` at the start of the input, after an
operator or after ``(`` is read as the sign of the following literal.
"""
import math
import operator
import re
from typing import Callable, List, Literal, NamedTuple, Union

DIGITS = "0123456789"
GLYPHS = {"*": "×", "/": "÷", "-": "−"}
_UNGLYPH = {v: k for k, v in GLYPHS.items()}


class CalcError(ValueError):
    """Base class of all recoverable pipeline failures."""

    message = "Invalid expression"

    def __init__(self, message=None):
        super().__init__(message or self.message)

    @property
    def kind(self):
        return type(self).__name__


class ParseError(CalcError):
    pass


class InvalidCharacter(ParseError):
    message = "Invalid character"


class InvalidNumber(ParseError):
    message = "Invalid number"


class MismatchedParentheses(ParseError):
    message = "Mismatched parentheses"


class Token(NamedTuple):
    kind: Literal["num", "op", "paren"]
    value: Union[float, str]

    def __repr__(self):
        return f"{self.kind}({self.value!r})"


def _remainder(a, b):
    # fmod raises on these instead of returning NaN.
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


class Op(NamedTuple):
    op: str
    prec: int
    assoc: Literal["l"]
    fun: Callable[[float, float], float]

    def __call__(self, a, b):
        return self.fun(a, b)

    def __repr__(self):
        return f"op({self.op!r})"

    def left_first(self, other):
        """True if `self`, already on the stack, binds before incoming `other`."""
        return self.prec > other.prec or self.prec == other.prec and other.assoc == "l"


OP_GROUPS = """
add+l sub-l
mul*l truediv/l fmod%l
""".strip()
OPS = {
    o: Op(o, prec, assoc, getattr(operator, fun) if fun != "fmod" else _remainder)
    for prec, op_groups in enumerate(OP_GROUPS.split("\n"), start=1)
    for [(fun, o, assoc)] in map(
        re.compile(r"^(\w+)(\W+)(\w+)$").findall, op_groups.split()
    )
}


def is_op(ch):
    return ch in OPS


def canonical(text):
    """Map display glyphs back to the characters the tokenizer reads.

    >>> canonical("2×(3−1)÷4")
    '2*(3-1)/4'
    """
    return "".join(_UNGLYPH.get(ch, ch) for ch in text)


def prettify(text):
    """Swap ``* / -`` for their display glyphs.

    >>> prettify("2*(3-1)/4")
    '2×(3−1)÷4'
    """
    return "".join(GLYPHS.get(ch, ch) for ch in text)


def _starts_number(s, i):
    ch = s[i]
    if ch in DIGITS or ch == ".":
        return True
    return ch == "-" and (i == 0 or is_op(s[i - 1]) or s[i - 1] == "(")


def tokenize(text) -> List[Token]:
    """Split `text` into tokens, reading a sign-position ``-`` as part of a literal.

    >>> tokenize("-2*(3.5-1)")
    [num(-2.0), op('*'), paren('('), num(3.5), op('-'), num(1.0), paren(')')]
    """
    s = re.sub(r"\s+", "", canonical(text))
    tokens = []
    i = 0
    while i < len(s):
        ch = s[i]
        if _starts_number(s, i):
            start = i
            if ch == "-":
                i += 1
            has_dot = False
            while i < len(s) and (s[i] in DIGITS or not has_dot and s[i] == "."):
                has_dot = has_dot or s[i] == "."
                i += 1
            literal = s[start:i]
            if literal in ("-", ".", "-."):
                raise InvalidNumber(f"Invalid number {literal!r} at {start}")
            tokens.append(Token("num", float(literal)))
        elif is_op(ch):
            tokens.append(Token("op", ch))
            i += 1
        elif ch in "()":
            tokens.append(Token("paren", ch))
            i += 1
        else:
            raise InvalidCharacter(f"Invalid character {ch!r} at {i}")
    return tokens


def to_postfix(tokens) -> List[Token]:
    """Reorder infix `tokens` into postfix with the shunting-yard algorithm.

    >>> [t.value for t in to_postfix(tokenize("1+2*3-4"))]
    [1.0, 2.0, 3.0, '*', '+', 4.0, '-']
    """
    output = []
    stack = []
    for tok in tokens:
        if tok.kind == "num":
            output.append(tok)
        elif tok.kind == "op":
            o = OPS[tok.value]
            while stack and stack[-1].kind == "op" and OPS[stack[-1].value].left_first(o):
                output.append(stack.pop())
            stack.append(tok)
        elif tok.value == "(":
            stack.append(tok)
        else:
            while stack and stack[-1] != Token("paren", "("):
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses("Unmatched ')'")
            stack.pop()
    while stack:
        tok = stack.pop()
        if tok.kind == "paren":
            raise MismatchedParentheses("Unmatched '('")
        output.append(tok)
    return output
