"""Stack-machine evaluation of postfix token lists."""
import math

from expr_parser import OPS, CalcError


class EvalError(CalcError):
    pass


class InvalidExpression(EvalError):
    pass


class DivisionByZero(EvalError, ZeroDivisionError):
    message = "Division by zero"


class InvalidResult(EvalError):
    message = "Invalid result"


def evaluate(postfix) -> float:
    """Evaluate `postfix`, applying each operator as ``a OP b`` to the top two values.

    >>> from expr_parser import tokenize, to_postfix
    >>> evaluate(to_postfix(tokenize("(2+3)*4-10/4")))
    17.5
    >>> evaluate(to_postfix(tokenize("-7%3")))
    -1.0
    """
    stack = []
    for tok in postfix:
        if tok.kind == "num":
            stack.append(tok.value)
            continue
        if tok.kind != "op":
            raise InvalidExpression(f"Unexpected {tok!r} in postfix input")
        if len(stack) < 2:
            raise InvalidExpression(f"Missing operand for {tok.value!r}")
        b = stack.pop()
        a = stack.pop()
        if tok.value == "/" and b == 0:
            raise DivisionByZero()
        stack.append(OPS[tok.value](a, b))
    if len(stack) != 1:
        raise InvalidExpression(f"Expected one value, {len(stack)} left on the stack")
    (ans,) = stack
    if not math.isfinite(ans):
        raise InvalidResult(f"Invalid result {ans!r}")
    return ans + 0.0  # -0.0 -> 0.0
