"""The calculator state: one expression buffer, edited a key at a time.

Every operation returns a `Display`, the pair of strings a front end shows:
the expression with display glyphs and the current result text.
"""
import logging
import time
from typing import NamedTuple, Optional

from calc_config import DEBOUNCE_S, ERROR_TEXT, NO_VALUE, PRECISION
from edits import NUMBER_CHARS, can_append, paren_counts, paren_entry
from expr_parser import CalcError, canonical, prettify, to_postfix, tokenize
from numfmt import format_number
from rpn import evaluate

logger = logging.getLogger(__name__)

KEYS = frozenset("0123456789.+-*/%()")


class Result(NamedTuple):
    value: Optional[float] = None
    error: Optional[CalcError] = None

    @property
    def ok(self):
        return self.error is None


class Display(NamedTuple):
    expression: str
    result: str


def compute(text) -> Result:
    """Run the whole pipeline on `text`, returning failures instead of raising.

    >>> compute("12+5")
    Result(value=17.0, error=None)
    >>> compute("5/0").error.kind
    'DivisionByZero'
    """
    try:
        return Result(evaluate(to_postfix(tokenize(text))))
    except CalcError as e:
        return Result(error=e)


class Debouncer:
    """Runs the latest of a burst of requests once `wait` seconds pass without a new one.

    Nothing runs in the background: the owner calls `poll` from its own loop.
    """

    def __init__(self, wait=DEBOUNCE_S, clock=time.monotonic):
        self.wait = wait
        self._clock = clock
        self._seq = 0
        self._pending = None  # (request id, due time, callback)

    @property
    def pending(self):
        return self._pending is not None

    def request(self, fn):
        self._seq += 1
        self._pending = (self._seq, self._clock() + self.wait, fn)
        return self._seq

    def cancel(self):
        self._pending = None

    def poll(self):
        if self._pending is None or self._clock() < self._pending[1]:
            return False
        return self.flush()

    def flush(self):
        if self._pending is None:
            return False
        _, _, fn = self._pending
        self._pending = None
        fn()
        return True


class Calculator:
    def __init__(self, precision=PRECISION, debouncer: Optional[Debouncer] = None):
        self.precision = precision
        self.debouncer = debouncer
        self.expression = "0"
        self.result = NO_VALUE

    def display(self):
        return Display(prettify(self.expression), self.result)

    def submit_char(self, ch):
        ch = canonical(ch)
        if ch not in KEYS or not can_append(self.expression, ch):
            logger.debug(f"Rejected {ch!r} after {self.expression!r}")
            return self.display()
        if self.expression == "0" and ch in NUMBER_CHARS:
            self.expression = ch
        else:
            self.expression += ch
        return self._edited()

    def backspace(self):
        if len(self.expression) <= 1:
            self.expression = "0"
        else:
            self.expression = self.expression[:-1]
        return self._edited()

    def parentheses(self):
        self.expression += paren_entry(self.expression)
        return self._edited()

    def clear(self):
        self._cancel_live()
        self.expression = "0"
        self.result = NO_VALUE
        return self.display()

    def finalize(self):
        self._cancel_live()
        res = compute(self.expression)
        if res.ok:
            self.result = self.expression = format_number(res.value, self.precision)
        else:
            logger.debug(f"Cannot finalize {self.expression!r}: {res.error.kind}: {res.error}")
            self.result = ERROR_TEXT
        return self.display()

    def live_evaluate(self):
        opens, closes = paren_counts(self.expression)
        if opens != closes:
            self.result = NO_VALUE
            return self.display()
        res = compute(self.expression)
        if res.ok:
            self.result = format_number(res.value, self.precision)
        else:
            logger.debug(f"No preview for {self.expression!r}: {res.error.kind}")
            self.result = NO_VALUE
        return self.display()

    def _edited(self):
        if self.debouncer is None:
            return self.live_evaluate()
        self.debouncer.request(self.live_evaluate)
        return self.display()

    def _cancel_live(self):
        if self.debouncer is not None:
            self.debouncer.cancel()
