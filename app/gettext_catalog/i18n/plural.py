"""Plural-Forms rule compilation.

Turns a GNU gettext ``Plural-Forms`` header such as
``nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : ...);`` into a callable that
maps a count to a plural-form index.

The expression language is closed: integers, the variable ``n``, C arithmetic,
comparison, logical and ternary operators, and parentheses. Expressions are
validated, tokenized and parsed into a tree of closures; nothing is ever
handed to ``eval``.
"""

import operator
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from gettext_catalog.i18n.exceptions import PluralRuleSyntaxError
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()

DEFAULT_PLURAL_FORMS = "nplurals=2; plural=(n != 1);"

_PLURAL_FORMS_PATTERN = re.compile(
    r"^\s*nplurals\s*=\s*([0-9]+)\s*;\s*plural\s*=\s*([\sn0-9+\-*/%<>=!&|?:()]+?)\s*;\s*$"
)

_TOKEN_PATTERN = re.compile(r"\s*(?:([0-9]+)|(n)|(&&|\|\||==|!=|<=|>=|[-+*/%<>!?:()]))")

# Bounds keep parsing and evaluation well inside the interpreter stack
_MAX_TOKENS = 256
_MAX_DEPTH = 32

Evaluator = Callable[[int], int]


def _c_div(left: int, right: int) -> int:
    # C truncates toward zero; a zero divisor selects form 0
    if right == 0:
        return 0
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right >= 0) else -quotient


def _c_mod(left: int, right: int) -> int:
    if right == 0:
        return 0
    return left - right * _c_div(left, right)


def _compare(op: Callable[[int, int], bool]) -> Callable[[int, int], int]:
    return lambda left, right: int(op(left, right))


_BINARY_OPERATORS = {
    "*": operator.mul,
    "/": _c_div,
    "%": _c_mod,
    "+": operator.add,
    "-": operator.sub,
    "<": _compare(operator.lt),
    "<=": _compare(operator.le),
    ">": _compare(operator.gt),
    ">=": _compare(operator.ge),
    "==": _compare(operator.eq),
    "!=": _compare(operator.ne),
}

# Binary precedence levels, loosest first; "&&" and "||" are handled
# separately because they short-circuit.
_PRECEDENCE = (
    ("==", "!="),
    ("<", "<=", ">", ">="),
    ("+", "-"),
    ("*", "/", "%"),
)


def _tokenize(expression: str, source: str) -> List[Tuple[str, str]]:
    """Split a plural expression into (kind, text) tokens."""
    tokens = []
    position = 0
    stripped_length = len(expression.rstrip())
    while position < stripped_length:
        match = _TOKEN_PATTERN.match(expression, position)
        if not match:
            raise PluralRuleSyntaxError(
                source, f"unexpected character at offset {position}"
            )
        number, variable, symbol = match.groups()
        if number is not None:
            tokens.append(("number", number))
        elif variable is not None:
            tokens.append(("variable", variable))
        else:
            tokens.append(("operator", symbol))
        position = match.end()
    if len(tokens) > _MAX_TOKENS:
        raise PluralRuleSyntaxError(source, f"more than {_MAX_TOKENS} tokens")
    return tokens


class _Parser:
    """Recursive-descent parser for C-style plural expressions."""

    def __init__(self, tokens: List[Tuple[str, str]], source: str):
        self.tokens = tokens
        self.source = source
        self.position = 0
        self.depth = 0

    def parse(self) -> Evaluator:
        node = self._ternary()
        if self._peek() is not None:
            self._fail(f"unexpected token '{self._peek()}'")
        return node

    def _peek(self) -> Optional[str]:
        if self.position < len(self.tokens):
            return self.tokens[self.position][1]
        return None

    def _accept(self, *symbols: str) -> Optional[str]:
        token = self._peek()
        if token in symbols and self.tokens[self.position][0] == "operator":
            self.position += 1
            return token
        return None

    def _expect(self, symbol: str) -> None:
        if self._accept(symbol) is None:
            self._fail(f"expected '{symbol}'")

    def _fail(self, reason: str) -> None:
        raise PluralRuleSyntaxError(self.source, reason)

    def _nested(self, parse: Callable[[], Evaluator]) -> Evaluator:
        self.depth += 1
        if self.depth > _MAX_DEPTH:
            self._fail(f"nested deeper than {_MAX_DEPTH} levels")
        node = parse()
        self.depth -= 1
        return node

    def _ternary(self) -> Evaluator:
        condition = self._logical_or()
        if self._accept("?") is None:
            return condition
        if_true = self._nested(self._ternary)
        self._expect(":")
        if_false = self._nested(self._ternary)
        return lambda n: if_true(n) if condition(n) else if_false(n)

    def _logical_or(self) -> Evaluator:
        left = self._logical_and()
        while self._accept("||"):
            left = _or_node(left, self._logical_and())
        return left

    def _logical_and(self) -> Evaluator:
        left = self._binary(0)
        while self._accept("&&"):
            left = _and_node(left, self._binary(0))
        return left

    def _binary(self, level: int) -> Evaluator:
        if level == len(_PRECEDENCE):
            return self._unary()
        left = self._binary(level + 1)
        while True:
            symbol = self._accept(*_PRECEDENCE[level])
            if symbol is None:
                return left
            left = _binary_node(_BINARY_OPERATORS[symbol], left, self._binary(level + 1))

    def _unary(self) -> Evaluator:
        if self._accept("!"):
            operand = self._nested(self._unary)
            return lambda n: int(not operand(n))
        if self._accept("-"):
            operand = self._nested(self._unary)
            return lambda n: -operand(n)
        if self._accept("+"):
            return self._nested(self._unary)
        return self._primary()

    def _primary(self) -> Evaluator:
        if self._accept("("):
            node = self._nested(self._ternary)
            self._expect(")")
            return node
        if self.position >= len(self.tokens):
            self._fail("unexpected end of expression")
        kind, text = self.tokens[self.position]
        if kind == "number":
            self.position += 1
            value = int(text)
            return lambda n: value
        if kind == "variable":
            self.position += 1
            return lambda n: n
        self._fail(f"unexpected token '{text}'")


def _binary_node(
    op: Callable[[int, int], int], left: Evaluator, right: Evaluator
) -> Evaluator:
    return lambda n: op(left(n), right(n))


def _or_node(left: Evaluator, right: Evaluator) -> Evaluator:
    return lambda n: int(bool(left(n)) or bool(right(n)))


def _and_node(left: Evaluator, right: Evaluator) -> Evaluator:
    return lambda n: int(bool(left(n)) and bool(right(n)))


@dataclass(frozen=True)
class PluralClassifier:
    """Compiled plural rule.

    Attributes:
        nplurals: Number of plural forms the rule declares.
        expression: The ``plural=`` expression it was compiled from.
    """

    nplurals: int
    expression: str
    evaluate: Evaluator = field(repr=False, compare=False)

    def __call__(self, count: Optional[int]) -> int:
        """Return the plural-form index for ``count``.

        A missing count is evaluated as 0.
        """
        return self.evaluate(int(count) if count is not None else 0)


def compile_plural_forms(plural_forms: str) -> PluralClassifier:
    """Compile a Plural-Forms header into a classifier.

    Args:
        plural_forms: Header value, e.g. ``"nplurals=2; plural=(n != 1);"``.
            A missing trailing ``;`` is tolerated.

    Returns:
        PluralClassifier for the rule.

    Raises:
        PluralRuleSyntaxError: If the header contains anything outside the
            plural expression grammar or fails to parse.
    """
    source = plural_forms if isinstance(plural_forms, str) else repr(plural_forms)
    if not isinstance(plural_forms, str):
        logger.error("plural_forms_invalid", plural_forms=source, reason="not a string")
        raise PluralRuleSyntaxError(source, "not a string")

    normalized = plural_forms.rstrip()
    if not normalized.endswith(";"):
        normalized = f"{normalized};"

    match = _PLURAL_FORMS_PATTERN.match(normalized)
    if not match:
        logger.error("plural_forms_invalid", plural_forms=source)
        raise PluralRuleSyntaxError(source)

    nplurals = int(match.group(1))
    expression = match.group(2).strip()
    if nplurals < 1:
        logger.error("plural_forms_invalid", plural_forms=source, nplurals=nplurals)
        raise PluralRuleSyntaxError(source, "nplurals must be at least 1")

    try:
        evaluate = _Parser(_tokenize(expression, source), source).parse()
    except PluralRuleSyntaxError as e:
        logger.error("plural_forms_invalid", plural_forms=source, reason=e.reason)
        raise

    return PluralClassifier(nplurals=nplurals, expression=expression, evaluate=evaluate)


default_plural_classifier = compile_plural_forms(DEFAULT_PLURAL_FORMS)
