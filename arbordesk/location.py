"""Named label definitions: regions, locsets and inhomogeneous expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from arbordesk.utils import WHITESPACE, DefState

FLOAT32_MAX = 3.4028234663852886e38
FLOAT32_MIN = 1.1754943508222875e-38


class Symbol(str):
    """A bare word in an expression, as opposed to a quoted string."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


Expression = Union[Symbol, str, int, float, tuple]


class _ExpressionError(ValueError):
    pass


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> Expression:
        value = self._expr()
        self._skip()
        if self.pos < len(self.text):
            raise _ExpressionError(f"Unexpected input at position {self.pos + 1}")
        return value

    def _skip(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _expr(self) -> Expression:
        self._skip()
        if self.pos >= len(self.text):
            raise _ExpressionError("Unexpected end of input")
        ch = self.text[self.pos]
        if ch == "(":
            return self._list()
        if ch == ")":
            raise _ExpressionError(f"Unexpected ')' at position {self.pos + 1}")
        if ch == '"':
            return self._string()
        return self._atom()

    def _list(self) -> tuple:
        start = self.pos
        self.pos += 1
        items: list[Expression] = []
        while True:
            self._skip()
            if self.pos >= len(self.text):
                raise _ExpressionError(f"Unbalanced parenthesis opened at position {start + 1}")
            if self.text[self.pos] == ")":
                self.pos += 1
                return tuple(items)
            items.append(self._expr())

    def _string(self) -> str:
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            self.pos += 1
            if ch == '"':
                return "".join(chars)
            if ch == "\\" and self.pos < len(self.text):
                ch = self.text[self.pos]
                self.pos += 1
            chars.append(ch)
        raise _ExpressionError(f"Unterminated string starting at position {start + 1}")

    def _atom(self) -> Expression:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in WHITESPACE + '()"':
            self.pos += 1
        word = self.text[start:self.pos]
        if word[0].isdigit() or word[0] in "+-.":
            for convert in (int, float):
                try:
                    return convert(word)
                except ValueError:
                    pass
        return Symbol(word)


def _parse_expression(text: str) -> Expression:
    return _Reader(text).parse()


@dataclass
class IExprInfo:
    """Value range of an inhomogeneous expression over the morphology."""

    min: float = FLOAT32_MAX
    max: float = FLOAT32_MIN
    values: dict[int, tuple[float, float]] = field(default_factory=dict)


@dataclass
class Definition:
    """A named expression together with its parse state."""

    name: str = ""
    definition: str = ""
    data: Any = field(default=None, init=False)
    state: DefState = field(default=DefState.EMPTY, init=False)
    message: str = field(default="Empty.", init=False)

    def __post_init__(self) -> None:
        self.update()

    def set_error(self, message: str) -> None:
        self.data = None
        self.state = DefState.ERROR
        self.message = message

    def update(self) -> None:
        """Re-parse ``definition`` and refresh ``data``, ``state`` and ``message``."""
        text = self.definition.strip(WHITESPACE)
        if not text or text[0] == "\0":
            self.data = None
            self.state = DefState.EMPTY
            self.message = "Empty."
            return
        try:
            self.data = _parse_expression(text)
        except _ExpressionError as err:
            self.set_error(str(err))
            return
        self.state = DefState.GOOD
        self.message = "Ok."


@dataclass
class IExprDefinition(Definition):
    """An inhomogeneous expression definition."""

    info: IExprInfo = field(default_factory=IExprInfo)


@dataclass
class LocsetDefinition(Definition):
    """A locset definition."""


@dataclass
class RegionDefinition(Definition):
    """A region definition."""