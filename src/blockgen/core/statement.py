"""Structured statement sequences for generated Arduino code.

Generators that need to rewrite their own output (for example turning a
call statement into an assignment) build a :class:`StatementBlock` instead
of joining strings, so the rewrite is a node replacement rather than a
substring search.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from blockgen.core._util import _indent_body


@dataclass(frozen=True)
class Call:
    """A function call expression, e.g. ``SPI.transfer(x)``."""

    callee: str
    args: tuple[str, ...] = ()

    def render(self) -> str:
        return f"{self.callee}({', '.join(self.args)})"


@dataclass(frozen=True)
class CallStatement:
    call: Call

    def render(self) -> str:
        return f"{self.call.render()};"


@dataclass(frozen=True)
class Assign:
    target: str
    value: Call | str

    def render(self) -> str:
        value = self.value.render() if isinstance(self.value, Call) else self.value
        return f"{self.target} = {value};"


@dataclass(frozen=True)
class Declare:
    """Local variable declaration with an initial value, e.g. ``int x = 0;``."""

    c_type: str
    name: str
    value: str

    def render(self) -> str:
        return f"{self.c_type} {self.name} = {self.value};"


@dataclass(frozen=True)
class Return:
    value: str

    def render(self) -> str:
        return f"return {self.value};"


Statement = CallStatement | Assign | Declare | Return


@dataclass(frozen=True)
class StatementBlock:
    """An ordered, immutable sequence of statements."""

    statements: tuple[Statement, ...] = ()

    @classmethod
    def of(cls, statements: Iterable[Statement]) -> StatementBlock:
        return cls(tuple(statements))

    def lines(self, indent: int = 0) -> list[str]:
        return _indent_body([stmt.render() for stmt in self.statements], indent)

    def render(self, indent: int = 0) -> str:
        """Return one statement per line, terminated by a line break."""
        if not self.statements:
            return ""
        return "\n".join(self.lines(indent)) + "\n"

    def count(self, predicate: Callable[[Statement], bool]) -> int:
        return sum(1 for stmt in self.statements if predicate(stmt))

    def replace(
        self,
        predicate: Callable[[Statement], bool],
        transform: Callable[[Statement], Statement],
    ) -> tuple[StatementBlock, int]:
        """Return a new block with every matching statement transformed.

        Returns:
            The rewritten block and the number of statements replaced.
        """
        replaced = 0
        rewritten: list[Statement] = []
        for stmt in self.statements:
            if predicate(stmt):
                rewritten.append(transform(stmt))
                replaced += 1
            else:
                rewritten.append(stmt)
        return StatementBlock(tuple(rewritten)), replaced

    def __add__(self, other: StatementBlock) -> StatementBlock:
        return StatementBlock(self.statements + other.statements)


def is_call_to(callee: str) -> Callable[[Statement], bool]:
    """Predicate matching call statements whose callee is *callee*."""

    def predicate(stmt: Statement) -> bool:
        return isinstance(stmt, CallStatement) and stmt.call.callee == callee

    return predicate
