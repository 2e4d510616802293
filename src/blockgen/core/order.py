"""Operator precedence tags for generated Arduino C++ expressions."""

from enum import IntEnum


class Order(IntEnum):
    """How tightly a generated expression binds.

    Lower values bind tighter. A caller embedding an expression at a given
    order wraps it in parentheses when the expression binds no tighter than
    the surrounding context.

    ATOMIC: literals, names, already-parenthesised code.
    UNARY_POSTFIX: calls, subscripts, ``x++``.
    NONE: forces parentheses around any non-atomic operand.
    """

    ATOMIC = 0
    UNARY_POSTFIX = 1  # expr++ expr-- () [] .
    UNARY_PREFIX = 2  # -expr !expr ~expr ++expr --expr
    MULTIPLICATIVE = 3  # * / %
    ADDITIVE = 4  # + -
    SHIFT = 5  # << >>
    RELATIONAL = 6  # < <= > >=
    EQUALITY = 7  # == !=
    BITWISE_AND = 8
    BITWISE_XOR = 9
    BITWISE_OR = 10
    LOGICAL_AND = 11
    LOGICAL_OR = 12
    CONDITIONAL = 13  # expr ? expr : expr
    ASSIGNMENT = 14  # = *= /= += -=
    NONE = 99


def needs_parens(outer: Order, inner: Order) -> bool:
    """Return True if an *inner*-order expression must be parenthesised at *outer*."""
    if outer > inner:
        return False
    if outer == inner and outer in (Order.ATOMIC, Order.NONE):
        return False
    return True
