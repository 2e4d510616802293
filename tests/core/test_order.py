"""Tests for operator precedence tags."""

import pytest

from blockgen.core import Order, needs_parens


@pytest.mark.parametrize(
    "outer,inner,expected",
    [
        (Order.ATOMIC, Order.ATOMIC, False),
        (Order.NONE, Order.NONE, False),
        (Order.ATOMIC, Order.UNARY_POSTFIX, True),
        (Order.ATOMIC, Order.ADDITIVE, True),
        (Order.MULTIPLICATIVE, Order.ADDITIVE, True),
        (Order.ADDITIVE, Order.ADDITIVE, True),
        (Order.ADDITIVE, Order.MULTIPLICATIVE, False),
        (Order.NONE, Order.ASSIGNMENT, False),
    ],
)
def test_needs_parens(outer, inner, expected):
    assert needs_parens(outer, inner) is expected


def test_orders_increase_with_looser_binding():
    assert Order.ATOMIC < Order.UNARY_POSTFIX < Order.UNARY_PREFIX < Order.MULTIPLICATIVE
    assert Order.ASSIGNMENT < Order.NONE
