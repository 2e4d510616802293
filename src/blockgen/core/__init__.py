"""Editor-independent building blocks for code generation.

Blocks are immutable records read by generators; generated statements can be
held as small structured sequences before they are rendered to text.
"""

from blockgen.core.block import NO_SELECTION, Block, block, chain
from blockgen.core.order import Order, needs_parens
from blockgen.core.statement import (
    Assign,
    Call,
    CallStatement,
    Declare,
    Return,
    Statement,
    StatementBlock,
    is_call_to,
)

__all__ = [
    "Assign",
    "Block",
    "Call",
    "CallStatement",
    "Declare",
    "NO_SELECTION",
    "Order",
    "Return",
    "Statement",
    "StatementBlock",
    "block",
    "chain",
    "is_call_to",
    "needs_parens",
]
