"""blockgen: code generation from visual programming blocks."""

from blockgen.arduino import BOARD_CATALOG, BoardSpec, GeneratorContext, generate_sketch
from blockgen.core import Block, Order, block, chain

__all__ = [
    "BOARD_CATALOG",
    "Block",
    "BoardSpec",
    "GeneratorContext",
    "Order",
    "block",
    "chain",
    "generate_sketch",
]
