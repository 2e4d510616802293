"""Block type to generator mapping."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from blockgen.core.order import Order

if TYPE_CHECKING:
    from blockgen.arduino.codegen.context import GeneratorContext
    from blockgen.core.block import Block

CodeFragment = str | tuple[str, Order]
Generator = Callable[["Block", "GeneratorContext"], CodeFragment]

GENERATORS: dict[str, Generator] = {}


def register_generator(block_type: str) -> Callable[[Generator], Generator]:
    """Register the decorated function as the generator for *block_type*.

    Example::

        @register_generator("math_number")
        def math_number(block, ctx):
            return block.get_field("NUM"), Order.ATOMIC
    """

    def decorator(fn: Generator) -> Generator:
        if block_type in GENERATORS and GENERATORS[block_type] is not fn:
            raise ValueError(f"Generator for block type {block_type!r} is already registered")
        GENERATORS[block_type] = fn
        return fn

    return decorator


def get_generator(block_type: str) -> Generator:
    fn = GENERATORS.get(block_type)
    if fn is None:
        raise NotImplementedError(f"No generator for block type: {block_type!r}")
    return fn
