"""Generators for basic value blocks used as sub-expressions."""

from __future__ import annotations

from blockgen.arduino.codegen.context import GeneratorContext
from blockgen.arduino.codegen.registry import register_generator
from blockgen.core.block import Block
from blockgen.core.order import Order

_ARITHMETIC_OPS: dict[str, tuple[str, Order]] = {
    "ADD": (" + ", Order.ADDITIVE),
    "MINUS": (" - ", Order.ADDITIVE),
    "MULTIPLY": (" * ", Order.MULTIPLICATIVE),
    "DIVIDE": (" / ", Order.MULTIPLICATIVE),
}


@register_generator("math_number")
def math_number(block: Block, ctx: GeneratorContext) -> tuple[str, Order]:
    code = block.get_field("NUM") or "0"
    if code.startswith("-"):
        return code, Order.UNARY_PREFIX
    return code, Order.ATOMIC


@register_generator("variables_get")
def variables_get(block: Block, ctx: GeneratorContext) -> tuple[str, Order]:
    name = block.get_field("VAR")
    if not name:
        raise ValueError(f"Block {block.location!r} has no variable name")
    ctx.add_variable_name(name)
    return name, Order.ATOMIC


@register_generator("math_arithmetic")
def math_arithmetic(block: Block, ctx: GeneratorContext) -> tuple[str, Order]:
    op = block.get_field("OP") or "ADD"
    entry = _ARITHMETIC_OPS.get(op)
    if entry is None:
        raise ValueError(f"Unsupported arithmetic operator {op!r} in {block.location!r}")
    operator, order = entry
    left = ctx.value_to_code(block, "A", order) or "0"
    right = ctx.value_to_code(block, "B", order) or "0"
    return f"{left}{operator}{right}", order
