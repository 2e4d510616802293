"""Generators for the SPI library blocks.

Arduino SPI reference: https://www.arduino.cc/reference/en/language/functions/communication/spi/

``spi_setup`` only contributes ``setup()`` statements::

    #include <SPI.h>
    setup() { SPI.setBitOrder(X); SPI.setDataMode(Y); SPI.setClockDivider(Z); SPI.begin(); }

``spi_transfer`` drives an optional slave-select pin around one transfer::

    setup() { pinMode(SS, OUTPUT); }
    loop()  { digitalWrite(SS, HIGH); SPI.transfer(data); digitalWrite(SS, LOW); }

``spi_transfer_return`` yields the received byte as an expression.  With a
slave-select pin the transfer sits inside a statement sequence, so it is
moved into a generated helper function that returns the result.
"""

from __future__ import annotations

from blockgen.arduino.boards import PinType
from blockgen.arduino.codegen._constants import (
    _SPI_BEGIN,
    _SPI_BEGIN_KEY,
    _SPI_DEFAULT_CLOCK_DIVIDE,
    _SPI_DEFAULT_MODE,
    _SPI_DEFAULT_SHIFT_ORDER,
    _SPI_INCLUDE,
    _SPI_INCLUDE_KEY,
    _SPI_RETURN_FUNC_PREFIX,
    _SPI_RETURN_VAR,
    _SPI_SLAVE_LABEL,
    _SPI_TRANSFER,
    DEF_FUNC_NAME,
)
from blockgen.arduino.codegen.context import GeneratorContext
from blockgen.arduino.codegen.registry import register_generator
from blockgen.core.block import Block
from blockgen.core.order import Order
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


@register_generator("spi_setup")
def spi_setup(block: Block, ctx: GeneratorContext) -> str:
    # Unset fields fall back to the SPI library defaults.
    shift_order = block.get_field("SPI_SHIFT_ORDER", _SPI_DEFAULT_SHIFT_ORDER)
    clock_divide = block.get_field("SPI_CLOCK_DIVIDE", _SPI_DEFAULT_CLOCK_DIVIDE)
    mode = block.get_field("SPI_MODE", _SPI_DEFAULT_MODE)

    ctx.add_include(_SPI_INCLUDE_KEY, _SPI_INCLUDE)
    ctx.add_setup("setup_spi_order", f"SPI.setBitOrder({shift_order});")
    ctx.add_setup("setup_spi_mode", f"SPI.setDataMode({mode});")
    ctx.add_setup("spi_div", f"SPI.setClockDivider({clock_divide});")
    ctx.add_setup(_SPI_BEGIN_KEY, _SPI_BEGIN)
    return ""


def _transfer_data(block: Block, ctx: GeneratorContext) -> str:
    return ctx.value_to_code(block, "SPI_DATA", Order.ATOMIC) or "0"


def _select(pin: str, level: str) -> CallStatement:
    return CallStatement(Call("digitalWrite", (pin, level)))


def build_transfer(block: Block, ctx: GeneratorContext) -> StatementBlock:
    """Register everything a transfer needs and return its statements."""
    slave_pin = block.optional_field("SPI_SS")
    data = _transfer_data(block, ctx)

    ctx.add_include(_SPI_INCLUDE_KEY, _SPI_INCLUDE)
    ctx.add_setup(_SPI_BEGIN_KEY, _SPI_BEGIN, run_first=True)

    for role, pin in ctx.board.spi_pins:
        ctx.reserve_pin(block, pin, PinType.SPI, f"SPI {role}")

    # Without a slave-select pin the device is permanently selected.
    if slave_pin is not None:
        ctx.check_board_pin(block, slave_pin, _SPI_SLAVE_LABEL)
        ctx.reserve_pin(block, slave_pin, PinType.OUTPUT, _SPI_SLAVE_LABEL)
        ctx.add_setup(f"io_{slave_pin}", f"pinMode({slave_pin}, OUTPUT);")

    statements: list[Statement] = []
    if slave_pin is not None:
        statements.append(_select(slave_pin, "HIGH"))
    statements.append(CallStatement(Call(_SPI_TRANSFER, (data,))))
    if slave_pin is not None:
        statements.append(_select(slave_pin, "LOW"))
    return StatementBlock.of(statements)


@register_generator("spi_transfer")
def spi_transfer(block: Block, ctx: GeneratorContext) -> str:
    return build_transfer(block, ctx).render()


def _capture_result(stmt: Statement) -> Statement:
    assert isinstance(stmt, CallStatement)  # noqa: S101
    return Assign(_SPI_RETURN_VAR, stmt.call)


@register_generator("spi_transfer_return")
def spi_transfer_return(block: Block, ctx: GeneratorContext) -> tuple[str, Order]:
    slave_pin = block.optional_field("SPI_SS")
    transfer = build_transfer(block, ctx)

    if slave_pin is None:
        return Call(_SPI_TRANSFER, (_transfer_data(block, ctx),)).render(), Order.UNARY_POSTFIX

    captured, replaced = transfer.replace(is_call_to(_SPI_TRANSFER), _capture_result)
    if replaced != 1:
        raise RuntimeError(
            f"Expected exactly one {_SPI_TRANSFER} call in {block.location!r}, found {replaced}"
        )

    body = (
        StatementBlock((Declare("int", _SPI_RETURN_VAR, "0"),))
        + captured
        + StatementBlock((Return(_SPI_RETURN_VAR),))
    )
    func = "\n".join([f"int {DEF_FUNC_NAME}() {{", *body.lines(2), "}"])
    function_name = ctx.add_function(f"{_SPI_RETURN_FUNC_PREFIX}{slave_pin}", func)
    return f"{function_name}()", Order.UNARY_POSTFIX
