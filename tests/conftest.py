"""Pytest configuration and block-building helpers."""

import pytest

from blockgen.arduino import GeneratorContext, get_board
from blockgen.core import Block, block


def spi_setup_block(
    order: str = "MSBFIRST",
    mode: str = "SPI_MODE0",
    divide: str = "SPI_CLOCK_DIV16",
) -> Block:
    """Build an ``spi_setup`` block with the given field values."""
    return block(
        "spi_setup",
        fields={"SPI_SHIFT_ORDER": order, "SPI_MODE": mode, "SPI_CLOCK_DIVIDE": divide},
    )


def transfer_block(
    slave: str = "none",
    data: Block | None = None,
    *,
    returns: bool = False,
    id: str = "",
) -> Block:
    """Build an ``spi_transfer`` (or ``spi_transfer_return``) block.

    Args:
        slave: Slave-select pin, or ``"none"``.
        data: Block plugged into ``SPI_DATA``; left unconnected when ``None``.
        returns: Build the value-returning variant.
        id: Editor id used in finding locations.
    """
    inputs = {"SPI_DATA": data} if data is not None else {}
    return block(
        "spi_transfer_return" if returns else "spi_transfer",
        id=id,
        fields={"SPI_ID": "SPI", "SPI_SS": slave},
        inputs=inputs,
    )


def var(name: str) -> Block:
    return block("variables_get", fields={"VAR": name})


def number(value: int | float) -> Block:
    return block("math_number", fields={"NUM": value})


@pytest.fixture
def ctx() -> GeneratorContext:
    """Fresh, empty generator context for an Arduino Uno."""
    return GeneratorContext(board=get_board("uno"))
