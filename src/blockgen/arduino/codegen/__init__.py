"""Arduino code generation for visual program blocks."""

from __future__ import annotations

from blockgen.arduino.codegen import spi, values  # noqa: F401  (registers generators)
from blockgen.arduino.codegen._constants import DEF_FUNC_NAME
from blockgen.arduino.codegen.context import GeneratorContext, PinReservation
from blockgen.arduino.codegen.generate import generate_sketch
from blockgen.arduino.codegen.registry import (
    GENERATORS,
    CodeFragment,
    get_generator,
    register_generator,
)
from blockgen.arduino.codegen.spi import (
    build_transfer,
    spi_setup,
    spi_transfer,
    spi_transfer_return,
)

__all__ = [
    "CodeFragment",
    "DEF_FUNC_NAME",
    "GENERATORS",
    "GeneratorContext",
    "PinReservation",
    "build_transfer",
    "generate_sketch",
    "get_generator",
    "register_generator",
    "spi_setup",
    "spi_transfer",
    "spi_transfer_return",
]
