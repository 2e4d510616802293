"""Arduino dialect for blockgen.

Turns visual program blocks into an Arduino sketch for a board from the
catalog::

    from blockgen.arduino import generate_sketch
    from blockgen.core import block, chain

    program = chain(
        block("spi_setup", fields={
            "SPI_SHIFT_ORDER": "MSBFIRST",
            "SPI_MODE": "SPI_MODE0",
            "SPI_CLOCK_DIVIDE": "SPI_CLOCK_DIV16",
        }),
        block("spi_transfer", fields={"SPI_SS": "10"}),
    )
    source = generate_sketch([program], board="uno")
"""

from blockgen.arduino.boards import (
    BOARD_CATALOG,
    DEFAULT_BOARD,
    BoardSpec,
    PinType,
    get_board,
)
from blockgen.arduino.codegen import GeneratorContext, generate_sketch
from blockgen.arduino.validation import (
    PIN_CONFLICT,
    UNKNOWN_PIN,
    PinFinding,
    PinReport,
    ValidationMode,
)

__all__ = [
    "BOARD_CATALOG",
    "BoardSpec",
    "DEFAULT_BOARD",
    "GeneratorContext",
    "PIN_CONFLICT",
    "PinFinding",
    "PinReport",
    "PinType",
    "UNKNOWN_PIN",
    "ValidationMode",
    "generate_sketch",
    "get_board",
]
