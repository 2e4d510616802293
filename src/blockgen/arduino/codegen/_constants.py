"""Arduino code generation constants."""

from __future__ import annotations

DEF_FUNC_NAME = "%%FUNCTION_NAME%%"
"""Placeholder replaced by the final helper function name in ``add_function``."""


_SPI_INCLUDE_KEY = "spi"


_SPI_INCLUDE = "#include <SPI.h>"


_SPI_BEGIN_KEY = "spi_begin"


_SPI_BEGIN = "SPI.begin();"


_SPI_TRANSFER = "SPI.transfer"


_SPI_RETURN_VAR = "spiReturn"


_SPI_RETURN_FUNC_PREFIX = "spiReturnSlave"


_SPI_SLAVE_LABEL = "SPI Slave pin"


_SPI_DEFAULT_SHIFT_ORDER = "MSBFIRST"


_SPI_DEFAULT_MODE = "SPI_MODE0"


_SPI_DEFAULT_CLOCK_DIVIDE = "SPI_CLOCK_DIV4"


_ARDUINO_RESERVED_NAMES = frozenset(
    {
        "setup",
        "loop",
        "if",
        "else",
        "for",
        "switch",
        "case",
        "while",
        "do",
        "break",
        "continue",
        "return",
        "goto",
        "define",
        "include",
        "HIGH",
        "LOW",
        "INPUT",
        "OUTPUT",
        "INPUT_PULLUP",
        "true",
        "false",
        "int",
        "long",
        "float",
        "double",
        "char",
        "byte",
        "boolean",
        "void",
        "static",
        "const",
        "String",
        "SPI",
        "Serial",
    }
)
