"""Arduino board catalog.

Static pin metadata for the boards the generators can target.  Each entry
lists the board's digital pin identifiers and its fixed SPI role pins so
that generators can reserve the pins a block needs on the selected board.

SPI role pins follow the Arduino SPI library reference
(https://www.arduino.cc/reference/en/language/functions/communication/spi/).
On the Leonardo the SPI bus is only broken out on the ICSP header.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class PinType(Enum):
    """Usage category of a reserved pin."""

    INPUT = "digital-input"
    OUTPUT = "digital-output"
    PWM = "pwm"
    SERVO = "servo"
    ANALOG = "analog-input"
    INTERRUPT = "interrupt"
    SERIAL = "serial"
    I2C = "i2c/two-wire"
    SPI = "spi"


@dataclass(frozen=True)
class BoardSpec:
    """Static pin description of one Arduino board.

    Attributes:
        key: Catalog key (e.g. ``"uno"``).
        name: Marketing name.
        description: Human-readable summary.
        digital_pins: Pin identifiers usable with ``pinMode``/``digitalWrite``.
        spi_pins: Ordered ``(role, pin)`` pairs for MOSI, MISO and SCK.
    """

    key: str
    name: str
    description: str
    digital_pins: tuple[str, ...]
    spi_pins: tuple[tuple[str, str], ...]


# ---------------------------------------------------------------------------
# Helper factories
# ---------------------------------------------------------------------------


def _digital(count: int, analog: int = 0) -> tuple[str, ...]:
    pins = [str(n) for n in range(count)]
    pins.extend(f"A{n}" for n in range(analog))
    return tuple(pins)


def _spi(mosi: str, miso: str, sck: str) -> tuple[tuple[str, str], ...]:
    return (("MOSI", mosi), ("MISO", miso), ("SCK", sck))


BOARD_CATALOG: Final[dict[str, BoardSpec]] = {
    "uno": BoardSpec(
        "uno",
        "Arduino Uno",
        "ATmega328P, 14 digital + 6 analog pins",
        _digital(14, 6),
        _spi("11", "12", "13"),
    ),
    "nano": BoardSpec(
        "nano",
        "Arduino Nano",
        "ATmega328P, 14 digital + 8 analog pins",
        _digital(14, 8),
        _spi("11", "12", "13"),
    ),
    "mega": BoardSpec(
        "mega",
        "Arduino Mega 2560",
        "ATmega2560, 54 digital + 16 analog pins",
        _digital(54, 16),
        _spi("51", "50", "52"),
    ),
    "leonardo": BoardSpec(
        "leonardo",
        "Arduino Leonardo",
        "ATmega32u4, SPI on the ICSP header only",
        _digital(14, 6),
        _spi("ICSP-4", "ICSP-1", "ICSP-3"),
    ),
}

DEFAULT_BOARD: Final[str] = "uno"


def get_board(key: str) -> BoardSpec:
    """Look up a board by catalog key.

    Raises:
        ValueError: If *key* is not in :data:`BOARD_CATALOG`.
    """
    spec = BOARD_CATALOG.get(key)
    if spec is None:
        msg = (
            f"Unknown board {key!r}. "
            f"Valid boards: {', '.join(sorted(BOARD_CATALOG))}."
        )
        raise ValueError(msg)
    return spec
