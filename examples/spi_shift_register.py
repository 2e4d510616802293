"""Two SPI devices: a shift register on pin 10 and a sensor read back on pin 8."""

from blockgen.arduino import generate_sketch
from blockgen.core import block, chain

counter = block("variables_get", fields={"VAR": "counter"})
command = block("math_number", fields={"NUM": 0x80})

program = chain(
    block(
        "spi_setup",
        fields={
            "SPI_SHIFT_ORDER": "MSBFIRST",
            "SPI_MODE": "SPI_MODE0",
            "SPI_CLOCK_DIVIDE": "SPI_CLOCK_DIV16",
        },
    ),
    block("spi_transfer", fields={"SPI_SS": "10"}, inputs={"SPI_DATA": counter}),
    block("spi_transfer_return", fields={"SPI_SS": "8"}, inputs={"SPI_DATA": command}),
)

if __name__ == "__main__":
    print(generate_sketch([program], board="uno"))
