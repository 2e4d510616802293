"""Immutable block records for visual programs.

A block is a read-only snapshot of one node in the editor's block graph:
its type, the values the user picked for its fields, the blocks plugged
into its value inputs, and the next block in its statement chain.
"""

from __future__ import annotations

from typing import Any

from pyrsistent import PMap, PRecord, field, pmap

NO_SELECTION = "none"
"""Editor dropdown value meaning "nothing selected"."""


class Block(PRecord):
    """One node of a visual program.

    Attributes:
        type: Block type name used to look up its generator (e.g. ``"spi_transfer"``).
        id: Editor-assigned identifier, used only for diagnostics.
        fields: Immutable mapping of field name to the selected value.
        inputs: Immutable mapping of value-input name to the connected block.
        next: The following block in a statement chain, or ``None``.
    """

    type = field(type=str, mandatory=True)
    id = field(type=str, initial="")
    fields = field(type=PMap, initial=pmap(), factory=pmap)
    inputs = field(type=PMap, initial=pmap(), factory=pmap)
    next = field(initial=None)

    def get_field(self, name: str, default: str | None = None) -> str | None:
        return self.fields.get(name, default)

    def optional_field(self, name: str) -> str | None:
        """Return the field value, or ``None`` when unset or set to ``"none"``."""
        value = self.fields.get(name)
        if value is None or value == NO_SELECTION:
            return None
        return value

    def get_input(self, name: str) -> Block | None:
        return self.inputs.get(name)

    def with_next(self, block: Block | None) -> Block:
        """Return a copy of this block chained to *block*. Original unchanged."""
        return self.set(next=block)

    @property
    def location(self) -> str:
        if self.id:
            return f"{self.type}#{self.id}"
        return self.type


def block(
    type: str,
    *,
    id: str = "",
    fields: dict[str, Any] | None = None,
    inputs: dict[str, Block] | None = None,
    next: Block | None = None,
) -> Block:
    """Build a :class:`Block` from plain dicts.

    Field values are stored as strings, matching what the editor serialises.

    Example::

        data = block("variables_get", fields={"VAR": "someVar"})
        xfer = block("spi_transfer", fields={"SPI_SS": "8"}, inputs={"SPI_DATA": data})
    """
    field_values = {name: str(value) for name, value in (fields or {}).items()}
    return Block(
        type=type,
        id=id,
        fields=field_values,
        inputs=inputs or {},
        next=next,
    )


def chain(*blocks: Block) -> Block:
    """Link statement blocks through ``next`` and return the head of the chain."""
    if not blocks:
        raise ValueError("chain() requires at least one block")
    head: Block | None = None
    for item in reversed(blocks):
        head = item.with_next(head)
    assert head is not None  # noqa: S101
    return head
