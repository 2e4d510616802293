"""Whole-sketch registries shared by block generators during one pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockgen.arduino.boards import BoardSpec, PinType
from blockgen.arduino.codegen._constants import _ARDUINO_RESERVED_NAMES, DEF_FUNC_NAME
from blockgen.arduino.codegen.registry import get_generator
from blockgen.arduino.validation import (
    PinFinding,
    PinReport,
    ValidationMode,
    build_report,
    pin_conflict,
    unknown_pin,
)
from blockgen.core._util import _distinct_name
from blockgen.core.block import Block
from blockgen.core.order import Order, needs_parens


@dataclass(frozen=True)
class PinReservation:
    pin: str
    pin_type: PinType
    label: str
    location: str


@dataclass
class GeneratorContext:
    """Mutable state for generating one sketch.

    Generators receive the context by reference and push includes, setup
    statements, helper functions and pin reservations into it.  The context
    is owned by the caller of one generation pass; :meth:`reset` clears it
    for an independent run.
    """

    board: BoardSpec

    includes: dict[str, str] = field(default_factory=dict)
    setups: dict[str, str] = field(default_factory=dict)
    setup_promoted: dict[str, bool] = field(default_factory=dict)
    functions: dict[str, str] = field(default_factory=dict)
    function_names: dict[str, str] = field(default_factory=dict)
    variable_names: set[str] = field(default_factory=set)
    pins: dict[str, PinReservation] = field(default_factory=dict)
    findings: list[PinFinding] = field(default_factory=list)
    _used_names: set[str] = field(default_factory=lambda: set(_ARDUINO_RESERVED_NAMES))

    def reset(self) -> None:
        self.includes.clear()
        self.setups.clear()
        self.setup_promoted.clear()
        self.functions.clear()
        self.function_names.clear()
        self.variable_names.clear()
        self.pins.clear()
        self.findings.clear()
        self._used_names = set(_ARDUINO_RESERVED_NAMES)

    # ------------------------------------------------------------------
    # registries
    # ------------------------------------------------------------------

    def add_include(self, key: str, code: str) -> None:
        """Register an include line once; the first registration under *key* wins."""
        self.includes.setdefault(key, code)

    def add_setup(self, key: str, code: str, *, run_first: bool = False) -> None:
        """Register a one-time ``setup()`` statement under *key*.

        The latest *code* for a key replaces earlier content.  The key's
        position, and whether it runs ahead of non-promoted entries, are
        fixed by its first registration.
        """
        if key not in self.setups:
            self.setup_promoted[key] = run_first
        self.setups[key] = code

    def ordered_setups(self) -> list[str]:
        promoted = [code for key, code in self.setups.items() if self.setup_promoted[key]]
        regular = [code for key, code in self.setups.items() if not self.setup_promoted[key]]
        return promoted + regular

    def add_variable_name(self, name: str) -> None:
        self.variable_names.add(name)
        self._used_names.add(name)

    def add_function(self, preferred_name: str, code: str) -> str:
        """Register a helper function and return its callable name.

        *code* uses :data:`DEF_FUNC_NAME` where the function name goes.  The
        first body registered for *preferred_name* is kept; later calls with
        the same preferred name return the same name.
        """
        existing = self.function_names.get(preferred_name)
        if existing is not None:
            return existing
        name = _distinct_name(preferred_name, self._used_names)
        self.functions[preferred_name] = code.replace(DEF_FUNC_NAME, name)
        self.function_names[preferred_name] = name
        return name

    def reserve_pin(self, block: Block, pin: str, pin_type: PinType, label: str) -> None:
        """Declare that *block* uses *pin* as *pin_type*.

        The first reservation of a pin is kept.  A later reservation with a
        different usage category is recorded as a conflict finding.
        """
        existing = self.pins.get(pin)
        if existing is None:
            self.pins[pin] = PinReservation(pin, pin_type, label, block.location)
            return
        if existing.pin_type is not pin_type:
            self.findings.append(
                pin_conflict(
                    pin,
                    label,
                    pin_type.value,
                    existing.pin_type.value,
                    block.location,
                )
            )

    def check_board_pin(self, block: Block, pin: str, label: str) -> None:
        """Record a finding when *pin* is not one of the board's digital pins."""
        if pin not in self.board.digital_pins:
            self.findings.append(unknown_pin(pin, label, self.board.name, block.location))

    def report(self, mode: ValidationMode = "warn") -> PinReport:
        return build_report(self.findings, mode)

    # ------------------------------------------------------------------
    # block dispatch
    # ------------------------------------------------------------------

    def block_to_code(self, block: Block) -> str | tuple[str, Order]:
        fn = get_generator(block.type)
        return fn(block, self)

    def value_to_code(self, block: Block, name: str, order: Order) -> str:
        """Return code for the block plugged into input *name*, or ``""``.

        The sub-expression is parenthesised when it does not bind tighter
        than *order*.
        """
        target = block.get_input(name)
        if target is None:
            return ""
        result = self.block_to_code(target)
        if not isinstance(result, tuple):
            raise TypeError(
                f"Block {target.location!r} in input {name!r} of {block.location!r} "
                f"is not a value block (generator returned {type(result).__name__})"
            )
        code, inner_order = result
        if not code:
            return ""
        if needs_parens(order, inner_order):
            return f"({code})"
        return code

    def statement_to_code(self, block: Block | None) -> str:
        """Return code for *block* and every block chained after it."""
        parts: list[str] = []
        current = block
        while current is not None:
            result = self.block_to_code(current)
            if isinstance(result, tuple):
                code, _ = result
                result = f"{code};\n" if code else ""
            parts.append(result)
            current = current.next
        return "".join(parts)
