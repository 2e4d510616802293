"""Tests for GeneratorContext registries and block dispatch."""

from __future__ import annotations

import pytest

from blockgen.arduino import PIN_CONFLICT, UNKNOWN_PIN, PinType
from blockgen.arduino.codegen import DEF_FUNC_NAME
from blockgen.core import Order, block, chain
from tests.conftest import number, transfer_block, var


class TestIncludes:
    def test_first_registration_wins(self, ctx):
        ctx.add_include("spi", "#include <SPI.h>")
        ctx.add_include("spi", "#include <Other.h>")
        assert ctx.includes == {"spi": "#include <SPI.h>"}

    def test_insertion_order_is_kept(self, ctx):
        ctx.add_include("b", "#include <B.h>")
        ctx.add_include("a", "#include <A.h>")
        assert list(ctx.includes.values()) == ["#include <B.h>", "#include <A.h>"]


class TestSetups:
    def test_duplicate_key_is_not_duplicated(self, ctx):
        ctx.add_setup("k", "x();")
        ctx.add_setup("k", "x();")
        assert ctx.ordered_setups() == ["x();"]

    def test_last_writer_wins_for_content(self, ctx):
        ctx.add_setup("k", "old();")
        ctx.add_setup("k", "new();")
        assert ctx.ordered_setups() == ["new();"]

    def test_promoted_entries_run_first(self, ctx):
        ctx.add_setup("a", "a();")
        ctx.add_setup("b", "b();", run_first=True)
        ctx.add_setup("c", "c();")
        ctx.add_setup("d", "d();", run_first=True)
        assert ctx.ordered_setups() == ["b();", "d();", "a();", "c();"]

    def test_first_registration_fixes_ordering(self, ctx):
        ctx.add_setup("spi_begin", "SPI.begin();")
        ctx.add_setup("other", "other();")
        ctx.add_setup("spi_begin", "SPI.begin();", run_first=True)
        assert ctx.ordered_setups() == ["SPI.begin();", "other();"]
        assert ctx.setup_promoted["spi_begin"] is False

    def test_promoted_first_stays_promoted(self, ctx):
        ctx.add_setup("other", "other();")
        ctx.add_setup("spi_begin", "SPI.begin();", run_first=True)
        ctx.add_setup("spi_begin", "SPI.begin();")
        assert ctx.ordered_setups() == ["SPI.begin();", "other();"]


class TestFunctions:
    def test_placeholder_replaced_with_name(self, ctx):
        name = ctx.add_function("helper", f"int {DEF_FUNC_NAME}() {{\n  return 1;\n}}")
        assert name == "helper"
        assert ctx.functions["helper"] == "int helper() {\n  return 1;\n}"

    def test_same_preferred_name_returns_same_name(self, ctx):
        first = ctx.add_function("helper", f"int {DEF_FUNC_NAME}() {{}}")
        second = ctx.add_function("helper", f"int {DEF_FUNC_NAME}() {{ changed }}")
        assert first == second == "helper"
        assert ctx.functions["helper"] == "int helper() {}"

    def test_name_avoids_arduino_keywords(self, ctx):
        assert ctx.add_function("loop", f"void {DEF_FUNC_NAME}() {{}}") == "loop_2"

    def test_name_avoids_variables(self, ctx):
        ctx.add_variable_name("helper")
        assert ctx.add_function("helper", f"void {DEF_FUNC_NAME}() {{}}") == "helper_2"

    def test_invalid_characters_are_sanitised(self, ctx):
        assert ctx.add_function("spiReturnSlaveICSP-4", "") == "spiReturnSlaveICSP_4"


class TestPinReservations:
    def test_same_usage_twice_is_accepted(self, ctx):
        owner = block("spi_transfer", id="a")
        ctx.reserve_pin(owner, "13", PinType.SPI, "SPI SCK")
        ctx.reserve_pin(owner, "13", PinType.SPI, "SPI SCK")
        assert ctx.findings == []

    def test_conflicting_usage_is_a_finding(self, ctx):
        ctx.reserve_pin(block("spi_transfer", id="a"), "13", PinType.SPI, "SPI SCK")
        ctx.reserve_pin(block("spi_transfer", id="b"), "13", PinType.OUTPUT, "SPI Slave pin")

        assert len(ctx.findings) == 1
        finding = ctx.findings[0]
        assert finding.code == PIN_CONFLICT
        assert finding.location == "spi_transfer#b"
        assert finding.message == (
            "Pin 13 is needed for SPI Slave pin as pin digital-output. Already used as spi."
        )
        assert ctx.pins["13"].pin_type is PinType.SPI

    def test_report_routes_severity_by_mode(self, ctx):
        ctx.reserve_pin(block("a"), "2", PinType.SPI, "SPI MOSI")
        ctx.reserve_pin(block("b"), "2", PinType.OUTPUT, "SPI Slave pin")

        warn = ctx.report("warn")
        strict = ctx.report("strict")
        assert len(warn.warnings) == 1 and not warn.errors
        assert len(strict.errors) == 1 and not strict.warnings
        assert strict.summary() == "1 error(s)."

    def test_empty_report_summary(self, ctx):
        assert ctx.report().summary() == "No findings."


class TestReset:
    def test_reset_clears_every_registry(self, ctx):
        ctx.statement_to_code(transfer_block("8", var("x")))
        ctx.add_function("helper", "")
        ctx.reserve_pin(block("b"), "8", PinType.INPUT, "other")
        ctx.reset()

        assert ctx.includes == {}
        assert ctx.setups == {}
        assert ctx.functions == {}
        assert ctx.pins == {}
        assert ctx.findings == []
        assert ctx.variable_names == set()
        assert ctx.add_function("x", "") == "x"


class TestValueToCode:
    def test_unconnected_input_is_empty(self, ctx):
        assert ctx.value_to_code(block("spi_transfer"), "SPI_DATA", Order.ATOMIC) == ""

    def test_atomic_value_is_not_parenthesised(self, ctx):
        parent = block("spi_transfer", inputs={"SPI_DATA": var("v")})
        assert ctx.value_to_code(parent, "SPI_DATA", Order.ATOMIC) == "v"
        assert ctx.variable_names == {"v"}

    def test_negative_number_is_parenthesised_at_atomic(self, ctx):
        parent = block("spi_transfer", inputs={"SPI_DATA": number(-3)})
        assert ctx.value_to_code(parent, "SPI_DATA", Order.ATOMIC) == "(-3)"
        assert ctx.value_to_code(parent, "SPI_DATA", Order.ADDITIVE) == "-3"

    def test_statement_block_in_value_input_is_rejected(self, ctx):
        parent = block("spi_transfer", inputs={"SPI_DATA": transfer_block()})
        with pytest.raises(TypeError, match="not a value block"):
            ctx.value_to_code(parent, "SPI_DATA", Order.ATOMIC)

    def test_unknown_block_type_is_not_implemented(self, ctx):
        parent = block("spi_transfer", inputs={"SPI_DATA": block("mystery")})
        with pytest.raises(NotImplementedError, match="mystery"):
            ctx.value_to_code(parent, "SPI_DATA", Order.ATOMIC)

    def test_nested_arithmetic_parenthesises_inner_sum(self, ctx):
        inner = block("math_arithmetic", fields={"OP": "ADD"}, inputs={"A": var("a"), "B": var("b")})
        outer = block("math_arithmetic", fields={"OP": "MULTIPLY"}, inputs={"A": inner, "B": number(2)})
        parent = block("spi_transfer", inputs={"SPI_DATA": outer})
        assert ctx.value_to_code(parent, "SPI_DATA", Order.NONE) == "(a + b) * 2"


class TestStatementToCode:
    def test_follows_next_chain(self, ctx):
        program = chain(transfer_block("none", number(1)), transfer_block("none", number(2)))
        assert ctx.statement_to_code(program) == "SPI.transfer(1);\nSPI.transfer(2);\n"

    def test_value_block_becomes_expression_statement(self, ctx):
        code = ctx.statement_to_code(transfer_block("none", var("x"), returns=True))
        assert code == "SPI.transfer(x);\n"

    def test_none_is_empty(self, ctx):
        assert ctx.statement_to_code(None) == ""


class TestBoardPins:
    def test_known_pin_is_clean(self, ctx):
        ctx.check_board_pin(block("spi_transfer"), "A0", "SPI Slave pin")
        assert ctx.findings == []

    def test_unknown_pin_is_a_finding(self, ctx):
        ctx.check_board_pin(block("spi_transfer", id="z"), "ICSP-4", "SPI Slave pin")

        assert [f.code for f in ctx.findings] == [UNKNOWN_PIN]
        assert ctx.findings[0].suggestion == "Pick one of the board's digital pins."
