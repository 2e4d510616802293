"""Assemble registries and loop code into one Arduino sketch."""

from __future__ import annotations

from blockgen.arduino.codegen.context import GeneratorContext
from blockgen.core._util import _indent_body


def _render_function_section(ctx: GeneratorContext) -> list[str]:
    lines: list[str] = []
    for code in ctx.functions.values():
        if lines:
            lines.append("")
        lines.extend(code.split("\n"))
    return lines


def _render_sketch(ctx: GeneratorContext, loop_code: str) -> str:
    lines: list[str] = []

    # 1) includes
    if ctx.includes:
        lines.extend(ctx.includes.values())
        lines.append("")

    # 2) generated helper functions
    function_lines = _render_function_section(ctx)
    if function_lines:
        lines.extend(function_lines)
        lines.append("")

    # 3) setup(): promoted entries first
    lines.append("void setup() {")
    lines.extend(_indent_body(ctx.ordered_setups(), 2))
    lines.append("}")
    lines.append("")

    # 4) loop()
    lines.append("void loop() {")
    if loop_code:
        lines.extend(_indent_body(loop_code.rstrip("\n").split("\n"), 2))
    lines.append("}")

    return "\n".join(lines) + "\n"
