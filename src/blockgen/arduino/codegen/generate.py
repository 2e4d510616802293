"""Top-level sketch generation."""

from __future__ import annotations

from collections.abc import Sequence

from blockgen.arduino.boards import BoardSpec, get_board
from blockgen.arduino.codegen.context import GeneratorContext
from blockgen.arduino.codegen.render import _render_sketch
from blockgen.arduino.validation import ValidationMode, raise_or_warn
from blockgen.core.block import Block


def _declare_variables(ctx: GeneratorContext, blocks: Sequence[Block]) -> None:
    """Register every variable read anywhere in the program before generating.

    Helper function names are picked while generating, so all variable names
    must be known up front for the two not to clash.
    """
    pending = list(blocks)
    while pending:
        current = pending.pop()
        if current.type == "variables_get":
            name = current.get_field("VAR")
            if name:
                ctx.add_variable_name(name)
        pending.extend(current.inputs.values())
        if current.next is not None:
            pending.append(current.next)


def generate_sketch(
    blocks: Sequence[Block],
    *,
    board: str | BoardSpec = "uno",
    mode: ValidationMode = "warn",
) -> str:
    """Generate a complete Arduino sketch from top-level statement blocks.

    Args:
        blocks: Top-level blocks; each may chain further blocks through ``next``.
        board: Catalog key or :class:`~blockgen.arduino.boards.BoardSpec`.
        mode: ``"warn"`` emits pin findings as ``UserWarning``; ``"strict"``
            raises ``ValueError`` listing them.

    Returns:
        Sketch source text ending with a newline.
    """
    if not isinstance(blocks, Sequence):
        raise TypeError(f"blocks must be a sequence of Block, got {type(blocks).__name__}")
    for item in blocks:
        if not isinstance(item, Block):
            raise TypeError(f"blocks must contain Block instances, got {type(item).__name__}")
    if isinstance(board, str):
        board_spec = get_board(board)
    elif isinstance(board, BoardSpec):
        board_spec = board
    else:
        raise TypeError(f"board must be str or BoardSpec, got {type(board).__name__}")
    if mode not in {"warn", "strict"}:
        raise ValueError("generate_sketch(...) mode must be 'warn' or 'strict'.")

    ctx = GeneratorContext(board=board_spec)
    _declare_variables(ctx, blocks)
    loop_code = "".join(ctx.statement_to_code(top) for top in blocks)

    raise_or_warn(ctx.report(mode))
    return _render_sketch(ctx, loop_code)
