"""Resolution of conditional blocks"""

from typing import Optional, Sequence

from sqlstitch.exceptions import (
    EmptyConditionalBlock,
    MalformedTemplate,
    MissingConditionalArgument,
    UnclosedConditionalBlock,
    UnmatchedCloseBrace,
)
from sqlstitch.values import Value, is_skip

from .tokens import BLOCK_CLOSE, BLOCK_OPEN, PLACEHOLDER


def check_blocks(template: str) -> None:
    """Check that braces pair up, never nest and enclose a placeholder

    Only the template is looked at, so a malformed template fails the
    same way whatever the arguments are.

    Raises:
        MalformedTemplate: A block is opened inside another block
        UnmatchedCloseBrace: A block is closed without being opened
        EmptyConditionalBlock: A block contains no placeholder
        UnclosedConditionalBlock: The template ends inside a block
    """
    open_position: Optional[int] = None
    has_placeholder = False

    for position, char in enumerate(template):
        if char == BLOCK_OPEN:
            if open_position is not None:
                raise MalformedTemplate(
                    "Nested conditional blocks are not supported", position
                )
            open_position = position
            has_placeholder = False
        elif char == BLOCK_CLOSE:
            if open_position is None:
                raise UnmatchedCloseBrace("Closing brace without opening brace", position)
            if not has_placeholder:
                raise EmptyConditionalBlock(
                    "Conditional block has no placeholder", open_position
                )
            open_position = None
        elif char == PLACEHOLDER:
            has_placeholder = True

    if open_position is not None:
        raise UnclosedConditionalBlock("Conditional block is never closed", open_position)


def resolve_blocks(template: str, args: Sequence[Value]) -> tuple[str, list[Value]]:
    """Keep or drop every conditional block of a template

    A block is dropped with everything inside it when any placeholder in
    it is bound to the skip marker. Otherwise only its braces are removed.

    Returns the rewritten template and the arguments of the placeholders
    still in it, in order. Arguments of placeholders inside dropped blocks
    are left out, so the two line up one to one again. Arguments past the
    last placeholder are kept.

    The brace structure is checked before any argument is looked at.

    Raises:
        MalformedTemplate: A block is opened inside another block
        UnmatchedCloseBrace: A block is closed without being opened
        EmptyConditionalBlock: A block contains no placeholder
        UnclosedConditionalBlock: The template ends inside a block
        MissingConditionalArgument: A placeholder in a block has no argument
    """
    if BLOCK_OPEN not in template and BLOCK_CLOSE not in template:
        return template, list(args)

    check_blocks(template)

    output: list[str] = []
    block: list[str] = []
    block_args: list[int] = []
    dropped: set[int] = set()
    in_block = False
    arg_index = 0

    for char in template:
        if char == BLOCK_OPEN:
            in_block = True
            continue

        if char == BLOCK_CLOSE:
            if any(is_skip(args[index]) for index in block_args):
                dropped.update(block_args)
            else:
                output.extend(block)
            block = []
            block_args = []
            in_block = False
            continue

        if char == PLACEHOLDER:
            if in_block:
                if arg_index >= len(args):
                    raise MissingConditionalArgument(
                        f"No argument for placeholder #{arg_index + 1} "
                        "in conditional block"
                    )
                block_args.append(arg_index)
            arg_index += 1

        if not in_block:
            output.append(char)
        else:
            block.append(char)

    remaining = [value for index, value in enumerate(args) if index not in dropped]
    return "".join(output), remaining


def resolve_conditionals(template: str, args: Sequence[Value]) -> str:
    """Keep or drop every conditional block, returning only the template"""
    return resolve_blocks(template, args)[0]
