"""Substitution of placeholder tokens"""

from typing import Callable, Optional, Sequence

from sqlstitch.exceptions import MissingArgument
from sqlstitch.values import Value, is_skip

from .formatter import ValueFormatter
from .tokens import PLACEHOLDER, Placeholder, read_placeholder

SkipHandler = Callable[[Placeholder, int], None]


def substitute_placeholders(
    template: str,
    args: Sequence[Value],
    formatter: ValueFormatter,
    on_skip: Optional[SkipHandler] = None,
) -> str:
    """Replace each placeholder with its formatted argument

    Arguments are consumed left to right, one per placeholder. Formatted
    text is written to the output and never rescanned. A placeholder bound
    to the skip marker is left as written; on_skip is called with the
    token and its argument index first.
    """
    output: list[str] = []
    arg_index = 0
    cursor = 0

    while True:
        position = template.find(PLACEHOLDER, cursor)
        if position == -1:
            break

        token = read_placeholder(template, position)
        if arg_index >= len(args):
            raise MissingArgument(
                f"No argument for placeholder #{arg_index + 1} at position {position}"
            )
        value = args[arg_index]

        output.append(template[cursor:position])
        if is_skip(value):
            if on_skip is not None:
                on_skip(token, arg_index)
            output.append(template[position:token.end])
        else:
            output.append(formatter.format(value, token.specifier))

        arg_index += 1
        cursor = token.end

    output.append(template[cursor:])
    return "".join(output)
