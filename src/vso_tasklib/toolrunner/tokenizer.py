from __future__ import annotations

from .exceptions import ArgumentParseError


def split_args(arg_string: str) -> list[str]:
    """
    Split an argument line into tokens.

    Whitespace separates tokens unless it is inside a double-quoted span. The quotes
    themselves are dropped, so `foo="bar baz" -x` gives `["foo=bar baz", "-x"]`.
    Inside quotes `\\"` yields a literal quote; other backslashes are kept as-is.
    """
    args: list[str] = []
    current: list[str] = []
    in_quotes = False
    quoted = False  # current token had a quoted span, so keep it even if empty
    escaped = False

    for c in arg_string:
        if escaped:
            if c != '"':
                current.append("\\")
            current.append(c)
            escaped = False
        elif c == "\\" and in_quotes:
            escaped = True
        elif c == '"':
            in_quotes = not in_quotes
            quoted = True
        elif c.isspace() and not in_quotes:
            if current or quoted:
                args.append("".join(current))
                current = []
                quoted = False
        else:
            current.append(c)

    if in_quotes:
        raise ArgumentParseError(f"Unterminated quote in {arg_string!r}")
    if current or quoted:
        args.append("".join(current))
    return args


def append_args(args: list[str], arg_string: str) -> list[str]:
    """Tokenize `arg_string` and extend `args` in place."""
    args.extend(split_args(arg_string))
    return args
