from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Final

from .exceptions import CommandParseError
from .schema import TaskCommand

COMMAND_PREFIX: Final = "##vso["


def encode(
    command: str, properties: Mapping[str, str] | None = None, message: str = ""
) -> str:
    """
    Serialize a directive.

    >>> encode("task.complete", {"result": "Succeeded"}, "done")
    '##vso[task.complete result=Succeeded;]done'
    """
    line = COMMAND_PREFIX + command
    if properties:
        line += " " + "".join(f"{key}={value};" for key, value in properties.items())
    return f"{line}]{message}"


def decode(line: str) -> TaskCommand:
    """Parse a directive line. The message after `]` is taken verbatim."""
    if not line.startswith(COMMAND_PREFIX):
        raise CommandParseError(line, "Missing command prefix")

    end = line.find("]", len(COMMAND_PREFIX))
    if end == -1:
        raise CommandParseError(line, "Missing closing bracket")

    info = line[len(COMMAND_PREFIX) : end]
    command, sep, prop_section = info.partition(" ")
    if not command:
        raise CommandParseError(line, "Missing command name")

    properties: dict[str, str] = {}
    if sep:
        for pair in prop_section.split(";"):
            # keys and values are kept verbatim, only blank pairs are skipped
            if not pair.strip():
                continue
            parts = pair.split("=")
            if len(parts) != 2 or not parts[0]:
                raise CommandParseError(line, f"Invalid property {pair!r}")
            key, value = parts
            if key in properties:
                raise CommandParseError(line, f"Duplicate property {key!r}")
            properties[key] = value

    return TaskCommand(command, properties, line[end + 1 :])


def iter_commands(lines: Iterable[str]) -> Iterator[TaskCommand]:
    """Yield the directives found in process output, skipping ordinary lines."""
    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith(COMMAND_PREFIX):
            yield decode(line)
