from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from attrs import field, frozen


def _freeze(properties: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(properties or {}))


@frozen
class TaskCommand:
    """
    A single `##vso[...]` directive.

    Property order is preserved for serialization. Values must not contain `;`, `=`
    or `]`: the wire format has no escaping and such values do not survive a round trip.
    """

    command: str
    properties: Mapping[str, str] = field(
        factory=dict, converter=_freeze, eq=lambda p: frozenset(p.items())
    )
    message: str = ""

    def __str__(self) -> str:
        from .codec import encode

        return encode(self.command, self.properties, self.message)
