"""Where: src/audioscrobbler/api/registry.py
What: Method descriptor model and the read-only registry built from it.
Why: Keep the remote method table as plain data that bindings are generated from.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import final


class AuthMode(Enum):
    """Authentication requirement of a remote method."""

    NONE = "none"
    REQUIRED = "required"
    SESSION_BOOTSTRAP = "session-bootstrap"


@final
@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """Immutable description of one remote method.

    Attributes:
        group: Resource category, e.g. ``"artist"``.
        name: Method name within the group, e.g. ``"getInfo"``.
        auth: Authentication requirement.
        required: Positional parameter names, in call order.
        optional: ``(name, default)`` pairs; a ``None`` default means the
            parameter is omitted unless supplied.
        selectors: One selector per field of the result records.
    """

    group: str
    name: str
    auth: AuthMode = AuthMode.NONE
    required: tuple[str, ...] = ()
    optional: tuple[tuple[str, str | None], ...] = ()
    selectors: tuple[str, ...] = ()

    @property
    def wire_name(self) -> str:
        return f"{self.group}.{self.name}"

    @property
    def signed(self) -> bool:
        return self.auth is not AuthMode.NONE

    @property
    def optional_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.optional)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Required names followed by optional names, in declaration order."""

        return self.required + self.optional_names


class MethodRegistry:
    """Lookup table over a fixed sequence of method descriptors."""

    def __init__(self, descriptors: Iterable[MethodDescriptor]) -> None:
        self._descriptors: tuple[MethodDescriptor, ...] = tuple(descriptors)
        self._by_wire_name: dict[str, MethodDescriptor] = {}
        for descriptor in self._descriptors:
            _validate(descriptor)
            if descriptor.wire_name in self._by_wire_name:
                raise ValueError(f"Duplicate method descriptor: {descriptor.wire_name}")
            self._by_wire_name[descriptor.wire_name] = descriptor

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, wire_name: object) -> bool:
        return wire_name in self._by_wire_name

    def lookup(self, group: str, name: str) -> MethodDescriptor:
        """Return the descriptor registered for ``group.name``.

        Raises:
            KeyError: If no such method is registered.
        """

        return self._by_wire_name[f"{group}.{name}"]

    def lookup_wire_name(self, wire_name: str) -> MethodDescriptor:
        group, _, name = wire_name.partition(".")
        return self.lookup(group, name)

    def all_methods(self) -> tuple[MethodDescriptor, ...]:
        return self._descriptors

    def groups(self) -> tuple[str, ...]:
        """Group names in the order they first appear in the table."""

        return tuple(dict.fromkeys(descriptor.group for descriptor in self._descriptors))


def _validate(descriptor: MethodDescriptor) -> None:
    overlap = set(descriptor.required) & set(descriptor.optional_names)
    if overlap:
        raise ValueError(
            f"{descriptor.wire_name}: parameters both required and optional: {sorted(overlap)}"
        )
    names = descriptor.parameter_names
    if len(set(names)) != len(names):
        raise ValueError(f"{descriptor.wire_name}: duplicate parameter names")


__all__ = [
    "AuthMode",
    "MethodDescriptor",
    "MethodRegistry",
]
