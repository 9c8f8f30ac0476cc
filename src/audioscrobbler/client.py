"""Where: src/audioscrobbler/client.py
What: Client facade exposing generated bindings grouped by resource.
Why: Give callers ``client.artist.getInfo("Cher")`` on top of the method table.
"""

from __future__ import annotations

from typing import final

from audioscrobbler.api.bindings import Binding, generate_bindings
from audioscrobbler.api.methods import DEFAULT_REGISTRY
from audioscrobbler.api.registry import MethodDescriptor, MethodRegistry
from audioscrobbler.api.response_parser import Record
from audioscrobbler.config.config import Config
from audioscrobbler.platform.lastfm.http_client import RequestsTransport, Transport


@final
class MethodGroup:
    """Attribute namespace holding the bindings of one resource group."""

    def __init__(self, name: str, bindings: dict[str, Binding]) -> None:
        self._name: str = name
        self._bindings: dict[str, Binding] = bindings

    def __getattr__(self, item: str) -> Binding:
        try:
            return self._bindings[item]
        except KeyError:
            raise AttributeError(f"No method '{self._name}.{item}'") from None

    def __dir__(self) -> list[str]:
        return sorted(self._bindings)

    def __repr__(self) -> str:
        return f"<MethodGroup {self._name}: {', '.join(sorted(self._bindings))}>"


class LastFMClient:
    """Last.fm 2.0 client built from the method registry.

    The ``config`` object is held by reference: credentials, the API URL
    and the strict-records switch are read on every call.
    """

    def __init__(
        self,
        config: Config,
        transport: Transport | None = None,
        registry: MethodRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self.config: Config = config
        self.registry: MethodRegistry = registry
        self.transport: Transport = transport or RequestsTransport()
        self._bindings: dict[str, Binding] = generate_bindings(
            registry,
            config,
            self.transport,
            api_url=lambda: self.config.api_url,
            strict=lambda: self.config.strict_records,
        )
        self._groups: dict[str, MethodGroup] = {
            group: MethodGroup(
                group,
                {b.descriptor.name: b for b in self._bindings.values() if b.descriptor.group == group},
            )
            for group in registry.groups()
        }

    def __getattr__(self, item: str) -> MethodGroup:
        groups = self.__dict__.get("_groups", {})
        if item in groups:
            return groups[item]
        raise AttributeError(f"{type(self).__name__!s} has no attribute or method group '{item}'")

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._groups})

    def binding(self, wire_name: str) -> Binding:
        """Return the binding for ``"group.name"``.

        Raises:
            KeyError: If the method is not registered.
        """
        return self._bindings[wire_name]

    def call(self, wire_name: str, *args: object, **kwargs: object) -> list[Record]:
        return self.binding(wire_name)(*args, **kwargs)

    def methods(self) -> tuple[MethodDescriptor, ...]:
        return self.registry.all_methods()


__all__ = ["LastFMClient", "MethodGroup"]
