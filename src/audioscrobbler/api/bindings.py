"""Where: src/audioscrobbler/api/bindings.py
What: Generate one callable per registered method.
Why: Compose request building, transport and response shaping behind a plain call.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from audioscrobbler.errors import ServiceError, TransportError
from audioscrobbler.platform.lastfm.http_client import Transport
from audioscrobbler.platform.logging import logger

from .registry import MethodDescriptor, MethodRegistry
from .request_builder import CredentialSource, build_request
from .response_parser import Record, find_service_error, parse_response


def _describe(descriptor: MethodDescriptor) -> str:
    lines = [f"Call ``{descriptor.wire_name}`` ({descriptor.auth.value} auth)."]
    if descriptor.required:
        lines.append("")
        lines.append(f"Positional: {', '.join(descriptor.required)}")
    if descriptor.optional:
        lines.append("")
        lines.append(
            "Keyword: "
            + ", ".join(f"{name}={default!r}" for name, default in descriptor.optional)
        )
    if descriptor.selectors:
        lines.append("")
        lines.append(f"Record fields: {', '.join(descriptor.selectors)}")
    return "\n".join(lines)


@final
class Binding:
    """Callable bound to one method descriptor."""

    def __init__(
        self,
        descriptor: MethodDescriptor,
        invoke: Callable[[MethodDescriptor, tuple[object, ...], dict[str, object]], list[Record]],
    ) -> None:
        self.descriptor: MethodDescriptor = descriptor
        self._invoke = invoke
        self.__name__ = descriptor.name
        self.__qualname__ = descriptor.wire_name
        self.__doc__ = _describe(descriptor)

    def __call__(self, *args: object, **kwargs: object) -> list[Record]:
        return self._invoke(self.descriptor, args, kwargs)

    def __repr__(self) -> str:
        return f"<Binding {self.descriptor.wire_name}>"


def generate_bindings(
    registry: MethodRegistry,
    credentials: CredentialSource,
    transport: Transport,
    *,
    api_url: str | Callable[[], str],
    strict: bool | Callable[[], bool] = False,
) -> dict[str, Binding]:
    """Create bindings for every method in ``registry``, keyed by wire name.

    ``api_url`` and ``strict`` may be callables so that the values are read
    at call time, like the credentials. No I/O happens here.
    """

    def current_url() -> str:
        return api_url() if callable(api_url) else api_url

    def current_strict() -> bool:
        return strict() if callable(strict) else strict

    def invoke(
        descriptor: MethodDescriptor,
        args: tuple[object, ...],
        kwargs: dict[str, object],
    ) -> list[Record]:
        method = descriptor.wire_name
        params = build_request(descriptor, args, kwargs, credentials)
        logger.debug(
            "Calling %s", method, extra={"api_event": "api.call.start", "method": method}
        )

        try:
            text = transport.send(current_url(), params)
        except TransportError as exc:
            service_error = find_service_error(exc.body) if exc.body else None
            if service_error is None:
                raise
            _log_service_error(method, service_error)
            raise service_error from exc

        try:
            records = parse_response(text, descriptor, strict=current_strict())
        except ServiceError as exc:
            _log_service_error(method, exc)
            raise

        logger.debug(
            "%s returned %d record(s)",
            method,
            len(records),
            extra={"api_event": "api.call.complete", "method": method, "record_count": len(records)},
        )
        return records

    return {descriptor.wire_name: Binding(descriptor, invoke) for descriptor in registry.all_methods()}


def _log_service_error(method: str, error: ServiceError) -> None:
    logger.warning(
        "%s failed: %s",
        method,
        error.message,
        extra={"api_event": "api.call.error", "method": method, "error_message": error.message},
    )


__all__ = ["Binding", "generate_bindings"]
