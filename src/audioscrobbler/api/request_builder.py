"""Where: src/audioscrobbler/api/request_builder.py
What: Turn a method descriptor and call arguments into the POST parameter set.
Why: Keep argument binding, session attachment and signing in one place.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from audioscrobbler.errors import ArityError, ConfigError

from .registry import AuthMode, MethodDescriptor
from .signer import SIGNATURE_KEY, sign


class CredentialSource(Protocol):
    """Credential values consulted while building each request."""

    @property
    def api_key(self) -> str | None: ...

    @property
    def shared_secret(self) -> str | None: ...

    @property
    def session_key(self) -> str | None: ...


def check_arguments(
    descriptor: MethodDescriptor,
    positional: Sequence[object],
    keywords: Mapping[str, object],
) -> None:
    """Validate call arguments against ``descriptor``.

    Raises:
        ArityError: When the positional count differs from the required
            parameters, a required value is ``None``, or a keyword does not
            name an optional parameter.
    """

    expected = len(descriptor.required)
    if len(positional) != expected:
        raise ArityError(
            f"{descriptor.wire_name}() takes {expected} positional argument(s) "
            f"({', '.join(descriptor.required) or 'none'}) but {len(positional)} were given"
        )
    missing = [name for name, value in zip(descriptor.required, positional) if value is None]
    if missing:
        raise ArityError(f"{descriptor.wire_name}() required argument(s) are None: {', '.join(missing)}")
    allowed = set(descriptor.optional_names)
    unexpected = [name for name in keywords if name not in allowed]
    if unexpected:
        raise ArityError(
            f"{descriptor.wire_name}() got unexpected keyword argument(s): {', '.join(unexpected)}"
        )


def build_request(
    descriptor: MethodDescriptor,
    positional: Sequence[object],
    keywords: Mapping[str, object],
    credentials: CredentialSource,
) -> dict[str, str]:
    """Build the parameter set for one call.

    Credentials are read on every call so that a session key obtained
    mid-process is picked up by the next request.

    Raises:
        ArityError: See :func:`check_arguments`.
        ConfigError: When a credential needed by ``descriptor`` is missing.
    """

    check_arguments(descriptor, positional, keywords)

    api_key = credentials.api_key
    if not api_key:
        raise ConfigError("An API key must be configured before calling the service")

    params: dict[str, str] = {"api_key": api_key, "method": descriptor.wire_name}

    resolved = [keywords.get(name, default) for name, default in descriptor.optional]
    for name, value in zip(descriptor.parameter_names, [*positional, *resolved]):
        if value is None:
            continue
        params[name] = str(value)

    if descriptor.auth is AuthMode.REQUIRED:
        session_key = credentials.session_key
        if not session_key:
            raise ConfigError(
                f"{descriptor.wire_name} requires a session key; run the authorization flow first"
            )
        params["sk"] = session_key

    if descriptor.signed:
        secret = credentials.shared_secret
        if not secret:
            raise ConfigError(f"{descriptor.wire_name} requires a shared secret for signing")
        params[SIGNATURE_KEY] = sign(params, secret)

    return params


__all__ = ["CredentialSource", "build_request", "check_arguments"]
