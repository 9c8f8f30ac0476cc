"""Tests for the method registry and the static method table."""

from __future__ import annotations

import pytest

from audioscrobbler.api.methods import DEFAULT_REGISTRY, METHODS
from audioscrobbler.api.registry import AuthMode, MethodDescriptor, MethodRegistry


def test_lookup_returns_descriptor() -> None:
    descriptor = DEFAULT_REGISTRY.lookup("artist", "getInfo")

    assert descriptor.wire_name == "artist.getInfo"
    assert descriptor.required == ("artist",)
    assert descriptor.auth is AuthMode.NONE


def test_lookup_wire_name_matches_lookup() -> None:
    assert DEFAULT_REGISTRY.lookup_wire_name("track.love") is DEFAULT_REGISTRY.lookup("track", "love")


def test_lookup_unknown_method_raises_key_error() -> None:
    with pytest.raises(KeyError):
        _ = DEFAULT_REGISTRY.lookup("artist", "doesNotExist")


def test_all_methods_preserves_table_order() -> None:
    assert DEFAULT_REGISTRY.all_methods() == METHODS
    assert len(DEFAULT_REGISTRY) == len(METHODS)


def test_groups_in_first_seen_order() -> None:
    groups = DEFAULT_REGISTRY.groups()

    assert groups[0] == "album"
    assert {"artist", "auth", "track", "user"} <= set(groups)
    assert len(groups) == len(set(groups))


def test_session_bootstrap_methods_are_signed() -> None:
    for name in ("getToken", "getSession"):
        descriptor = DEFAULT_REGISTRY.lookup("auth", name)
        assert descriptor.auth is AuthMode.SESSION_BOOTSTRAP
        assert descriptor.signed


def test_parameter_names_are_required_then_optional() -> None:
    descriptor = MethodDescriptor(
        "track",
        "search",
        required=("track",),
        optional=(("artist", None), ("limit", "10")),
    )

    assert descriptor.parameter_names == ("track", "artist", "limit")
    assert not descriptor.signed


def test_registry_rejects_overlapping_parameters() -> None:
    descriptor = MethodDescriptor("artist", "getInfo", required=("artist",), optional=(("artist", None),))

    with pytest.raises(ValueError, match="both required and optional"):
        _ = MethodRegistry([descriptor])


def test_registry_rejects_duplicate_methods() -> None:
    descriptor = MethodDescriptor("artist", "getInfo")

    with pytest.raises(ValueError, match="Duplicate"):
        _ = MethodRegistry([descriptor, descriptor])


def test_static_table_is_consistent() -> None:
    for descriptor in METHODS:
        assert not set(descriptor.required) & set(descriptor.optional_names)
        if descriptor.auth is AuthMode.REQUIRED:
            assert descriptor.signed
