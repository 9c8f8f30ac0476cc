"""Tests for request signing."""

from __future__ import annotations

import hashlib

from audioscrobbler.api.signer import sign, signature_base


def test_signature_base_sorts_keys_and_appends_secret() -> None:
    params = {"method": "m", "foo": "bar", "api_key": "k"}

    assert signature_base(params, "s") == "api_keykfoobarmethodms"


def test_sign_is_md5_of_signature_base() -> None:
    params = {"api_key": "k", "method": "m", "foo": "bar"}

    expected = hashlib.md5(b"api_keykfoobarmethodms").hexdigest()
    assert sign(params, "s") == expected
    assert sign(params, "s") == sign(dict(params), "s")


def test_sign_ignores_input_order() -> None:
    forward = {"a": "1", "b": "2", "c": "3"}
    backward = {"c": "3", "b": "2", "a": "1"}

    assert sign(forward, "secret") == sign(backward, "secret")


def test_sign_excludes_existing_signature() -> None:
    params = {"api_key": "k", "method": "m"}
    signed = {**params, "api_sig": "whatever"}

    assert sign(signed, "s") == sign(params, "s")


def test_sign_uses_plain_string_ordering() -> None:
    # Uppercase sorts before lowercase in code point order.
    params = {"b": "1", "B": "2", "a_b": "3", "ab": "4"}

    assert signature_base(params, "") == "B2a_b3ab4b1"


def test_sign_returns_lowercase_hex() -> None:
    digest = sign({"track": "Blåbärsmjölk"}, "s")

    assert len(digest) == 32
    assert digest == digest.lower()
    assert digest == hashlib.md5("trackBlåbärsmjölks".encode("utf-8")).hexdigest()
