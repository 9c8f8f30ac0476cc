"""Where: src/audioscrobbler/api/signer.py
What: Compute the ``api_sig`` request signature.
Why: The service verifies requests against an MD5 digest of the sorted parameters.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Final

SIGNATURE_KEY: Final[str] = "api_sig"


def signature_base(params: Mapping[str, str], secret: str) -> str:
    """Return the string that gets digested: sorted ``keyvalue`` pairs plus the secret.

    Any ``api_sig`` entry already present is left out.
    """

    parts = [f"{key}{params[key]}" for key in sorted(params) if key != SIGNATURE_KEY]
    return "".join(parts) + secret


def sign(params: Mapping[str, str], secret: str) -> str:
    """Return the lowercase hex MD5 signature for ``params``."""

    return hashlib.md5(signature_base(params, secret).encode("utf-8")).hexdigest()


__all__ = ["SIGNATURE_KEY", "sign", "signature_base"]
