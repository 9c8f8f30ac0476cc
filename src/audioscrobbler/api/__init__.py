"""Table-driven API layer.

The method table in :mod:`.methods` is pure data. :mod:`.bindings` turns each
row into a callable that builds a signed request with :mod:`.request_builder`
and shapes the XML reply with :mod:`.response_parser`.
"""

from .bindings import Binding, generate_bindings
from .methods import DEFAULT_REGISTRY, METHODS
from .registry import AuthMode, MethodDescriptor, MethodRegistry
from .request_builder import build_request
from .response_parser import Record, label_records, parse_response
from .signer import sign, signature_base

__all__ = [
    "AuthMode",
    "Binding",
    "DEFAULT_REGISTRY",
    "METHODS",
    "MethodDescriptor",
    "MethodRegistry",
    "Record",
    "build_request",
    "generate_bindings",
    "label_records",
    "parse_response",
    "sign",
    "signature_base",
]
