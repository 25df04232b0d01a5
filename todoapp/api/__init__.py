"""Dispatch of todo-app operations over HTTP."""

from .registry import operation_registry, OperationRegistry, OperationSpec
from .envelope import resolve_base_url, decode_envelope
from .client import TodoAppClient
from . import endpoints

__all__ = [
    "operation_registry",
    "OperationRegistry",
    "OperationSpec",
    "resolve_base_url",
    "decode_envelope",
    "TodoAppClient",
    "endpoints",
]
