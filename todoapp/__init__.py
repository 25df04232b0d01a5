"""
todoapp: A typed client for the todo-app goal management backend.

Builds request payloads from typed parameter models, sends them to the
backend and unwraps the Ok/Err envelope into a result value.
"""

__version__ = "0.1.0"
__author__ = "todoapp Project"

# Import main components
from .config import ConfigManager, get_config
from .models import Ok, Err, Result, TodoAppErrorCode, TodoAppError
from .api import TodoAppClient, operation_registry, resolve_base_url, decode_envelope
from .api.endpoints import *  # noqa: F401,F403

__all__ = [
    "ConfigManager",
    "get_config",
    "Ok",
    "Err",
    "Result",
    "TodoAppErrorCode",
    "TodoAppError",
    "TodoAppClient",
    "operation_registry",
    "resolve_base_url",
    "decode_envelope",
] + operation_registry.list_operations()
