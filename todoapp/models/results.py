"""
Result types for the todo-app client.

Every call resolves to either ``Ok`` wrapping the decoded response or ``Err``
wrapping one of the closed ``TodoAppErrorCode`` members. Failures are values:
callers branch on the result instead of catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


class TodoAppErrorCode(str, Enum):
    """
    Error kinds reported by the backend, plus NETWORK and UNKNOWN which the
    client produces itself.
    """

    NO_CAPABILITY = "NO_CAPABILITY"
    GOAL_INTENT_NONEXISTENT = "GOAL_INTENT_NONEXISTENT"
    GOAL_NONEXISTENT = "GOAL_NONEXISTENT"
    GOAL_EVENT_NONEXISTENT = "GOAL_EVENT_NONEXISTENT"
    GOAL_TEMPLATE_NONEXISTENT = "GOAL_TEMPLATE_NONEXISTENT"
    EXTERNAL_EVENT_NONEXISTENT = "EXTERNAL_EVENT_NONEXISTENT"
    NAMED_ENTITY_NONEXISTENT = "NAMED_ENTITY_NONEXISTENT"
    USER_GENERATED_CODE_NONEXISTENT = "USER_GENERATED_CODE_NONEXISTENT"
    TIME_UTILITY_FUNCTION_NONEXISTENT = "TIME_UTILITY_FUNCTION_NONEXISTENT"
    TIME_UTILITY_FUNCTION_NOT_VALID = "TIME_UTILITY_FUNCTION_NOT_VALID"
    NEGATIVE_START_TIME = "NEGATIVE_START_TIME"
    NEGATIVE_DURATION = "NEGATIVE_DURATION"
    GOAL_FORMS_CYCLE = "GOAL_FORMS_CYCLE"
    DECODE_ERROR = "DECODE_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    UNAUTHORIZED = "UNAUTHORIZED"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    NETWORK = "NETWORK"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Any) -> "TodoAppErrorCode":
        """
        Map a raw error payload onto an error code.

        Anything that is not one of the known codes becomes UNKNOWN.
        """
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class TodoAppError(Exception):
    """Raised by ``Err.unwrap()`` for callers that prefer exceptions."""

    def __init__(self, code: TodoAppErrorCode):
        super().__init__(code.value)
        self.code = code


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful result of a call.

    ``value`` is the decoded response body: a mapping or a list of mappings,
    or typed records when response validation is turned on.
    """
    value: T

    @property
    def is_ok(self) -> bool:
        """Always True for ``Ok``."""
        return True

    @property
    def is_err(self) -> bool:
        """Always False for ``Ok``."""
        return False

    def unwrap(self) -> T:
        """
        Get the wrapped value.

        Returns:
            The decoded response body
        """
        return self.value

    def to_envelope(self) -> Dict[str, Any]:
        """
        Convert back to the backend's wire envelope.

        Records are dumped with their wire field names, so a validated value
        produces the same JSON the server sent.

        Returns:
            Dictionary of the form {"Ok": value}
        """
        value = self.value
        if hasattr(value, "to_wire"):
            value = value.to_wire()
        elif isinstance(value, list):
            value = [v.to_wire() if hasattr(v, "to_wire") else v for v in value]
        return {"Ok": value}


@dataclass(frozen=True)
class Err:
    """Failed result of a call, carrying one error code."""
    error: TodoAppErrorCode

    @property
    def is_ok(self) -> bool:
        """Always False for ``Err``."""
        return False

    @property
    def is_err(self) -> bool:
        """Always True for ``Err``."""
        return True

    def unwrap(self):
        """
        Raise the error for callers that prefer exceptions.

        Raises:
            TodoAppError: Always, carrying this result's error code
        """
        raise TodoAppError(self.error)

    def to_envelope(self) -> Dict[str, Any]:
        """
        Convert back to the backend's wire envelope.

        Returns:
            Dictionary of the form {"Err": "<CODE>"}
        """
        return {"Err": self.error.value}


Result = Union[Ok[T], Err]
