"""Data models for the todo-app client."""

from .entities import (
    WireModel,
    GoalDataStatusKind,
    NamedEntityKind,
    GoalIntent,
    GoalIntentData,
    Goal,
    GoalData,
    GoalEvent,
    GoalDependency,
    TimeUtilityFunction,
    UserGeneratedCode,
    ExternalEvent,
    ExternalEventData,
    GoalTemplate,
    GoalTemplateData,
    GoalTemplatePattern,
    NamedEntity,
    NamedEntityData,
    NamedEntityPattern,
    GoalEntityTag,
    Info,
)
from .requests import RequestProps, ViewProps, InfoProps
from .results import TodoAppErrorCode, TodoAppError, Ok, Err, Result

__all__ = [
    "WireModel",
    "GoalDataStatusKind",
    "NamedEntityKind",
    "GoalIntent",
    "GoalIntentData",
    "Goal",
    "GoalData",
    "GoalEvent",
    "GoalDependency",
    "TimeUtilityFunction",
    "UserGeneratedCode",
    "ExternalEvent",
    "ExternalEventData",
    "GoalTemplate",
    "GoalTemplateData",
    "GoalTemplatePattern",
    "NamedEntity",
    "NamedEntityData",
    "NamedEntityPattern",
    "GoalEntityTag",
    "Info",
    "RequestProps",
    "ViewProps",
    "InfoProps",
    "TodoAppErrorCode",
    "TodoAppError",
    "Ok",
    "Err",
    "Result",
]
