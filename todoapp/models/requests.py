"""
Request parameter models for the todo-app client.

There is one model per backend operation. "New" models carry the fields of
the record to create or the revision to append. "View" models carry filters:
list valued filters match any of the given values, ``min_*``/``max_*`` pairs
bound a numeric range, and the backend intersects every supplied constraint.
Every request carries the caller's API key.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ConfigDict, Field

from .entities import WireModel, GoalDataStatusKind, NamedEntityKind


class RequestProps(WireModel):
    """
    Base for request parameters.

    Unlike response records, request models reject unknown fields so that a
    misspelled filter fails loudly instead of being silently ignored.
    """

    model_config = ConfigDict(extra="forbid")

    api_key: str = Field(..., description="Caller supplied API key, validated by the backend")

    def to_body(self) -> Dict[str, Any]:
        """
        Serialize to the JSON request body.

        Optional fields that were not supplied are omitted rather than sent
        as null.
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# New operations

class ExternalEventNewProps(RequestProps):
    name: str
    start_time: int
    end_time: int


class ExternalEventDataNewProps(RequestProps):
    external_event_id: int
    name: str
    start_time: int
    end_time: int
    active: bool


class GoalIntentNewProps(RequestProps):
    name: str


class GoalIntentDataNewProps(RequestProps):
    goal_intent_id: int
    name: str
    active: bool


class GoalNewProps(RequestProps):
    """Create a goal, optionally promoting an intent and scheduling it."""

    name: str
    duration_estimate: Optional[int] = None
    time_utility_function_id: int
    goal_intent_id: Optional[int] = None
    time_span: Optional[Tuple[int, int]] = Field(
        None,
        description="(start_time, end_time) of an event to schedule with the goal"
    )


class GoalDataNewProps(RequestProps):
    goal_id: int
    name: str
    duration_estimate: Optional[int] = None
    time_utility_function_id: int
    status: GoalDataStatusKind


class GoalEventNewProps(RequestProps):
    goal_id: int
    start_time: int
    end_time: int
    active: bool


class GoalDependencyNewProps(RequestProps):
    """The backend rejects dependencies that would form a cycle."""

    goal_id: int
    dependent_goal_id: int
    active: bool


class GoalEntityTagNewProps(RequestProps):
    goal_id: int
    named_entity_id: int
    active: bool


class TimeUtilityFunctionNewProps(RequestProps):
    start_times: List[int]
    utils: List[float]


class UserGeneratedCodeNewProps(RequestProps):
    source_code: str
    source_lang: str
    wasm_cache: List[int]


class GoalTemplateNewProps(RequestProps):
    name: str
    utility: float
    duration_estimate: Optional[int] = None
    user_generated_code_id: int


class GoalTemplateDataNewProps(RequestProps):
    goal_template_id: int
    name: str
    utility: float
    duration_estimate: Optional[int] = None
    user_generated_code_id: int
    active: bool


class GoalTemplatePatternNewProps(RequestProps):
    goal_template_id: int
    pattern: str
    active: bool


class NamedEntityNewProps(RequestProps):
    name: str
    kind: NamedEntityKind


class NamedEntityDataNewProps(RequestProps):
    named_entity_id: int
    name: str
    kind: NamedEntityKind
    active: bool


class NamedEntityPatternNewProps(RequestProps):
    named_entity_id: int
    pattern: str
    active: bool


# View operations

class ViewProps(RequestProps):
    """Filters shared by every view: creation time range and creator."""

    min_creation_time: Optional[int] = None
    max_creation_time: Optional[int] = None
    creator_user_id: Optional[List[int]] = None


class GoalIntentViewProps(ViewProps):
    goal_intent_id: Optional[List[int]] = None


class GoalIntentDataViewProps(ViewProps):
    goal_intent_data_id: Optional[List[int]] = None
    goal_intent_id: Optional[List[int]] = None
    name: Optional[List[str]] = None
    responded: Optional[bool] = None
    active: Optional[bool] = None
    only_recent: bool = Field(..., description="Only return the latest revision per intent")


class GoalViewProps(ViewProps):
    goal_id: Optional[List[int]] = None
    goal_intent_id: Optional[List[int]] = None


class GoalDataViewProps(ViewProps):
    goal_data_id: Optional[List[int]] = None
    goal_id: Optional[List[int]] = None
    name: Optional[List[str]] = None
    min_duration_estimate: Optional[int] = None
    max_duration_estimate: Optional[int] = None
    concrete: Optional[bool] = Field(
        None,
        description="Only goals that do (True) or do not (False) have a duration estimate"
    )
    time_utility_function_id: Optional[List[int]] = None
    status: Optional[List[GoalDataStatusKind]] = None
    only_recent: bool
    goal_intent_id: Optional[List[int]] = None
    scheduled: Optional[bool] = Field(
        None,
        description="Only goals that do (True) or do not (False) have an active event"
    )


class GoalEventViewProps(ViewProps):
    goal_event_id: Optional[List[int]] = None
    goal_id: Optional[List[int]] = None
    min_start_time: Optional[int] = None
    max_start_time: Optional[int] = None
    min_end_time: Optional[int] = None
    max_end_time: Optional[int] = None
    active: Optional[bool] = None
    only_recent: bool


class GoalDependencyViewProps(ViewProps):
    goal_dependency_id: Optional[List[int]] = None
    goal_id: Optional[List[int]] = None
    dependent_goal_id: Optional[List[int]] = None
    active: Optional[bool] = None
    only_recent: bool


class GoalTemplateViewProps(ViewProps):
    goal_template_id: Optional[List[int]] = None


class GoalTemplateDataViewProps(ViewProps):
    goal_template_data_id: Optional[List[int]] = None
    goal_template_id: Optional[List[int]] = None
    name: Optional[List[str]] = None
    min_utility: Optional[float] = None
    max_utility: Optional[float] = None
    min_duration_estimate: Optional[int] = None
    max_duration_estimate: Optional[int] = None
    concrete: Optional[bool] = None
    user_generated_code_id: Optional[List[int]] = None
    active: Optional[bool] = None
    only_recent: bool


class GoalTemplatePatternViewProps(ViewProps):
    goal_template_pattern_id: Optional[List[int]] = None
    goal_template_id: Optional[List[int]] = None
    pattern: Optional[List[str]] = None
    active: Optional[bool] = None
    only_recent: bool


class ExternalEventViewProps(ViewProps):
    external_event_id: Optional[List[int]] = None


class ExternalEventDataViewProps(ViewProps):
    external_event_data_id: Optional[List[int]] = None
    external_event_id: Optional[List[int]] = None
    name: Optional[List[str]] = None
    min_start_time: Optional[int] = None
    max_start_time: Optional[int] = None
    min_end_time: Optional[int] = None
    max_end_time: Optional[int] = None
    active: Optional[bool] = None
    only_recent: bool


class TimeUtilityFunctionViewProps(ViewProps):
    time_utility_function_id: Optional[List[int]] = None


class UserGeneratedCodeViewProps(ViewProps):
    user_generated_code_id: Optional[List[int]] = None
    source_lang: Optional[List[str]] = None


class NamedEntityViewProps(ViewProps):
    named_entity_id: Optional[List[int]] = None


class NamedEntityDataViewProps(ViewProps):
    named_entity_data_id: Optional[List[int]] = None
    named_entity_id: Optional[List[int]] = None
    name: Optional[List[str]] = None
    kind: Optional[List[NamedEntityKind]] = None
    active: Optional[bool] = None
    only_recent: bool


class NamedEntityPatternViewProps(ViewProps):
    named_entity_pattern_id: Optional[List[int]] = None
    named_entity_id: Optional[List[int]] = None
    pattern: Optional[List[str]] = None
    active: Optional[bool] = None
    only_recent: bool


class GoalEntityTagViewProps(ViewProps):
    goal_entity_tag_id: Optional[List[int]] = None
    named_entity_id: Optional[List[int]] = None
    goal_id: Optional[List[int]] = None
    active: Optional[bool] = None
    only_recent: bool


class InfoProps(WireModel):
    """The ``info`` endpoint takes no parameters and no API key."""

    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> Dict[str, Any]:
        return {}
