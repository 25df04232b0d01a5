"""
Entity models for the todo-app client.

This module defines the records returned by the todo-app backend. Every
entity follows the same split: an immutable identity record carrying only an
id, a creation time and the creator's user id, and append-only "Data"
revisions that reference the identity record and carry the mutable fields.
The backend treats the newest revision per identity as current.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for every model exchanged with the backend.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Dump the record back to the JSON shape it was read from."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class GoalDataStatusKind(str, Enum):
    """Lifecycle state of a goal's latest data revision."""

    SUCCEED = "SUCCEED"
    FAIL = "FAIL"
    CANCEL = "CANCEL"
    PENDING = "PENDING"


class NamedEntityKind(str, Enum):
    """Categories of entities extracted from free text."""

    DATE = "DATE"
    TIME = "TIME"
    MONEY = "MONEY"
    URL = "URL"
    PERSON = "PERSON"
    LOCATION = "LOCATION"
    HASHTAG = "HASHTAG"
    EMOTICON = "EMOTICON"
    EMOJI = "EMOJI"
    PROPN = "PROPN"
    VERB = "VERB"


class GoalIntent(WireModel):
    """
    Identity record of a goal intent, an idea that may later become a goal.
    """

    goal_intent_id: int = Field(..., description="Opaque identifier of the intent")
    creation_time: int = Field(..., description="Creation time in milliseconds since epoch")
    creator_user_id: int = Field(..., description="User that created the intent")


class GoalIntentData(WireModel):
    """
    One revision of a goal intent.
    """

    goal_intent_data_id: int
    creation_time: int
    creator_user_id: int
    goal_intent: GoalIntent
    name: str
    active: bool


class Goal(WireModel):
    """
    Identity record of a goal.
    """

    goal_id: int = Field(..., description="Opaque identifier of the goal")
    creation_time: int = Field(..., description="Creation time in milliseconds since epoch")
    creator_user_id: int = Field(..., description="User that created the goal")
    intent: Optional[GoalIntent] = Field(
        None,
        description="The intent this goal was promoted from, if any"
    )


class TimeUtilityFunction(WireModel):
    """
    Piecewise utility curve stored as two parallel arrays.

    ``utils[i]`` is the utility of completing the goal at or after
    ``start_times[i]``. The backend guarantees both arrays have the same
    length and that ``start_times`` is strictly increasing.
    """

    time_utility_function_id: int
    creation_time: int
    creator_user_id: int
    start_times: List[int] = Field(default_factory=list)
    utils: List[float] = Field(default_factory=list)


class UserGeneratedCode(WireModel):
    """
    User supplied source code together with its compiled cache.
    """

    user_generated_code_id: int
    creation_time: int
    creator_user_id: int
    source_code: str
    source_lang: str
    wasm_cache: List[int] = Field(
        default_factory=list,
        description="Precompiled binary as a sequence of byte values"
    )


class GoalData(WireModel):
    """
    One revision of a goal: its name, estimate, utility curve and status.
    """

    goal_data_id: int
    creation_time: int
    creator_user_id: int
    goal: Goal
    name: str
    duration_estimate: Optional[int] = Field(
        None,
        description="Estimated duration in milliseconds, null when unknown"
    )
    time_utility_function: TimeUtilityFunction
    status: GoalDataStatusKind


class GoalEvent(WireModel):
    """
    A block of time scheduled for working on a goal.
    """

    goal_event_id: int
    creation_time: int
    creator_user_id: int
    goal: Goal
    start_time: int
    end_time: int
    active: bool


class GoalDependency(WireModel):
    """
    Records that ``goal`` cannot be completed before ``dependent_goal``.
    """

    goal_dependency_id: int
    creation_time: int
    creator_user_id: int
    goal: Goal
    # the backend sends this one field in snake_case
    dependent_goal: Goal = Field(..., alias="dependent_goal")
    active: bool


class ExternalEvent(WireModel):
    """Identity record of an event that is not tied to a goal."""

    external_event_id: int
    creation_time: int
    creator_user_id: int


class ExternalEventData(WireModel):
    """One revision of an external event."""

    external_event_data_id: int
    creation_time: int
    creator_user_id: int
    external_event: ExternalEvent
    name: str
    start_time: int
    end_time: int
    active: bool


class GoalTemplate(WireModel):
    """Identity record of a goal template."""

    goal_template_id: int
    creation_time: int
    creator_user_id: int


class GoalTemplateData(WireModel):
    """
    One revision of a goal template.

    Templates pair a default utility and duration with user generated code
    that the backend runs when a template pattern matches.
    """

    goal_template_data_id: int
    creation_time: int
    creator_user_id: int
    goal_template: GoalTemplate
    name: str
    utility: float
    duration_estimate: Optional[int] = None
    user_generated_code: UserGeneratedCode
    active: bool


class GoalTemplatePattern(WireModel):
    """A matching pattern attached to a goal template."""

    goal_template_pattern_id: int
    creation_time: int
    creator_user_id: int
    goal_template: GoalTemplate
    pattern: str
    active: bool


class NamedEntity(WireModel):
    """Identity record of a named entity."""

    named_entity_id: int
    creation_time: int
    creator_user_id: int


class NamedEntityData(WireModel):
    """One revision of a named entity."""

    named_entity_data_id: int
    creation_time: int
    creator_user_id: int
    named_entity: NamedEntity
    name: str
    kind: NamedEntityKind
    active: bool


class NamedEntityPattern(WireModel):
    """A matching pattern attached to a named entity."""

    named_entity_pattern_id: int
    creation_time: int
    creator_user_id: int
    named_entity: NamedEntity
    pattern: str
    active: bool


class GoalEntityTag(WireModel):
    """Tags a goal with a named entity."""

    goal_entity_tag_id: int
    creation_time: int
    creator_user_id: int
    named_entity: NamedEntity
    goal: Goal
    active: bool


class Info(WireModel):
    """
    Service metadata returned by the ``info`` endpoint.

    Only some deployments expose this endpoint.
    """

    service: str
    version_major: int
    version_minor: int
    version_rev: int
    app_pub_origin: str
    auth_pub_origin: str
    auth_authenticator_href: Optional[str] = None
