"""
Operation registry for the todo-app client.

This module defines the table of every backend operation: its path, the
model its parameters are validated against and the shape of its response.
Dispatch, the endpoint functions and the command line are all driven from
this table, so adding an operation means registering it here.
"""

from typing import Dict, List, Optional, Type
from dataclasses import dataclass

from ..models import entities
from ..models import requests
from ..models.entities import WireModel


@dataclass
class OperationSpec:
    """
    Description of one backend operation.
    """
    name: str
    path: str
    request_model: Type[WireModel]
    response_model: Type[WireModel]
    many: bool = False
    description: str = ""


# (entity path, new props, new response, view props, view response)
_ENTITY_OPERATIONS = [
    ("external_event", requests.ExternalEventNewProps, entities.ExternalEventData,
     requests.ExternalEventViewProps, entities.ExternalEvent),
    ("external_event_data", requests.ExternalEventDataNewProps, entities.ExternalEventData,
     requests.ExternalEventDataViewProps, entities.ExternalEventData),
    ("goal_intent", requests.GoalIntentNewProps, entities.GoalIntentData,
     requests.GoalIntentViewProps, entities.GoalIntent),
    ("goal_intent_data", requests.GoalIntentDataNewProps, entities.GoalIntentData,
     requests.GoalIntentDataViewProps, entities.GoalIntentData),
    ("goal", requests.GoalNewProps, entities.GoalData,
     requests.GoalViewProps, entities.Goal),
    ("goal_data", requests.GoalDataNewProps, entities.GoalData,
     requests.GoalDataViewProps, entities.GoalData),
    ("goal_event", requests.GoalEventNewProps, entities.GoalEvent,
     requests.GoalEventViewProps, entities.GoalEvent),
    ("goal_dependency", requests.GoalDependencyNewProps, entities.GoalDependency,
     requests.GoalDependencyViewProps, entities.GoalDependency),
    ("goal_entity_tag", requests.GoalEntityTagNewProps, entities.GoalEntityTag,
     requests.GoalEntityTagViewProps, entities.GoalEntityTag),
    ("time_utility_function", requests.TimeUtilityFunctionNewProps, entities.TimeUtilityFunction,
     requests.TimeUtilityFunctionViewProps, entities.TimeUtilityFunction),
    ("user_generated_code", requests.UserGeneratedCodeNewProps, entities.UserGeneratedCode,
     requests.UserGeneratedCodeViewProps, entities.UserGeneratedCode),
    ("goal_template", requests.GoalTemplateNewProps, entities.GoalTemplateData,
     requests.GoalTemplateViewProps, entities.GoalTemplate),
    ("goal_template_data", requests.GoalTemplateDataNewProps, entities.GoalTemplateData,
     requests.GoalTemplateDataViewProps, entities.GoalTemplateData),
    ("goal_template_pattern", requests.GoalTemplatePatternNewProps, entities.GoalTemplatePattern,
     requests.GoalTemplatePatternViewProps, entities.GoalTemplatePattern),
    ("named_entity", requests.NamedEntityNewProps, entities.NamedEntity,
     requests.NamedEntityViewProps, entities.NamedEntity),
    ("named_entity_data", requests.NamedEntityDataNewProps, entities.NamedEntityData,
     requests.NamedEntityDataViewProps, entities.NamedEntityData),
    ("named_entity_pattern", requests.NamedEntityPatternNewProps, entities.NamedEntityPattern,
     requests.NamedEntityPatternViewProps, entities.NamedEntityPattern),
]


class OperationRegistry:
    """
    Registry of all backend operations the client can dispatch.
    """

    def __init__(self):
        """Initialize the registry with the todo-app operations."""
        self._operations: Dict[str, OperationSpec] = {}
        self._register_default_operations()

    def _register_default_operations(self):
        """Register one new and one view operation per entity, plus info."""
        for entity, new_props, new_response, view_props, view_response in _ENTITY_OPERATIONS:
            label = entity.replace("_", " ")

            self.register_operation(OperationSpec(
                name=f"{entity}_new",
                path=f"{entity}/new",
                request_model=new_props,
                response_model=new_response,
                description=f"Create a {label} record and return it"
            ))

            self.register_operation(OperationSpec(
                name=f"{entity}_view",
                path=f"{entity}/view",
                request_model=view_props,
                response_model=view_response,
                many=True,
                description=f"List {label} records matching every supplied filter"
            ))

        # Not every deployment serves this one
        self.register_operation(OperationSpec(
            name="info",
            path="info",
            request_model=requests.InfoProps,
            response_model=entities.Info,
            description="Service name, version and related origins"
        ))

    def register_operation(self, spec: OperationSpec) -> None:
        """
        Register a new operation.

        Args:
            spec: The operation to register
        """
        self._operations[spec.name] = spec

    def get_operation(self, name: str) -> Optional[OperationSpec]:
        """
        Get an operation by name.

        Args:
            name: The name of the operation (e.g. "goal_new")

        Returns:
            The operation spec, or None if not found
        """
        return self._operations.get(name)

    def list_operations(self) -> List[str]:
        """
        Get a list of all registered operation names.

        Returns:
            List of operation names
        """
        return list(self._operations.keys())


# Global operation registry instance
operation_registry = OperationRegistry()
