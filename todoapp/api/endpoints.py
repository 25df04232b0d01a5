"""
One coroutine per backend operation.

Every function here has the same shape::

    result = await goal_new({"name": "Ship report", "timeUtilityFunctionId": 7, "apiKey": "k"})
    result = await goal_data_view(GoalDataViewProps(api_key="k", only_recent=True), server=url)

``props`` is the operation's request model or a mapping using the backend's
field names, ``server`` overrides the configured base URL for this call and
``client`` supplies a ``TodoAppClient`` (and with it the transport). The
functions are generated from the operation registry.
"""

from typing import Callable, Optional

from ..models.results import Result
from .client import Props, TodoAppClient
from .registry import OperationSpec, operation_registry


def _endpoint(name: str) -> Callable:
    spec: OperationSpec = operation_registry.get_operation(name)
    if spec is None:
        raise KeyError(f"Unknown operation: {name}")

    async def endpoint(props: Props, server: Optional[str] = None,
                       client: Optional[TodoAppClient] = None) -> Result:
        return await (client or TodoAppClient()).run(name, props, server=server)

    endpoint.__name__ = endpoint.__qualname__ = name
    endpoint.__doc__ = (
        f"{spec.description}.\n\n"
        f"POSTs {spec.request_model.__name__} to ``{spec.path}`` and resolves to "
        f"{'a list of ' if spec.many else ''}{spec.response_model.__name__} or an error code."
    )
    return endpoint


external_event_new = _endpoint("external_event_new")
external_event_data_new = _endpoint("external_event_data_new")
goal_intent_new = _endpoint("goal_intent_new")
goal_intent_data_new = _endpoint("goal_intent_data_new")
goal_new = _endpoint("goal_new")
goal_data_new = _endpoint("goal_data_new")
goal_event_new = _endpoint("goal_event_new")
goal_dependency_new = _endpoint("goal_dependency_new")
goal_entity_tag_new = _endpoint("goal_entity_tag_new")
time_utility_function_new = _endpoint("time_utility_function_new")
user_generated_code_new = _endpoint("user_generated_code_new")
goal_template_new = _endpoint("goal_template_new")
goal_template_data_new = _endpoint("goal_template_data_new")
goal_template_pattern_new = _endpoint("goal_template_pattern_new")
named_entity_new = _endpoint("named_entity_new")
named_entity_data_new = _endpoint("named_entity_data_new")
named_entity_pattern_new = _endpoint("named_entity_pattern_new")

goal_intent_view = _endpoint("goal_intent_view")
goal_intent_data_view = _endpoint("goal_intent_data_view")
goal_view = _endpoint("goal_view")
goal_data_view = _endpoint("goal_data_view")
goal_event_view = _endpoint("goal_event_view")
goal_dependency_view = _endpoint("goal_dependency_view")
goal_template_view = _endpoint("goal_template_view")
goal_template_data_view = _endpoint("goal_template_data_view")
goal_template_pattern_view = _endpoint("goal_template_pattern_view")
external_event_view = _endpoint("external_event_view")
external_event_data_view = _endpoint("external_event_data_view")
time_utility_function_view = _endpoint("time_utility_function_view")
user_generated_code_view = _endpoint("user_generated_code_view")
named_entity_view = _endpoint("named_entity_view")
named_entity_data_view = _endpoint("named_entity_data_view")
named_entity_pattern_view = _endpoint("named_entity_pattern_view")
goal_entity_tag_view = _endpoint("goal_entity_tag_view")

_info = _endpoint("info")


async def info(server: Optional[str] = None, client: Optional[TodoAppClient] = None) -> Result:
    """
    Fetch service metadata.

    Only some deployments serve this endpoint; the others answer NOT_FOUND.
    """
    return await _info({}, server=server, client=client)


__all__ = operation_registry.list_operations()
