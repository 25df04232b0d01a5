"""
HTTP client for the todo-app backend.

This module sends one request per call through httpx and turns whatever comes
back, including transport failures, into an Ok/Err result.
"""

import httpx
import json
import logging
from typing import Any, List, Mapping, Optional, Type, Union

from pydantic import TypeAdapter, ValidationError

from ..config import ConfigManager, get_config
from ..models.entities import WireModel
from ..models.results import Err, Ok, Result, TodoAppErrorCode
from .envelope import decode_envelope, join_url, resolve_base_url
from .registry import OperationRegistry, operation_registry

Props = Union[WireModel, Mapping[str, Any]]


class TodoAppClient:
    """
    Dispatches operations to the todo-app backend.

    The transport is injected: pass an ``httpx.AsyncClient`` to control
    connection handling, proxies or to stub the server in tests. Without one,
    a short-lived client is created for every call.
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None,
                 config: Optional[ConfigManager] = None,
                 registry: Optional[OperationRegistry] = None):
        """
        Initialize the client.

        Args:
            http_client: Transport used for requests (defaults to one per call)
            config: Configuration (defaults to the global config)
            registry: Operation table used by run() (defaults to the global registry)
        """
        self.http_client = http_client
        self.config = config or get_config()
        self.registry = registry or operation_registry

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit. Closes an injected transport."""
        if self.http_client is not None:
            await self.http_client.aclose()

    async def run(self, name: str, props: Optional[Props] = None, server: Optional[str] = None) -> Result:
        """
        Dispatch a registered operation by name.

        Args:
            name: Operation name, e.g. "goal_new"
            props: Parameters as a request model or a mapping of wire names
            server: Base URL override for this call

        Returns:
            The decoded result

        Raises:
            KeyError: If no operation has that name
            pydantic.ValidationError: If props do not fit the operation
        """
        spec = self.registry.get_operation(name)
        if spec is None:
            raise KeyError(f"Unknown operation: {name}")

        request = _coerce_props(spec.request_model, props)
        return await self.call(spec.path, request, spec.response_model, many=spec.many, server=server)

    async def call(self, path: str, props: Props, response_model: Optional[Type[WireModel]] = None,
                   many: bool = False, server: Optional[str] = None) -> Result:
        """
        Send one request and decode the response.

        Args:
            path: Operation path relative to the base URL (e.g. "goal/new")
            props: Request body as a request model or a plain mapping
            response_model: Record type to validate a successful body into
            many: Whether a successful body is a list of records
            server: Base URL override for this call

        Returns:
            Ok with the decoded body, or Err with the error code. Transport
            failures come back as Err(NETWORK) rather than being raised.
        """
        url = join_url(resolve_base_url(server, self.config), path)
        body = props.to_body() if hasattr(props, "to_body") else dict(props)

        logging.debug(f"POST {url}")

        try:
            response = await self._post(url, body)
        except httpx.RequestError as e:
            logging.warning(f"Network error calling {url}: {e}")
            return Err(TodoAppErrorCode.NETWORK)
        except Exception as e:
            logging.warning(f"Transport failed calling {url}: {e!r}")
            return Err(TodoAppErrorCode.NETWORK)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logging.warning(f"Response from {url} with status {response.status_code} is not JSON")
            return Err(TodoAppErrorCode.UNKNOWN)

        result = decode_envelope(response.status_code, payload, self.config.decode_strategy)

        if isinstance(result, Ok) and response_model is not None and self.config.validate_responses:
            return _validate(result.value, response_model, many, url)

        return result

    async def _post(self, url: str, body: Any) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.post(url, json=body)

        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.post(url, json=body)


def _coerce_props(model: Type[WireModel], props: Optional[Props]) -> WireModel:
    if isinstance(props, model):
        return props
    if isinstance(props, WireModel):
        props = props.model_dump(by_alias=True, exclude_unset=True)
    return model.model_validate(props or {})


def _validate(value: Any, response_model: Type[WireModel], many: bool, url: str) -> Result:
    adapter = TypeAdapter(List[response_model] if many else response_model)
    try:
        return Ok(adapter.validate_python(value))
    except ValidationError as e:
        logging.warning(f"Unexpected response shape from {url}: {e.error_count()} validation errors")
        return Err(TodoAppErrorCode.UNKNOWN)
