from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wordpress_mcp.core.client import JSONResult, WordPressClient
from wordpress_mcp.core.errors import WordPressParseError, WordPressValidationError
from wordpress_mcp.core.models import FilterModel, PayloadModel

M = TypeVar("M", bound=BaseModel)

log = logging.getLogger("wordpress_mcp.resources")

FilterInput = Union[FilterModel, Mapping[str, Any], None]
PayloadInput = Union[PayloadModel, Mapping[str, Any], None]


def validate_model(model_cls: Type[M], value: Any, *, what: str) -> M:
    """Validate caller input against a model, raising WordPressValidationError."""
    if isinstance(value, BaseModel) and not isinstance(value, model_cls):
        raise WordPressValidationError(
            f"Invalid {what}: expected {model_cls.__name__}, "
            f"got {type(value).__name__}"
        )
    if value is not None and not isinstance(value, (BaseModel, Mapping)):
        raise WordPressValidationError(
            f"Invalid {what}: expected an object, got {type(value).__name__}"
        )
    try:
        return model_cls.model_validate(value if value is not None else {})
    except PydanticValidationError as exc:
        raise WordPressValidationError(
            f"Invalid {what}: {exc.error_count()} validation error(s) for "
            f"{model_cls.__name__}",
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


def check_id(value: Any, *, what: str = "id") -> int:
    # bool is an int subclass; True is not a resource id
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise WordPressValidationError(
            f"Invalid {what}: expected a positive integer, got {value!r}"
        )
    return value


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_filters(
    model_cls: Type[FilterModel], filters: FilterInput
) -> List[Tuple[str, str]]:
    """
    Turn a filter object into query parameters.
    Only keys the caller supplied (and that aren't null) are emitted, in
    field declaration order.
    """
    model = validate_model(model_cls, filters, what="filters")
    params: List[Tuple[str, str]] = []

    for name in type(model).model_fields:
        if name not in model.model_fields_set:
            continue
        value = getattr(model, name)
        if value is None:
            continue
        if isinstance(value, list):
            if not value:
                continue
            if name in model.repeat_fields:
                params.extend((f"{name}[]", _param_value(v)) for v in value)
            else:
                params.append((name, ",".join(_param_value(v) for v in value)))
        else:
            params.append((name, _param_value(value)))

    return params


def serialize_payload(model_cls: Type[PayloadModel], payload: PayloadInput) -> Dict[str, Any]:
    """Validate a write body; only fields the caller set are kept."""
    model = validate_model(model_cls, payload, what="payload")
    return model.model_dump(mode="json", exclude_unset=True)


def expect_list(data: JSONResult, *, what: str) -> List[Any]:
    if not isinstance(data, list):
        raise WordPressParseError(
            f"Expected a JSON array of {what}, got {type(data).__name__}"
        )
    return data


def expect_object(data: JSONResult, *, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise WordPressParseError(
            f"Expected a JSON object for {what}, got {type(data).__name__}"
        )
    return data


class ResourceClient:
    """
    Generic CRUD client driven by a declarative table:
    `path`, `filters_model`, `create_model`, `update_model`.
    Subclasses add resource-specific reads and writes.
    """

    resource: ClassVar[str]
    path: ClassVar[str]
    filters_model: ClassVar[Type[FilterModel]]
    create_model: ClassVar[Optional[Type[PayloadModel]]] = None
    update_model: ClassVar[Optional[Type[PayloadModel]]] = None

    def __init__(self, client: WordPressClient):
        self.client = client

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def item_path(self, item_id: int) -> str:
        return f"{self.path}/{check_id(item_id, what=f'{self.resource} id')}"

    async def list(self, filters: FilterInput = None) -> List[Dict[str, Any]]:
        params = serialize_filters(self.filters_model, filters)
        data = await self.client.get(self.path, params=params, tool=self.resource)
        return expect_list(data, what=self.resource)

    async def get(self, item_id: int) -> Dict[str, Any]:
        data = await self.client.get(self.item_path(item_id), tool=self.resource)
        return expect_object(data, what=self.resource)

    async def create(self, payload: PayloadInput) -> Dict[str, Any]:
        if self.create_model is None:
            raise WordPressValidationError(
                f"{self.resource} does not support JSON create"
            )
        body = serialize_payload(self.create_model, payload)
        data = await self.client.post(self.path, json=body, tool=self.resource)
        return expect_object(data, what=self.resource)

    async def update(self, item_id: int, payload: PayloadInput) -> Dict[str, Any]:
        model = self.update_model or self.create_model
        if model is None:
            raise WordPressValidationError(f"{self.resource} does not support update")
        path = self.item_path(item_id)
        body = serialize_payload(model, payload)
        data = await self.client.patch(path, json=body, tool=self.resource)
        return expect_object(data, what=self.resource)

    async def delete(
        self, item_id: int, *, force: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Delete by id. `force` is sent only when given: False/absent lets the
        backend trash the item where it supports trash, True purges it.
        """
        path = self.item_path(item_id)
        if force is not None and not isinstance(force, bool):
            raise WordPressValidationError(
                f"Invalid force flag: expected a boolean, got {force!r}"
            )
        params = {"force": _param_value(force)} if force is not None else None
        log.debug("Deleting %s %s (force=%s)", self.resource, item_id, force)
        data = await self.client.delete(path, params=params, tool=self.resource)
        return expect_object(data, what=f"{self.resource} deletion")


class RevisionsMixin:
    async def get_revisions(self: ResourceClient, item_id: int) -> List[Dict[str, Any]]:
        data = await self.client.get(
            f"{self.item_path(item_id)}/revisions", tool=self.resource
        )
        return expect_list(data, what=f"{self.resource} revisions")


__all__ = [
    "ResourceClient",
    "RevisionsMixin",
    "check_id",
    "expect_list",
    "expect_object",
    "serialize_filters",
    "serialize_payload",
    "validate_model",
]
