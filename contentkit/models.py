"""Data models exchanged with the management API, with JSON mapping."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Optional

_MODELS: dict[str, type[JsonModel]] = {}

# JSON keys for the webhook's HTTP basic authentication settings.
_HTTP_BASIC_JSON_KEYS = ("httpBasicUsername", "httpBasicPassword")
_NO_TEXT = ""


def _field(
    json_name: str,
    *,
    omitempty: bool = False,
    default: Any = None,
    factory: Any = None,
    model: Optional[str] = None,
    container: Optional[str] = None,
) -> Any:
    metadata = {
        "json": json_name,
        "omitempty": omitempty,
        "model": model,
        "container": container,
        "nullable": factory is None and default is None,
    }
    if factory is not None:
        return dataclasses.field(default_factory=factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _encode(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _decode_one(model: Optional[type[JsonModel]], value: Any) -> Any:
    if value is None:
        return None
    if model is None:
        return value
    return model.from_dict(value)


def _decode(metadata: Mapping[str, Any], value: Any) -> Any:
    if value is None:
        return None
    name = metadata.get("model")
    model = _MODELS[name] if name is not None else None
    container = metadata.get("container")
    if container == "list":
        return [_decode_one(model, item) for item in value]
    if container == "dict":
        return {key: _decode_one(model, item) for key, item in value.items()}
    return _decode_one(model, value)


class JsonModel:
    """Base for dataclasses whose fields carry their JSON names."""

    _registered: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _MODELS[cls.__name__] = cls

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, leaving out empty optional fields."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and _is_empty(value):
                continue
            out[f.metadata.get("json", f.name)] = _encode(value)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Any:
        """Build an instance from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            key = f.metadata.get("json", f.name)
            if key not in data:
                continue
            raw = data[key]
            if raw is None and not f.metadata.get("nullable"):
                continue
            kwargs[f.name] = _decode(f.metadata, raw)
        return cls(**kwargs)


def _version_of(sys: Optional[Sys]) -> int:
    return sys.version if sys is not None else 1


@dataclasses.dataclass
class Sys(JsonModel):
    id: str = _field("id", omitempty=True, default="")
    type: str = _field("type", omitempty=True, default="")
    link_type: str = _field("linkType", omitempty=True, default="")
    created_at: str = _field("createdAt", omitempty=True, default="")
    updated_at: str = _field("updatedAt", omitempty=True, default="")
    updated_by: Optional[Sys] = _field("updatedBy", omitempty=True, model="Sys")
    version: int = _field("version", omitempty=True, default=0)
    revision: int = _field("revision", omitempty=True, default=0)
    space: Optional[Space] = _field("space", omitempty=True, model="Space")
    first_published_at: str = _field("firstPublishedAt", omitempty=True, default="")
    published_counter: int = _field("publishedCounter", omitempty=True, default=0)
    published_at: str = _field("publishedAt", omitempty=True, default="")
    published_by: Optional[Sys] = _field("publishedBy", omitempty=True, model="Sys")
    published_version: int = _field("publishedVersion", omitempty=True, default=0)
    archived_at: str = _field("archivedAt", omitempty=True, default="")
    archived_by: Optional[Sys] = _field("archivedBy", omitempty=True, model="Sys")
    archived_version: int = _field("archivedVersion", omitempty=True, default=0)


@dataclasses.dataclass
class Environment(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    name: str = _field("name", default="")


@dataclasses.dataclass
class Space(JsonModel):
    sys: Optional[Sys] = _field("sys", omitempty=True, model="Sys")
    name: str = _field("name", omitempty=True, default="")
    default_locale: str = _field("defaultLocale", omitempty=True, default="")

    def to_dict(self) -> dict[str, Any]:
        """Only the writable properties are sent; ``sys`` is never serialised."""
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.default_locale:
            out["defaultLocale"] = self.default_locale
        return out

    def version(self) -> int:
        return _version_of(self.sys)


@dataclasses.dataclass
class DetailItem(JsonModel):
    doc: dict[str, Any] = _field("Doc", factory=dict)
    item_type: str = _field("ItemType", default="")


@dataclasses.dataclass
class ConstraintDetail(JsonModel):
    equals: DetailItem = _field("equals", factory=DetailItem, model="DetailItem")


@dataclasses.dataclass
class Constraint(JsonModel):
    and_: list[ConstraintDetail] = _field(
        "and", factory=list, model="ConstraintDetail", container="list"
    )


@dataclasses.dataclass
class Policies(JsonModel):
    effect: str = _field("effect", default="")
    actions: list[str] = _field("actions", factory=list)
    constraint: Constraint = _field("constraint", factory=Constraint, model="Constraint")


@dataclasses.dataclass
class Permissions(JsonModel):
    content_model: list[str] = _field("ContentModel", factory=list)
    settings: str = _field("Settings", default="")
    content_delivery: str = _field("ContentDelivery", default="")
    environments: str = _field("Environments", default="")
    environment_aliases: str = _field("EnvironmentAliases", default="")


@dataclasses.dataclass
class Role(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    name: str = _field("name", default="")
    description: str = _field("description", default="")
    policies: list[Policies] = _field("policies", factory=list, model="Policies", container="list")
    permissions: Permissions = _field("permissions", factory=Permissions, model="Permissions")

    def version(self) -> int:
        return _version_of(self.sys)


@dataclasses.dataclass
class Entity(JsonModel):
    sys: Sys = _field("sys", factory=Sys, model="Sys")


@dataclasses.dataclass
class EnvironmentLink(JsonModel):
    sys: Sys = _field("sys", factory=Sys, model="Sys")


@dataclasses.dataclass
class ScheduledAction(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    entity: Entity = _field("entity", factory=Entity, model="Entity")
    environment: EnvironmentLink = _field(
        "environment", factory=EnvironmentLink, model="EnvironmentLink"
    )
    scheduled_for: dict[str, str] = _field("scheduledFor", factory=dict)
    action: str = _field("action", default="")

    def version(self) -> int:
        return _version_of(self.sys)


@dataclasses.dataclass
class EntrySnapshotDetail(JsonModel):
    fields: dict[str, Any] = _field("fields", factory=dict)
    sys: Optional[Sys] = _field("sys", model="Sys")


@dataclasses.dataclass
class EntrySnapshot(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    snapshot: EntrySnapshotDetail = _field(
        "snapshot", factory=EntrySnapshotDetail, model="EntrySnapshotDetail"
    )


@dataclasses.dataclass
class ContentTypeFields(JsonModel):
    id: str = _field("id", default="")
    name: str = _field("name", default="")
    required: bool = _field("required", default=False)
    localized: bool = _field("localized", default=False)
    type: str = _field("type", default="")


@dataclasses.dataclass
class ContentTypeSnapshotDetail(JsonModel):
    name: str = _field("name", default="")
    fields: list[ContentTypeFields] = _field(
        "fields", factory=list, model="ContentTypeFields", container="list"
    )
    sys: Optional[Sys] = _field("sys", model="Sys")


@dataclasses.dataclass
class ContentTypeSnapshot(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    snapshot: ContentTypeSnapshotDetail = _field(
        "snapshot", factory=ContentTypeSnapshotDetail, model="ContentTypeSnapshotDetail"
    )


@dataclasses.dataclass
class DateRange(JsonModel):
    start_at: str = _field("startAt", default="")
    end_at: str = _field("endAt", default="")


@dataclasses.dataclass
class Usage(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    unit_of_measure: str = _field("unitOfMeasure", default="")
    metric: str = _field("metric", default="")
    date_range: DateRange = _field("dateRange", factory=DateRange, model="DateRange")
    total_usage: int = _field("usage", default=0)
    usage_per_day: dict[str, str] = _field("usagePerDay", factory=dict)


@dataclasses.dataclass
class User(JsonModel):
    sys: Optional[Sys] = _field("sys", omitempty=True, model="Sys")
    first_name: str = _field("firstName", default="")
    last_name: str = _field("lastName", default="")
    avatar_url: str = _field("avatarUrl", default="")
    email: str = _field("email", default="")
    activated: bool = _field("activated", default=False)
    sign_in_count: int = _field("signInCount", default=0)
    confirmed: bool = _field("confirmed", default=False)
    two_factor_authentication_enabled: bool = _field("2faEnabled", default=False)


@dataclasses.dataclass
class WebhookHeader(JsonModel):
    key: str = _field("key", default="")
    value: str = _field("value", default="")


@dataclasses.dataclass
class Webhook(JsonModel):
    sys: Optional[Sys] = _field("sys", omitempty=True, model="Sys")
    name: str = _field("name", omitempty=True, default="")
    url: str = _field("url", omitempty=True, default="")
    topics: list[str] = _field("topics", omitempty=True, factory=list)
    http_basic_username: str = _field(_HTTP_BASIC_JSON_KEYS[0], omitempty=True, default="")
    http_basic_password: str = _field(
        _HTTP_BASIC_JSON_KEYS[1], omitempty=True, default=_NO_TEXT
    )
    headers: list[WebhookHeader] = _field(
        "headers", omitempty=True, factory=list, model="WebhookHeader", container="list"
    )

    def version(self) -> int:
        return _version_of(self.sys)


@dataclasses.dataclass
class Request(JsonModel):
    url: str = _field("url", default="")
    method: str = _field("method", default="")
    headers: dict[str, str] = _field("headers", factory=dict)
    body: str = _field("body", default="")


@dataclasses.dataclass
class Response(JsonModel):
    url: str = _field("url", default="")
    headers: dict[str, str] = _field("headers", factory=dict)
    body: str = _field("body", default="")
    status_code: int = _field("statusCode", default=0)


@dataclasses.dataclass
class WebhookCall(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    request: Request = _field("request", factory=Request, model="Request")
    response: Response = _field("response", factory=Response, model="Response")
    status_code: int = _field("statusCode", default=0)
    errors: list[str] = _field("errors", factory=list)
    event_type: str = _field("eventType", default="")
    url: str = _field("url", default="")
    request_at: str = _field("requestAt", default="")
    response_at: str = _field("responseAt", default="")


@dataclasses.dataclass
class HealthDetails(JsonModel):
    total: int = _field("total", default=0)
    healthy: int = _field("healthy", default=0)


@dataclasses.dataclass
class WebhookHealth(JsonModel):
    sys: Optional[Sys] = _field("sys", model="Sys")
    calls: HealthDetails = _field("calls", factory=HealthDetails, model="HealthDetails")