"""Services for the management API endpoints: spaces, roles, webhooks and more."""

from __future__ import annotations

import dataclasses
import json
import urllib.error
import urllib.request
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlencode

from contentkit.models import (
    ContentTypeSnapshot,
    EntrySnapshot,
    JsonModel,
    Role,
    ScheduledAction,
    Space,
    Sys,
    User,
    Webhook,
    WebhookCall,
    WebhookHealth,
)

MANAGEMENT_CONTENT_TYPE = "application/vnd.contentful.management.v1+json"
VERSION_HEADER = "X-Contentful-Version"


class ApiError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status: int, message: str, request_id: str = "", body: bytes = b"") -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.request_id = request_id
        self.body = body

    @classmethod
    def from_body(cls, status: int, body: bytes) -> ApiError:
        message = f"HTTP {status}"
        request_id = ""
        try:
            data = json.loads(body.decode("utf-8")) if body.strip() else None
        except (ValueError, UnicodeDecodeError):
            data = None
        if isinstance(data, Mapping):
            message = str(data.get("message") or message)
            request_id = str(data.get("requestId") or "")
        return cls(status, message, request_id, body)


class Transport:
    """Sends authenticated requests to the API and decodes JSON answers."""

    def __init__(self, base_url: str, token: str, *, user_agent: str = "contentkit", timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self.user_agent = user_agent
        self.timeout = timeout

    def send(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> Any:
        """Perform a request; return the decoded JSON body, or None if it is empty."""
        url = self.base_url + path
        if params:
            url += ("&" if "?" in path else "?") + urlencode(dict(params))
        request_headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": MANAGEMENT_CONTENT_TYPE,
            "User-Agent": self.user_agent,
        }
        request_headers.update(headers or {})
        request = urllib.request.Request(url, data=body, method=method, headers=request_headers)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                payload = response.read()
        except urllib.error.HTTPError as exc:
            raise ApiError.from_body(exc.code, exc.read()) from None
        if not payload.strip():
            return None
        return json.loads(payload.decode("utf-8"))


def _encode(model: JsonModel) -> bytes:
    return json.dumps(model.to_dict()).encode("utf-8")


def _refresh(model: JsonModel, data: Any) -> None:
    """Overwrite ``model`` in place with the object the API sent back."""
    if not isinstance(data, Mapping):
        return
    fresh = type(model).from_dict(data)
    for f in dataclasses.fields(model):
        setattr(model, f.name, getattr(fresh, f.name))


def _require_sys(model: Any, kind: str) -> Sys:
    if model.sys is None:
        raise ValueError(f"{kind} has no sys metadata")
    return model.sys


class ResourcesService:
    """Uploads of raw files."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, space_id: str, resource_id: str) -> Sys:
        """Return the system metadata of an upload."""
        data = self.transport.send("GET", f"/spaces/{space_id}/uploads/{resource_id}") or {}
        return Sys.from_dict(data.get("sys") or {})

    def create(self, space_id: str, file_path: str | Path) -> None:
        content = Path(file_path).read_bytes()
        self.transport.send(
            "POST",
            f"/spaces/{space_id}/uploads",
            headers={"Content-Type": "application/octet-stream"},
            body=content,
        )

    def delete(self, space_id: str, resource_id: str) -> None:
        self.transport.send("DELETE", f"/spaces/{space_id}/uploads/{resource_id}")


class RolesService:
    """Roles of a space."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, space_id: str, role_id: str) -> Role:
        return Role.from_dict(self.transport.send("GET", f"/spaces/{space_id}/roles/{role_id}") or {})

    def upsert(self, space_id: str, role: Role) -> None:
        """Create the role, or update it when it already has an id; refreshes ``role``."""
        if role.sys is not None and role.sys.id:
            method, path = "PUT", f"/spaces/{space_id}/roles/{role.sys.id}"
        else:
            method, path = "POST", f"/spaces/{space_id}/roles"
        data = self.transport.send(
            method, path, headers={VERSION_HEADER: str(role.version())}, body=_encode(role)
        )
        _refresh(role, data)

    def delete(self, space_id: str, role_id: str) -> None:
        self.transport.send("DELETE", f"/spaces/{space_id}/roles/{role_id}")


class ScheduledActionsService:
    """Scheduled publishing actions of entries."""

    def __init__(self, transport: Transport, environment: str) -> None:
        self.transport = transport
        self.environment = environment

    def _filter(self, entry_id: str) -> str:
        return f"?entity.sys.id={entry_id}&environment.sys.id={self.environment}"

    def create(self, space_id: str, entry_id: str, scheduled_action: ScheduledAction) -> None:
        path = f"/spaces/{space_id}/scheduled_actions" + self._filter(entry_id)
        data = self.transport.send(
            "POST",
            path,
            headers={VERSION_HEADER: str(scheduled_action.version())},
            body=_encode(scheduled_action),
        )
        _refresh(scheduled_action, data)

    def delete(self, space_id: str, entry_id: str, scheduled_action_id: str) -> None:
        path = f"/spaces/{space_id}/scheduled_actions/{scheduled_action_id}" + self._filter(entry_id)
        self.transport.send("DELETE", path)


class SnapshotsService:
    """Snapshots of entries and content types."""

    def __init__(self, transport: Transport, environment: str) -> None:
        self.transport = transport
        self.environment = environment

    def get_entry_snapshot(self, space_id: str, entry_id: str, snapshot_id: str) -> EntrySnapshot:
        path = f"/spaces/{space_id}/environments/{self.environment}/entries/{entry_id}/snapshots/{snapshot_id}"
        return EntrySnapshot.from_dict(self.transport.send("GET", path) or {})

    def get_content_type_snapshot(
        self, space_id: str, content_type_id: str, snapshot_id: str
    ) -> ContentTypeSnapshot:
        path = (
            f"/spaces/{space_id}/environments/{self.environment}"
            f"/content_types/{content_type_id}/snapshots/{snapshot_id}"
        )
        return ContentTypeSnapshot.from_dict(self.transport.send("GET", path) or {})


class SpacesService:
    """Spaces of the account."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, space_id: str) -> Space:
        return Space.from_dict(self.transport.send("GET", f"/spaces/{space_id}") or {})

    def upsert(self, space: Space) -> None:
        """Create the space, or update it when it already exists; refreshes ``space``."""
        if space.sys is not None and space.sys.created_at:
            method, path = "PUT", f"/spaces/{space.sys.id}"
        else:
            method, path = "POST", "/spaces"
        data = self.transport.send(
            method, path, headers={VERSION_HEADER: str(space.version())}, body=_encode(space)
        )
        _refresh(space, data)

    def delete(self, space: Space) -> None:
        sys = _require_sys(space, "space")
        self.transport.send("DELETE", f"/spaces/{sys.id}", headers={VERSION_HEADER: str(sys.version)})


class UsersService:
    """The authenticated user."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def me(self) -> User:
        return User.from_dict(self.transport.send("GET", "/users/me") or {})


class WebhooksService:
    """Webhook definitions of a space."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, space_id: str, webhook_id: str) -> Webhook:
        path = f"/spaces/{space_id}/webhook_definitions/{webhook_id}"
        return Webhook.from_dict(self.transport.send("GET", path) or {})

    def upsert(self, space_id: str, webhook: Webhook) -> None:
        """Create the webhook, or update it when it already exists; refreshes ``webhook``."""
        if webhook.sys is not None and webhook.sys.created_at:
            method, path = "PUT", f"/spaces/{space_id}/webhook_definitions/{webhook.sys.id}"
        else:
            method, path = "POST", f"/spaces/{space_id}/webhook_definitions"
        data = self.transport.send(
            method, path, headers={VERSION_HEADER: str(webhook.version())}, body=_encode(webhook)
        )
        _refresh(webhook, data)

    def delete(self, space_id: str, webhook: Webhook) -> None:
        sys = _require_sys(webhook, "webhook")
        self.transport.send(
            "DELETE",
            f"/spaces/{space_id}/webhook_definitions/{sys.id}",
            headers={VERSION_HEADER: str(sys.version)},
        )


class WebhookCallsService:
    """Call logs and health of webhooks."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, space_id: str, webhook_id: str, call_id: str) -> WebhookCall:
        path = f"/spaces/{space_id}/webhooks/{webhook_id}/calls/{call_id}"
        return WebhookCall.from_dict(self.transport.send("GET", path) or {})

    def health(self, space_id: str, webhook_id: str) -> WebhookHealth:
        path = f"/spaces/{space_id}/webhooks/{webhook_id}/health"
        return WebhookHealth.from_dict(self.transport.send("GET", path) or {})