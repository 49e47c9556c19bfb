# contentkit

A small client toolkit for a headless content management API. It needs nothing
beyond the Python standard library and runs on Python 3.10 or later.

- `contentkit.query`: `Query` builds collection query parameters by chaining
  method calls. `QueryError` is raised for settings the API does not accept.
- `contentkit.models`: dataclasses for spaces, roles, webhooks, webhook calls
  and health, entry and content type snapshots, scheduled actions, usages and
  users. They all derive from `JsonModel`, so each has `to_dict()` and
  `from_dict()`.
- `contentkit.sync`: `SyncType` lists the kinds of content a sync can be
  started for. `str(SyncType.ALL)` gives `"all"`.
- `contentkit.services`: `Transport`, `ApiError` and the service classes
  `SpacesService`, `RolesService`, `WebhooksService`, `WebhookCallsService`,
  `SnapshotsService`, `ScheduledActionsService`, `ResourcesService` and
  `UsersService`.

## Installing

```
pip install .
```

## Building a query

```python
from contentkit.query import Query

q = (
    Query()
    .content_type("blogPost")
    .equal("fields.slug", "hello-world")
    .in_("sys.id", ["a", "b"])
    .order("sys.createdAt", True)
    .limit(10)
)
params = q.values()   # dict of parameter name -> value
print(str(q))         # URL-encoded, keys in sorted order
```

`values()` renders each kind of operand in a fixed way:

- `equal` and `not_equal` take ints and strings.
- `less_than`, `less_than_or_equal`, `greater_than` and `greater_than_or_equal`
  take ints and `datetime` objects. A `datetime` is written as
  `YYYY-MM-DD HH:MM:SS`.
- Values of any other type are left out of the output.

`values()` raises `QueryError` in these cases:

- `include` is above 10.
- `limit` is above 1000.
- `select` has more than 100 fields.
- A `select` field is more than two levels deep.
- `select` is used without a content type.

## Models

```python
from contentkit.models import Webhook

hook = Webhook.from_dict({"name": "deploy", "url": "https://hooks.example.com/x"})
hook.to_dict()   # empty optional properties are left out
```

`Space.to_dict()` writes only `name` and `defaultLocale`. The models `Space`,
`Role`, `Webhook` and `ScheduledAction` each have a `version()` method. It
returns `sys.version`, or 1 when the model has no `sys`.

## Calling the API

```python
from contentkit.models import Space
from contentkit.services import SpacesService, Transport

transport = Transport("https://api.example.com", "token")
spaces = SpacesService(transport)

space = Space(name="new space", default_locale="en")
spaces.upsert(space)   # POST /spaces, then fills the model from the reply
```

`Transport.send(method, path, params, headers, body)` does the following:

- It sends a bearer-authenticated request using `urllib`.
- It returns the decoded JSON body, or `None` when the body is empty.
- On an HTTP error status it raises `ApiError`. The error carries `status`,
  `message`, `request_id` and `body`.

The `upsert` methods decide between creating and updating:

- `SpacesService` and `WebhooksService` send PUT when `sys.created_at` is set,
  and POST otherwise.
- `RolesService` sends PUT when `sys.id` is set, and POST otherwise.

All of them send the `X-Contentful-Version` header and update the model in
place from the response.

## What it does not do

- There are no list or pagination calls. Services fetch, create, update and
  delete single objects only.
- There is no sync client. `SyncType` is provided, but nothing starts a sync.
- There is no service for usage reports. Only the `Usage` model is included.
- There is no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```