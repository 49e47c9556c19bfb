"""Builder for delivery/management API query strings."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable
from urllib.parse import urlencode

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_INCLUDE = 10
MAX_SELECT_FIELDS = 100
MAX_SELECT_DEPTH = 2
MAX_LIMIT = 1000


class QueryError(ValueError):
    """Raised when a query holds values the API does not accept."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _scalar(value: Any) -> str | None:
    """Render an equality operand; unsupported kinds are dropped."""
    if _is_int(value):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def _comparable(value: Any) -> str | None:
    """Render a range operand; unsupported kinds are dropped."""
    if _is_int(value):
        return str(value)
    if isinstance(value, datetime):
        return value.strftime(_TIME_FORMAT)
    return None


class Query:
    """Chainable query description that renders to URL parameters."""

    def __init__(self) -> None:
        self._include = 0
        self._content_type = ""
        self._fields: list[str] = []
        self._equal: dict[str, Any] = {}
        self._not_equal: dict[str, Any] = {}
        self._all: dict[str, list[str]] = {}
        self._in: dict[str, list[str]] = {}
        self._not_in: dict[str, list[str]] = {}
        self._exists: list[str] = []
        self._not_exists: list[str] = []
        self._lt: dict[str, Any] = {}
        self._lte: dict[str, Any] = {}
        self._gt: dict[str, Any] = {}
        self._gte: dict[str, Any] = {}
        self._query = ""
        self._match: dict[str, str] = {}
        self._near: dict[str, str] = {}
        self._within: dict[str, str] = {}
        self._order: list[str] = []
        self._limit = 0
        self._skip = 0
        self._mime = ""
        self._locale = ""

    def include(self, include: int) -> Query:
        self._include = include
        return self

    def content_type(self, ct: str) -> Query:
        self._content_type = ct
        return self

    def select(self, fields: Iterable[str]) -> Query:
        self._fields = list(fields)
        return self

    def equal(self, field: str, value: Any) -> Query:
        self._equal[field] = value
        return self

    def not_equal(self, field: str, value: Any) -> Query:
        self._not_equal[field] = value
        return self

    def all(self, field: str, value: Iterable[str]) -> Query:
        self._all[field] = list(value)
        return self

    def in_(self, field: str, value: Iterable[str]) -> Query:
        self._in[field] = list(value)
        return self

    def not_in(self, field: str, value: Iterable[str]) -> Query:
        self._not_in[field] = list(value)
        return self

    def exists(self, field: str) -> Query:
        self._exists.append(field)
        return self

    def not_exists(self, field: str) -> Query:
        self._not_exists.append(field)
        return self

    def less_than(self, field: str, value: Any) -> Query:
        self._lt[field] = value
        return self

    def less_than_or_equal(self, field: str, value: Any) -> Query:
        self._lte[field] = value
        return self

    def greater_than(self, field: str, value: Any) -> Query:
        self._gt[field] = value
        return self

    def greater_than_or_equal(self, field: str, value: Any) -> Query:
        self._gte[field] = value
        return self

    def query(self, q_str: str) -> Query:
        self._query = q_str
        return self

    def match(self, field: str, match: str) -> Query:
        self._match[field] = match
        return self

    def near(self, field: str, lat: int, lon: int) -> Query:
        self._near[field] = f"{int(lat)},{int(lon)}"
        return self

    def within(self, field: str, lat1: int, lon1: int, lat2: int, lon2: int) -> Query:
        self._within[field] = ",".join(str(int(v)) for v in (lat1, lon1, lat2, lon2))
        return self

    def within_radius(self, field: str, lat1: int, lon1: int, radius: int) -> Query:
        self._within[field] = ",".join(str(int(v)) for v in (lat1, lon1, radius))
        return self

    def order(self, field: str, reverse: bool) -> Query:
        self._order.append(f"-{field}" if reverse else field)
        return self

    def limit(self, limit: int) -> Query:
        self._limit = limit
        return self

    def skip(self, skip: int) -> Query:
        self._skip = skip
        return self

    def mime_type(self, mime: str) -> Query:
        self._mime = mime
        return self

    def locale(self, locale: str) -> Query:
        self._locale = locale
        return self

    def values(self) -> dict[str, str]:
        """Return the query as a mapping of parameter name to value."""
        params: dict[str, str] = {}

        if self._include:
            if self._include > MAX_INCLUDE:
                raise QueryError("include value should be between 0 and 10")
            params["include"] = str(self._include)

        if self._content_type:
            params["content_type"] = self._content_type

        if self._fields:
            if len(self._fields) > MAX_SELECT_FIELDS:
                raise QueryError("you can select up to 100 properties for `select`")
            if any(len(sel.split(".")) > MAX_SELECT_DEPTH for sel in self._fields):
                raise QueryError("you should provide at most 2 depth for `select`")
            if not self._content_type:
                raise QueryError("you should provide content_type parameter")
            params["select"] = ",".join(self._fields)

        for suffix, source in (("", self._equal), ("[ne]", self._not_equal)):
            for key, value in source.items():
                rendered = _scalar(value)
                if rendered is not None:
                    params[key + suffix] = rendered

        for suffix, lists in (("[all]", self._all), ("[in]", self._in), ("[nin]", self._not_in)):
            for key, items in lists.items():
                params[key + suffix] = ",".join(items)

        for key in self._exists:
            params[key + "[exists]"] = "true"
        for key in self._not_exists:
            params[key + "[exists]"] = "false"

        for suffix, source in (
            ("[lt]", self._lt),
            ("[lte]", self._lte),
            ("[gt]", self._gt),
            ("[gte]", self._gte),
        ):
            for key, value in source.items():
                rendered = _comparable(value)
                if rendered is not None:
                    params[key + suffix] = rendered

        if self._query:
            params["query"] = self._query

        for suffix, strings in (("[match]", self._match), ("[near]", self._near), ("[within]", self._within)):
            for key, value in strings.items():
                params[key + suffix] = value

        if self._order:
            params["order"] = ",".join(self._order)

        if self._limit:
            if self._limit > MAX_LIMIT:
                raise QueryError("limit value should be between 0 and 1000")
            params["limit"] = str(self._limit)

        if self._skip:
            params["skip"] = str(self._skip)

        if self._mime:
            params["mimetype_group"] = self._mime

        if self._locale:
            params["locale"] = self._locale

        return params

    def __str__(self) -> str:
        return urlencode(sorted(self.values().items()))