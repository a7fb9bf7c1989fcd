"""
Declarative request validation.

A validator is an ordered list of :class:`Rule` objects.  Each rule
names a body field, a check and the message to report when the check
fails.  :func:`validate` runs *every* rule, collecting one
``{"field", "message"}`` entry per failure, so a single response can
describe all problems with a submitted form.  When all rules pass the
normalized values are returned keyed by field name.

Checks return a ``(ok, value)`` tuple; ``value`` is the normalized
form of the input (for example ``"2021"`` becomes ``2021``).

:func:`json_body` supplies the raw payload to the endpoints.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from dateutil.parser import isoparser
from fastapi import Request

from carshop_api.app.core.errors import ValidationFailed


Check = Callable[[Any], Tuple[bool, Any]]

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_ISO_PARSER = isoparser()


@dataclass(frozen=True)
class Rule:
    field: str
    check: Check
    message: str


def present() -> Check:
    """Value must be supplied and not render as an empty string."""

    def _check(value: Any) -> Tuple[bool, Any]:
        if value is None:
            return False, None
        return str(value) != "", value

    return _check


def int_between(minimum: int, maximum: int) -> Check:
    """Value must be a whole number (or a string of digits) in ``[minimum, maximum]``.

    JSON does not distinguish ``2021`` from ``2021.0``, so integral
    floats are accepted.  Strings must be digits only, no padding.
    """

    def _check(value: Any) -> Tuple[bool, Any]:
        if isinstance(value, bool):
            return False, None
        if isinstance(value, int):
            number = value
        elif isinstance(value, float) and value.is_integer():
            number = int(value)
        elif isinstance(value, str) and _INT_PATTERN.match(value):
            number = int(value)
        else:
            return False, None
        return minimum <= number <= maximum, number

    return _check


def iso_datetime() -> Check:
    """Value must be an ISO‑8601 date or date‑time string.

    The submitted string is kept as the normalized value; the parsed
    datetime is available through :func:`parse_iso_datetime`.
    """

    def _check(value: Any) -> Tuple[bool, Any]:
        return parse_iso_datetime(value) is not None, value

    return _check


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO‑8601 string, reduced precision included.

    Date‑only values (``2030``, ``2030-05``, ``2030-05-01``) are
    midnight UTC.  Date‑times without an offset are naive, meaning
    server‑local.  Returns ``None`` for anything else.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        day = _ISO_PARSER.parse_isodate(value)
    except ValueError:
        pass
    else:
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    try:
        return _ISO_PARSER.isoparse(value)
    except (ValueError, OverflowError):
        return None


def car_year_range(today: Optional[date] = None) -> Tuple[int, int]:
    """Accepted model years: 1980 through next year."""
    today = today or date.today()
    return 1980, today.year + 1


def validate(payload: Mapping[str, Any], rules: Sequence[Rule]) -> Dict[str, Any]:
    """Run ``rules`` against ``payload``.

    Returns the normalized values of the ruled fields, or raises
    :class:`ValidationFailed` listing every failed rule in declaration
    order.
    """
    errors: List[Dict[str, str]] = []
    cleaned: Dict[str, Any] = {}
    for rule in rules:
        ok, value = rule.check(payload.get(rule.field))
        if ok:
            cleaned[rule.field] = value
        else:
            errors.append({"field": rule.field, "message": rule.message})
    if errors:
        raise ValidationFailed(errors)
    return cleaned


async def json_body(request: Request) -> Dict[str, Any]:
    """FastAPI dependency returning the request body as a JSON object.

    Bodies that are not declared as JSON are ignored and read as an
    empty object, so the field rules report what is missing.  A JSON
    body that does not decode to an object is rejected as a whole.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json" and not media_type.endswith("+json"):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise ValidationFailed([{"field": "body", "message": "Request body must be valid JSON"}])
    if not isinstance(data, dict):
        raise ValidationFailed([{"field": "body", "message": "Request body must be a JSON object"}])
    return data
