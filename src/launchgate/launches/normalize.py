"""
Normalization of upstream launch records into canonical Launch entities.

Upstream records come in the SpaceX v2 shape but any nested object may be
missing or null. Normalization never raises on absent optional data; missing
nested objects become embedded entities whose fields are all None. Every
launch gets an id and a cursor, and no two launches of one payload share a
cursor.
"""

import hashlib
import json
from collections import Counter
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

from ..logging import get_logger
from .models import Launch, Mission, Rocket

logger = get_logger(__name__)


def _section(record: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = record.get(key)
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _timestamp(record: Mapping[str, Any]) -> int | None:
    """Launch time in Unix seconds, from ``launch_date_unix`` or ``launch_date_utc``."""
    unix = record.get("launch_date_unix")
    if isinstance(unix, bool):
        unix = None
    if isinstance(unix, int | float):
        return int(unix)
    if isinstance(unix, str) and unix.strip().lstrip("-").isdigit():
        return int(unix)

    utc = record.get("launch_date_utc")
    if isinstance(utc, str) and utc:
        try:
            return int(datetime.fromisoformat(utc.replace("Z", "+00:00")).timestamp())
        except ValueError:
            logger.debug("Unparseable launch_date_utc", launch_date_utc=utc)
    return None


def _launch_id(record: Mapping[str, Any]) -> str:
    """``flight_number`` as text, or a digest of the record when it has none."""
    flight_number = record.get("flight_number")
    if flight_number is not None and str(flight_number).strip():
        return str(flight_number).strip()

    payload = json.dumps(record, sort_keys=True, default=str).encode("utf-8")
    return "x" + hashlib.sha1(payload).hexdigest()[:12]


def normalize_launch(record: Mapping[str, Any]) -> Launch:
    """Convert one upstream record into a canonical Launch."""
    launch_id = _launch_id(record)
    timestamp = _timestamp(record)
    links = _section(record, "links")
    site = _section(record, "launch_site")
    rocket = _section(record, "rocket")

    return Launch(
        id=launch_id,
        cursor=str(timestamp) if timestamp is not None else f"n{launch_id}",
        timestamp=timestamp,
        site=_text(site.get("site_name")),
        mission=Mission(
            name=_text(record.get("mission_name")),
            patch_small=_text(links.get("mission_patch_small")),
            patch_large=_text(links.get("mission_patch")),
        ),
        rocket=Rocket(
            id=_text(rocket.get("rocket_id")),
            name=_text(rocket.get("rocket_name")),
            type=_text(rocket.get("rocket_type")),
        ),
    )


def _unique_cursors(launches: list[Launch]) -> list[Launch]:
    """Qualify cursors shared by several launches with the launch id, then a counter."""
    counts = Counter(launch.cursor for launch in launches)
    shared = {cursor for cursor, count in counts.items() if count > 1}
    if not shared:
        return launches

    launches = [
        replace(launch, cursor=f"{launch.cursor}-{launch.id}")
        if launch.cursor in shared
        else launch
        for launch in launches
    ]
    seen: Counter[str | None] = Counter()
    result = []
    for launch in launches:
        seen[launch.cursor] += 1
        if seen[launch.cursor] > 1:
            launch = replace(launch, cursor=f"{launch.cursor}~{seen[launch.cursor]}")
        result.append(launch)
    return result


def normalize_launches(payload: Any) -> list[Launch]:
    """Normalize a list payload; anything that is not a list yields no launches."""
    if not isinstance(payload, list):
        logger.warning(
            "Upstream launches payload is not a list", payload_type=type(payload).__name__
        )
        return []
    launches = [normalize_launch(record) for record in payload if isinstance(record, Mapping)]
    return _unique_cursors(launches)
