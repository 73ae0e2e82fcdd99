"""UrlEntry — one ``<url>`` (or ``<sitemap>``) record.

Holds a location plus its crawl hints.  Only the location is validated;
the hints are normalised leniently so that values read back from foreign
sitemaps never abort a load:

- ``priority`` outside ``[0.0, 1.0]`` or non-numeric becomes ``"0.5"``
- ``change_frequency`` outside the protocol enumeration becomes ``"daily"``
- ``last_modified`` of ``None`` (or unparseable) becomes the current time

Identity for deduplication is the location alone; see
:class:`~sitemapkit.models.collection.UrlCollection`.

"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from sitemapkit._errors import ValidationError

if TYPE_CHECKING:
    from sitemapkit._types import Alternates, ChangeFrequency, Timestamp

CHANGE_FREQUENCIES: tuple[ChangeFrequency, ...] = (
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
)

DEFAULT_CHANGE_FREQUENCY: ChangeFrequency = "daily"
DEFAULT_PRIORITY = "0.5"

# from_params() key -> constructor argument
_PARAM_ALIASES: dict[str, str] = {
    "location": "location",
    "last_modified": "last_modified",
    "lastModified": "last_modified",
    "change_frequency": "change_frequency",
    "changeFrequency": "change_frequency",
    "priority": "priority",
    "alternates": "alternates",
}


def is_valid_location(value: object) -> bool:
    """Return True for an absolute URL with a scheme, a host and a path."""
    if not isinstance(value, str) or not value:
        return False
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc and parts.path)


def format_timestamp(value: Timestamp) -> str:
    """Format *value* as ISO-8601 with a UTC offset, falling back to now."""
    moment = _to_datetime(value)
    if moment is None:
        moment = datetime.now()
    return moment.astimezone().isoformat(timespec="seconds")


def parse_timestamp(text: str | None) -> datetime | None:
    """Parse an ISO-8601 ``lastmod`` value.  Returns None if unparseable."""
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError:
        return None


def _to_datetime(value: Timestamp) -> datetime | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        return parse_timestamp(value)
    return None


def _coerce_priority(value: object) -> str:
    if value is None or isinstance(value, bool):
        return DEFAULT_PRIORITY
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return DEFAULT_PRIORITY
    # NaN fails both comparisons and falls through to the default
    if not 0.0 <= number <= 1.0:
        return DEFAULT_PRIORITY
    return f"{number:.1f}"


def _coerce_change_frequency(value: object) -> ChangeFrequency:
    if isinstance(value, str) and value in CHANGE_FREQUENCIES:
        return value  # type: ignore[return-value]
    return DEFAULT_CHANGE_FREQUENCY


class UrlEntry:
    """A single sitemap record.

    Args:
        location: Absolute URL of the page (or child sitemap).
        last_modified: Modification time; ``None`` means now.
        change_frequency: One of :data:`CHANGE_FREQUENCIES`.
        priority: Relative priority in ``[0.0, 1.0]``.
        alternates: Language code -> URL for localized page groups.

    Raises:
        ValidationError: If *location* is not an absolute URL with a path.

    """

    __slots__ = (
        "_alternates",
        "_change_frequency",
        "_last_modified",
        "_location",
        "_priority",
    )

    def __init__(
        self,
        location: str,
        last_modified: Timestamp = None,
        change_frequency: str | None = None,
        priority: object = None,
        alternates: Alternates | None = None,
    ) -> None:
        self.location = location
        self.last_modified = last_modified
        self.change_frequency = change_frequency
        self.priority = priority
        self.alternates = alternates or {}

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> UrlEntry:
        """Build an entry from a parameter mapping, ignoring unknown keys."""
        kwargs: dict[str, Any] = {}
        for key, value in params.items():
            name = _PARAM_ALIASES.get(key)
            if name is not None:
                kwargs[name] = value
        if "location" not in kwargs:
            msg = "A location is required to build a sitemap entry"
            raise ValidationError(msg)
        return cls(**kwargs)

    @property
    def location(self) -> str:
        return self._location

    @location.setter
    def location(self, value: str) -> None:
        if not is_valid_location(value):
            msg = f"Please specify a valid absolute URL with a path: {value!r}"
            raise ValidationError(msg)
        self._location = value

    @property
    def last_modified(self) -> str:
        """ISO-8601 modification time."""
        return self._last_modified

    @last_modified.setter
    def last_modified(self, value: Timestamp) -> None:
        self._last_modified = format_timestamp(value)

    @property
    def change_frequency(self) -> ChangeFrequency:
        return self._change_frequency

    @change_frequency.setter
    def change_frequency(self, value: str | None) -> None:
        self._change_frequency = _coerce_change_frequency(value)

    @property
    def priority(self) -> str:
        """Priority formatted with one decimal place (e.g. ``"0.5"``)."""
        return self._priority

    @priority.setter
    def priority(self, value: object) -> None:
        self._priority = _coerce_priority(value)

    @property
    def alternates(self) -> dict[str, str]:
        """Language code -> URL.  Returns a copy."""
        return dict(self._alternates)

    @alternates.setter
    def alternates(self, value: Alternates) -> None:
        self._alternates = {str(lang): str(url) for lang, url in value.items()}

    def __repr__(self) -> str:
        return (
            f"UrlEntry(location={self._location!r}, "
            f"last_modified={self._last_modified!r}, "
            f"change_frequency={self._change_frequency!r}, "
            f"priority={self._priority!r})"
        )
