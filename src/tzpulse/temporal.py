"""Temporal classifier: business/night/weekend/DST flags for a zone's local clock.

Wall-clock conversion is delegated to the pytz (Olson) database.
"""

import logging
from datetime import datetime, timedelta, timezone

from pytz import UnknownTimeZoneError
from pytz import timezone as pytz_timezone

from tzpulse.config import EngineSettings
from tzpulse.errors import UnknownRegion
from tzpulse.models import TemporalClassification

log = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6


def format_utc_offset(offset: timedelta) -> str:
    """Format a UTC offset as "+HH:MM" / "-HH:MM"."""
    total_minutes = round(offset.total_seconds() / 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _in_window(hour: int, start: int, end: int) -> bool:
    """Half-open [start, end) on a 24h clock; wraps past midnight when start > end."""
    if start <= end:
        return start <= hour < end
    return hour >= start or hour < end


class TemporalClassifier:
    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def classify(self, region_id: str, instant: datetime) -> TemporalClassification:
        """Classify the local time in region_id at a UTC instant.

        The flags are independent: a Saturday afternoon is both business
        hours and weekend.

        Raises:
            UnknownRegion: region_id is not in the timezone database.
            ValueError: instant is naive.
        """
        if instant.tzinfo is None:
            raise ValueError("instant must be timezone-aware")
        try:
            tz = pytz_timezone(region_id)
        except UnknownTimeZoneError:
            raise UnknownRegion(region_id, "not in the timezone database") from None

        s = self.settings
        utc = instant.astimezone(timezone.utc)
        local = utc.astimezone(tz)
        offset = local.utcoffset() or timedelta(0)
        later = (utc + s.dst_lookahead).astimezone(tz).utcoffset() or timedelta(0)

        return TemporalClassification(
            region_id=region_id,
            local_time=local,
            utc_offset=offset,
            abbreviation=local.tzname() or "",
            is_business_hours=_in_window(local.hour, s.business_start, s.business_end),
            is_night_hours=_in_window(local.hour, s.night_start, s.night_end),
            is_weekend=local.weekday() in (SATURDAY, SUNDAY),
            is_daylight_saving=bool(local.dst()),
            is_approaching_dst_transition=later != offset,
        )

    def classify_or_fallback(self, region_id: str, instant: datetime) -> TemporalClassification:
        """classify(), substituting the configured fallback zone for unknown identifiers."""
        try:
            return self.classify(region_id, instant)
        except UnknownRegion:
            log.warning(
                "Unknown zone %s, classifying as %s", region_id, self.settings.fallback_zone
            )
            return self.classify(self.settings.fallback_zone, instant)
