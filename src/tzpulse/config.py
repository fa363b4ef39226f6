"""Engine settings, read from TZPULSE_* environment variables (after load_dotenv)."""

import os
from dataclasses import dataclass
from datetime import timedelta

ENV_PREFIX = "TZPULSE_"


@dataclass(frozen=True)
class EngineSettings:
    business_start: int = 9  # Local hour, inclusive
    business_end: int = 17  # Local hour, exclusive
    night_start: int = 20  # Night runs night_start..24 and 0..night_end
    night_end: int = 6
    dst_lookahead: timedelta = timedelta(hours=24)
    terminator_step: float = 1.0  # Degrees of longitude between samples
    fallback_zone: str = "UTC"

    def __post_init__(self) -> None:
        for name in ("business_start", "business_end", "night_start", "night_end"):
            hour = getattr(self, name)
            if not 0 <= hour <= 24:
                raise ValueError(f"{name} must be an hour in [0, 24], got {hour}")
        if self.business_start >= self.business_end:
            raise ValueError("business_start must be before business_end")
        if self.terminator_step <= 0:
            raise ValueError("terminator_step must be positive")
        if self.dst_lookahead <= timedelta(0):
            raise ValueError("dst_lookahead must be positive")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "EngineSettings":
        """Build settings from the environment; unset variables keep their defaults.

        Raises:
            ValueError: a variable is set but not parseable, naming the variable.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        def _read(key: str, parse):
            raw = env.get(ENV_PREFIX + key)
            if raw is None or raw.strip() == "":
                return None
            try:
                return parse(raw.strip())
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{key}={raw!r}: {exc}") from exc

        for key, attr in (
            ("BUSINESS_START", "business_start"),
            ("BUSINESS_END", "business_end"),
            ("NIGHT_START", "night_start"),
            ("NIGHT_END", "night_end"),
        ):
            value = _read(key, int)
            if value is not None:
                kwargs[attr] = value

        hours = _read("DST_LOOKAHEAD_HOURS", float)
        if hours is not None:
            kwargs["dst_lookahead"] = timedelta(hours=hours)
        step = _read("TERMINATOR_STEP", float)
        if step is not None:
            kwargs["terminator_step"] = step
        zone = _read("FALLBACK_ZONE", str)
        if zone is not None:
            kwargs["fallback_zone"] = zone

        return cls(**kwargs)
