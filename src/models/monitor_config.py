"""
Monitor configuration model.

Explicit configuration passed into the engine entry point.
"""

from dataclasses import dataclass, replace

from src.errors import ConfigurationError


@dataclass(frozen=True)
class MonitorConfig:
    """
    Everything the orchestrator needs for one monitoring pass.
    The engine never reads the process environment; callers build this.
    """
    package_name: str
    ga4_property_id: str = ""
    play_service_account_json: str = ""
    firebase_service_account_json: str = ""
    range_days: int = 7
    compare_mode: str = "week"  # "day" or "week"
    review_max_results: int = 100
    vitals_page_size: int = 10
    include_vitals: bool = True
    http_timeout_seconds: float = 15
    crash_event_name: str = "app_exception"

    @classmethod
    def from_settings(cls, settings, **overrides) -> "MonitorConfig":
        """
        Create MonitorConfig from a settings module.

        Overrides with a value of None are ignored, so CLI arguments
        can be passed straight through.
        """
        config = cls(
            package_name=settings.ANDROID_PACKAGE_NAME,
            ga4_property_id=settings.GA4_PROPERTY_ID,
            play_service_account_json=settings.GOOGLE_PLAY_SERVICE_ACCOUNT_JSON,
            firebase_service_account_json=settings.FIREBASE_SERVICE_ACCOUNT_JSON,
            range_days=settings.DEFAULT_RANGE_DAYS,
            compare_mode=settings.DEFAULT_COMPARE_MODE,
            review_max_results=settings.REVIEW_MAX_RESULTS,
            vitals_page_size=settings.VITALS_PAGE_SIZE,
            http_timeout_seconds=settings.HTTP_TIMEOUT_SECONDS,
            crash_event_name=settings.CRASH_EVENT_NAME
        )
        return config.with_overrides(**overrides)

    def with_overrides(self, **overrides) -> "MonitorConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> None:
        """Raise ConfigurationError if required identifiers are missing."""
        if not self.package_name:
            raise ConfigurationError(
                "Android package name is missing. Set ANDROID_PACKAGE_NAME or pass --package."
            )
        if self.review_max_results <= 0:
            raise ConfigurationError(
                f"Invalid review_max_results: {self.review_max_results}. Must be > 0"
            )

    @property
    def has_crash_property(self) -> bool:
        return bool(self.ga4_property_id)

    def describe(self) -> str:
        """Short summary for logs (no secrets)."""
        return (
            f"package={self.package_name}, property={self.ga4_property_id or '-'}, "
            f"range_days={self.range_days}, compare_mode={self.compare_mode}"
        )
