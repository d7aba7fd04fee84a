"""
Configuration settings for Release Health Monitor.

Centralized configuration for upstream sources and engine defaults.
Only this module reads the process environment.
"""

import os

# App identifiers
ANDROID_PACKAGE_NAME = os.getenv("ANDROID_PACKAGE_NAME", "")
GA4_PROPERTY_ID = os.getenv("GA4_PROPERTY_ID", "")

# Service account credentials (raw JSON strings)
GOOGLE_PLAY_SERVICE_ACCOUNT_JSON = os.getenv("GOOGLE_PLAY_SERVICE_ACCOUNT_JSON", "")
FIREBASE_SERVICE_ACCOUNT_JSON = os.getenv("FIREBASE_SERVICE_ACCOUNT_JSON", "")

# OAuth scopes
ANDROID_PUBLISHER_SCOPE = "https://www.googleapis.com/auth/androidpublisher"
PLAY_REPORTING_SCOPE = "https://www.googleapis.com/auth/playdeveloperreporting"
ANALYTICS_SCOPE = "https://www.googleapis.com/auth/analytics.readonly"

# Upstream endpoints
ANDROID_PUBLISHER_URL = "https://androidpublisher.googleapis.com/androidpublisher/v3"
PLAY_REPORTING_URL = "https://playdeveloperreporting.googleapis.com/v1beta1"
ANALYTICS_DATA_URL = "https://analyticsdata.googleapis.com/v1beta"

# Crashlytics logs crashes as app_exception in GA4
CRASH_EVENT_NAME = "app_exception"

# Engine defaults
DEFAULT_RANGE_DAYS = 7
DEFAULT_COMPARE_MODE = "week"  # "day" or "week"

# Fetch sizes
REVIEW_MAX_RESULTS = 100
VITALS_PAGE_SIZE = 10

# HTTP
HTTP_TIMEOUT_SECONDS = 15

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
