"""
Upstream source adapters.

Thin REST clients for the external telemetry providers:
- Play Console reviews (PlayReviewSource)
- GA4 crash events (GA4CrashEventSource)
- Play Vitals error issues (PlayVitalsSource)
"""
