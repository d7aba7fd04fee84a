"""
Utility modules for Release Health Monitor.

Cross-cutting concerns:
- Credentials: Service account loading and access tokens
"""
