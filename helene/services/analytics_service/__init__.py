"""Analytics Service: HTTP surface over the analytics components.

The presentation layer posts a window of entries and receives freshly
computed reports; nothing is cached between requests.

Endpoints:
- GET /health - Health check
- GET /ready - Readiness check
- POST /sentiment - Classify one note
- POST /quality-of-life - Domain quality-of-life report
- POST /insights - Weekly or monthly insights
- POST /red-flags - Priority-sorted safety alerts
- POST /trends - Sentiment trend and assistant digest
"""

from .handler import (
    AnalyticsHandler,
    AnalyticsConfig,
    InvalidRequest,
    app,
    get_handler,
    parse_entries,
    set_handler,
)

__all__ = [
    "AnalyticsHandler",
    "AnalyticsConfig",
    "InvalidRequest",
    "app",
    "get_handler",
    "parse_entries",
    "set_handler",
]
