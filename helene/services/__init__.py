"""Helene analytics services.

Every service is a pure function of the window of entries it is given:
- sentiment_service: note classification, run once per entry at save time
- qol_service: MENQOL-style domain quality-of-life scores
- insight_service: week-over-week and monthly observations
- safety_service: red-flag alerts and critical-alert events
- trend_service: sentiment trend and assistant digest
- analytics_service: HTTP surface over all of the above
"""
