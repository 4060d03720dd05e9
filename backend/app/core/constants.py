"""Shared application constants.

Centralizes the thresholds and unit conversions used by the progress
calculations so we can document and adjust them in one place.
"""

GRAMS_PER_KG = 1000

# Calendar approximations used for pace figures
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30

# Daily change (kg) separating mild from strong loss / notable gain
INSIGHT_THRESHOLD_KG = 0.3

# Most recent entries shown in the timeline and the daily chart
TIMELINE_DEFAULT_ITEMS = 10
DAILY_CHART_POINTS = 7

# Months covered by the monthly evolution series
MONTHLY_SERIES_MONTHS = 6

# Account rules
MIN_USERNAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 4
