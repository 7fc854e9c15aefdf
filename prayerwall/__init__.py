"""PrayerWall — content moderation for community prayer requests."""

__version__ = "0.1.0"
