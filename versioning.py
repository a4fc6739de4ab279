"""Centralised version and naming information for WorldClock.

Single source of truth for the application version and human-readable
metadata; the CLI and packaging both read from here.
"""
from __future__ import annotations


APP_NAME: str = "WorldClock"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = "WorldClock - current time across a fixed set of zones with persisted favorite cities."
