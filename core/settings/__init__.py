"""Persistent settings for the world clock."""

from .settings_manager import SettingsManager

__all__ = ['SettingsManager']
