"""
Configuration module for the Field Scenario Simulator.
"""

from config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
