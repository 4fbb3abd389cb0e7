# src/nbprate/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from nbprate.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
