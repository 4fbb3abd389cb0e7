# src/nbprate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- NBP remote folder (index files and currency tables)
- Formatting (output)
"""

__all__ = []
