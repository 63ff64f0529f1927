"""Addon updater (config-driven, single addon per run).

Core design goals:
- Linear pipeline, aborts on first error
- One flat state record per run
- JSON or YAML config
- Centralized logging
"""

__all__ = []
