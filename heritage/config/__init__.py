"""Configuration package for the trait engine.

Module constants live in ``lineage`` and ``conditions``; ``engine_config``
groups the tunable ones into dataclasses passed to the engine.
"""

from heritage.config.engine_config import EngineConfig, LineageConfig

__all__ = ["EngineConfig", "LineageConfig"]
