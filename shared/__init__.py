"""
Passforge Shared Module
=======================

Configuration, structured logging, and statistics helpers shared by the
Passforge generator, analyzers, and engine.
"""

from shared.config import PassforgeConfig, get_config

__all__ = ["PassforgeConfig", "get_config"]
