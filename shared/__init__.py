"""
Keyspace Shared Module
=======================

Configuration, logging, console and numeric helpers shared by the
Keyspace engine and its command-line surface.
"""

from shared.config import KeyspaceConfig, get_config

__all__ = ["KeyspaceConfig", "get_config"]
