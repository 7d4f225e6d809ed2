"""
Keyspace Output Module
=======================

Console rendering of estimation results.
"""

from keyspace.output.console import KeyspaceConsoleOutput

__all__ = ["KeyspaceConsoleOutput"]
