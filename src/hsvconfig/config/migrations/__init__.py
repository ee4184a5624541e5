"""Configuration document migrations.

Each step module contains one structural upgrade keyed by the version that
introduced the change. The registry applies them in ascending order.
"""

from .registry import Migration, MigrationChain

__all__ = ["Migration", "MigrationChain"]
