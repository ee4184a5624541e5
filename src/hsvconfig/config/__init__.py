"""HitScoreVisualizer configuration package.

This package provides configuration document management with:
- Version classification against the running application
- Ordered migrations for older documents
- Validation and canonicalization of judgment lists
- Discovery and selection of documents on disk
"""

from .active import ActiveConfigHolder
from .classifier import ConfigClassifier
from .migrations import MigrationChain
from .models import ConfigFileInfo, Configuration, ConfigState, Judgment, JudgmentSegment
from .store import ConfigStore, LoadResult, LoadStatus
from .validation import JudgmentValidator

__all__ = [
    "ActiveConfigHolder",
    "ConfigClassifier",
    "ConfigFileInfo",
    "ConfigState",
    "ConfigStore",
    "Configuration",
    "Judgment",
    "JudgmentSegment",
    "JudgmentValidator",
    "LoadResult",
    "LoadStatus",
    "MigrationChain",
]
