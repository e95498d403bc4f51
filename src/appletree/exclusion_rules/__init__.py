"""Rules deciding which entries are hidden from the tree."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .hidden_rules import HiddenEntryRules
from .only_rules import OnlyPatternRules
from .pattern_rules import PatternExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "HiddenEntryRules",
    "OnlyPatternRules",
    "PatternExclusionRules",
]
