"""User interface package for Fuzzinator.

This package contains the Rich-based terminal display used by the CLI.
"""

from fuzzinator.ui.rank_tui import RankTUI

__all__ = ["RankTUI"]
