"""Workflow orchestration package for Fuzzinator.

This package contains orchestration components for ranking runs:
- RankLogger: Structured logging of ranking runs to timestamped log files.
- RankOrchestrator: Coordinates the engine, display and logging for a run.
"""

from fuzzinator.orchestration.rank_logger import RankLogger
from fuzzinator.orchestration.rank_orchestrator import RankOrchestrator

__all__ = ["RankLogger", "RankOrchestrator"]
