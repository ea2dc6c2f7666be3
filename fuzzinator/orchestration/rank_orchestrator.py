"""RankOrchestrator for coordinating a ranking run.

This module provides the RankOrchestrator class that runs one ranking
request through the Fuzzinator engine, displays the results via RankTUI
and, when a log file is requested, records the run with RankLogger.

Example:
    from fuzzinator.orchestration import RankOrchestrator
    from fuzzinator.ranking import Fuzzinator

    orchestrator = RankOrchestrator(engine=Fuzzinator(), verbose=True)
    results = orchestrator.run_rank_workflow("cat", ["cat", "bat", "dog"])
"""

import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from rich.markup import escape

from fuzzinator.models import RankedString, SearchParams
from fuzzinator.orchestration.rank_logger import RankLogger
from fuzzinator.ranking import Fuzzinator
from fuzzinator.ui import RankTUI


class RankOrchestrator:
    """Orchestrates ranking, display and logging for one run.

    Attributes:
        engine: The Fuzzinator engine used for ranking.
        log_file_path: Optional path for the log file. No log is written
            when None.
        preset: Name of the preset the engine was built from, for the log.
        verbose: Whether to display additional details.
    """

    def __init__(
        self,
        engine: Fuzzinator,
        log_file_path: Optional[Path] = None,
        preset: Optional[str] = None,
        verbose: bool = False,
        tui: Optional[RankTUI] = None,
    ) -> None:
        self.engine = engine
        self.log_file_path = log_file_path
        self.preset = preset
        self.verbose = verbose
        self._tui = tui or RankTUI()

    def run_rank_workflow(
        self,
        root: str,
        space: Sequence[str],
        threshold: Optional[float] = None,
        sort: bool = True,
    ) -> List[RankedString]:
        """Rank ``space`` against ``root``, display and optionally log it.

        Returns:
            The RankedString results, in display order.

        Raises:
            InvalidFormulaError: If the engine's formula is not "l1" or "l2".
        """
        params = SearchParams(root=root, space=list(space), threshold=threshold, sort=sort)

        start_time = time.time()
        results = self.engine.search(params)
        duration = time.time() - start_time

        self._tui.display_rank_results(
            root=params.root,
            results=results,
            candidate_count=len(params.space),
            threshold=params.threshold,
        )

        if self.verbose:
            self._tui.console.print(
                f"[dim]Ranked {len(params.space)} candidate(s) in {duration:.3f}s "
                f"using formula {escape(str(self.engine.config.scoring.formula))}[/dim]"
            )

        if self.log_file_path is not None:
            self._write_log(params, results, duration)

        return results

    def _write_log(
        self,
        params: SearchParams,
        results: List[RankedString],
        duration: float,
    ) -> None:
        """Record the run; a log failure is reported but never fails the run."""
        try:
            with RankLogger(log_file_path=self.log_file_path, preset=self.preset) as logger:
                logger.log_header(self.engine.config)
                logger.log_rank_phase(
                    root=params.root,
                    candidate_count=len(params.space),
                    threshold=params.threshold,
                    sort=params.sort,
                    results=results,
                )
                logger.log_summary(
                    candidate_count=len(params.space),
                    results=results,
                    duration=duration,
                )

                if self.verbose:
                    self._tui.console.print(
                        f"[dim]Log file: {escape(str(logger.get_log_path()))}[/dim]"
                    )
        except OSError as e:
            print(f"Warning: Could not create log file: {e}", file=sys.stderr)
