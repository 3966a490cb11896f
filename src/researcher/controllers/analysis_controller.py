import logging
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd
from pydantic import BaseModel
from tqdm import tqdm

from researcher.engine.core import Research
from researcher.engine.locale import LocaleResolver, StopwordLocaleResolver
from researcher.engine.models import Paper
from researcher.engine.registry import ResearchRegistry
from researcher.engine.researcher import Researcher
from researcher.managers.config_manager import config_manager
from researcher.model import AnalysisReport

logger = logging.getLogger(__name__)


def _serialize(value: Any) -> Any:
    """Turns research results into plain JSON compatible values."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


def _worker_analyze_paper(
        task: Tuple[int, Paper],
        research_names: List[str],
        config: Dict[str, Any],
        custom_researches: Dict[str, Research],
        locale_resolver: Optional[LocaleResolver]
) -> AnalysisReport:
    """
    Worker function analysing a single paper, possibly in a separate process.
    Every call builds its own Researcher so no state is shared between papers.
    """
    index, paper = task
    report = AnalysisReport(index=index, url=paper.permalink)

    researcher = Researcher(paper, locale_resolver=locale_resolver)
    for name, value in config.items():
        researcher.add_config(name, value)
    for name, research in custom_researches.items():
        researcher.add_research(name, research)

    for name in research_names:
        try:
            report.results[name] = _serialize(researcher.get_research(name))
        except Exception as e:
            logger.error(f"Research '{name}' failed on paper {index} ({paper.permalink or 'no url'}): {e}")
            report.errors[name] = f"{type(e).__name__}: {e}"

    return report


class AnalysisController:
    """
    Runs a set of researches over many papers, optionally in parallel,
    and aggregates the reports.
    """

    def __init__(
            self,
            research_names: Optional[Iterable[str]] = None,
            workers: Optional[int] = None,
            config: Optional[Dict[str, Any]] = None,
            custom_researches: Optional[Dict[str, Research]] = None,
            locale_resolver: Optional[LocaleResolver] = None
    ):
        self.custom_researches = dict(custom_researches or {})
        available = set(ResearchRegistry.get_all_names()) | set(self.custom_researches)

        if research_names is None:
            self.research_names = sorted(available)
        else:
            self.research_names = list(research_names)
            unknown = [name for name in self.research_names if name not in available]
            if unknown:
                logger.warning("Unknown research(es) requested: %s", ", ".join(unknown))

        self.workers = workers or config_manager.get_nested("analysis.workers", 4)
        self.config = dict(config or {})
        self.locale_resolver = locale_resolver if locale_resolver is not None else StopwordLocaleResolver()

        # Results Buffers
        self.reports: List[AnalysisReport] = []
        self.failures: Counter = Counter()

    def run(self, papers: Iterable[Paper], show_progress: bool = False, progress_callback=None) -> List[AnalysisReport]:
        """
        Analyses every paper and returns one report per paper, in input order.

        Args:
            papers: The papers to analyse.
            show_progress: Show a tqdm progress bar.
            progress_callback: Optional callable receiving (done, total).
        """
        tasks = list(enumerate(papers))
        total = len(tasks)

        self.reports = []
        self.failures = Counter()

        func = partial(
            _worker_analyze_paper,
            research_names=self.research_names,
            config=self.config,
            custom_researches=self.custom_researches,
            locale_resolver=self.locale_resolver
        )

        with tqdm(total=total, desc="Analysing papers", unit="paper", disable=not show_progress) as bar:
            if self.workers <= 1 or total <= 1:
                self._collect(map(func, tasks), bar, total, progress_callback)
            else:
                with ProcessPoolExecutor(max_workers=self.workers) as executor:
                    self._collect(executor.map(func, tasks), bar, total, progress_callback)

        logger.info(f"Analysed {total} papers ({len(self.research_names)} researches each).")
        return self.reports

    def _collect(self, results_iter, bar, total: int, progress_callback) -> None:
        for i, report in enumerate(results_iter):
            self.reports.append(report)
            for name in report.errors:
                self.failures[name] += 1

            bar.update(1)
            if progress_callback:
                progress_callback(i + 1, total)

    def get_summary(self) -> Dict[str, Any]:
        return {
            "papers_analyzed": len(self.reports),
            "papers_with_errors": sum(1 for r in self.reports if r.has_errors),
            "failed_researches": dict(self.failures)
        }

    def to_dataframe(self, reports: Optional[List[AnalysisReport]] = None) -> pd.DataFrame:
        """
        One row per paper. Scalar results become columns, model results are
        flattened to '<research>.<field>' and list results to '<research>.count'.
        """
        rows = []
        for report in (self.reports if reports is None else reports):
            row: Dict[str, Any] = {"index": report.index, "url": report.url, "errors": len(report.errors)}
            for name, value in report.results.items():
                if isinstance(value, dict):
                    for key, sub_value in value.items():
                        if isinstance(sub_value, list):
                            row[f"{name}.{key}"] = len(sub_value)
                        else:
                            row[f"{name}.{key}"] = sub_value
                elif isinstance(value, list):
                    row[f"{name}.count"] = len(value)
                else:
                    row[name] = value
            rows.append(row)

        df = pd.DataFrame(rows)
        if not df.empty:
            df = df.set_index("index").sort_index()
        return df
