"""Directory size aggregation."""

import logging
from pathlib import Path
from typing import Optional

from bytetools.errors import TraversalError
from bytetools.filesystems import LocalFileSystem
from bytetools.models import Err, Ok, Result, SizeReport
from bytetools.protocols import FileSystem, SizeStrategy
from bytetools.strategies import available_strategies, get_strategy

logger = logging.getLogger(__name__)


class DirectorySizeAggregator:
    """Compute the total size of everything reachable under a directory.

    Failures on individual entries are logged and skipped; only a root that
    cannot be walked is returned as an error.
    """

    DEFAULT_STRATEGY = "nested"

    def __init__(
        self,
        strategy: str | SizeStrategy | None = None,
        filesystem: Optional[FileSystem] = None,
    ):
        """Initialize the aggregator.

        Args:
            strategy: Strategy name or instance. Defaults to "nested".
            filesystem: Filesystem backend. Defaults to the local disk.

        Raises:
            ValueError: strategy name is not registered
        """
        self._strategy = self._resolve_strategy(
            self.DEFAULT_STRATEGY if strategy is None else strategy
        )
        self._filesystem = filesystem or LocalFileSystem()

    @property
    def strategy(self) -> SizeStrategy:
        return self._strategy

    def aggregate(self, root: Path | str) -> Result[SizeReport, TraversalError]:
        """Sum the sizes below ``root``.

        Args:
            root: Directory to walk

        Returns:
            Ok(SizeReport) when the root could be walked, even if some
            entries below it were skipped; Err(TraversalError) otherwise
        """
        root_path = Path(root)
        logger.debug(f"Measuring {root_path} with {self._strategy.name} strategy")

        try:
            report = self._strategy.measure(root_path, self._filesystem)
        except TraversalError as exc:
            logger.error(f"Error walking directory: {exc}")
            return Err(exc)

        if not report.complete:
            logger.warning(
                f"{root_path}: skipped {report.skipped} entries, total may be low"
            )
        return Ok(report)

    @staticmethod
    def _resolve_strategy(strategy: str | SizeStrategy) -> SizeStrategy:
        if not isinstance(strategy, str):
            return strategy

        resolved = get_strategy(strategy)
        if resolved is None:
            supported = ", ".join(available_strategies())
            raise ValueError(f"Unknown strategy {strategy!r} (supported: {supported})")
        return resolved


def directory_size(
    root: Path | str, strategy: str = DirectorySizeAggregator.DEFAULT_STRATEGY
) -> Result[SizeReport, TraversalError]:
    """Measure ``root`` on the local disk with the named strategy."""
    return DirectorySizeAggregator(strategy).aggregate(root)
