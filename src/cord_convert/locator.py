# src/cord_convert/locator.py

import logging
from pathlib import Path
from time import monotonic

from cord_convert.errors import DocumentNotFoundError
from cord_convert.observability import names
from cord_convert.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


class DocumentLocator:
    """
    Finds documents anywhere under a dataset root by file name.

    The directory tree is walked once, on the first lookup, and every file
    ending with `suffix` is indexed by its name. When the same name appears
    in several directories the last one in sorted path order wins.
    """

    def __init__(
        self,
        root: str | Path,
        suffix: str = ".json",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._root = Path(root)
        self._suffix = suffix
        self._index: dict[str, Path] | None = None
        self.metrics_hook = metrics_hook

    def locate(self, file_name: str) -> Path:
        index = self._ensure_index()
        try:
            return index[file_name]
        except KeyError:
            raise DocumentNotFoundError(file_name) from None

    def __len__(self) -> int:
        return len(self._ensure_index())

    def _ensure_index(self) -> dict[str, Path]:
        if self._index is None:
            self._index = self._build_index()
        return self._index

    def _build_index(self) -> dict[str, Path]:
        start = monotonic()
        index: dict[str, Path] = {}
        for path in sorted(self._root.rglob(f"*{self._suffix}")):
            if path.is_file():
                index[path.name] = path

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.LOCATOR_INDEX_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.LOCATOR_FILES_INDEXED, len(index))
        logger.info("Indexed %d %s files under %s", len(index), self._suffix, self._root)
        return index
