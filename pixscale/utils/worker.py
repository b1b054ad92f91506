"""Run resizes off the calling thread.

The resampling loop is CPU-bound and blocks; interactive callers hand it to
a :class:`ResizeWorker` (one background thread, cancellable between rows)
or to :func:`resize_many` for batches of independent requests.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from ..buffer import PixelBuffer
from ..config import ResizeLimits
from ..request import ResizeRequest
from ..resamplers import resample

logger = logging.getLogger(__name__)


class ResizeWorker:
    """Background resize of a single request.

    Example
    -------
    >>> worker = ResizeWorker(request).start()
    >>> out = worker.result(timeout=5.0)
    """

    def __init__(self, request: ResizeRequest, limits: Optional[ResizeLimits] = None) -> None:
        self.request = request
        self.limits = limits
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._result: Optional[PixelBuffer] = None
        self._error: Optional[BaseException] = None

    def start(self) -> "ResizeWorker":
        if self._thread is not None:
            raise RuntimeError("worker already started")
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def _run(self) -> None:
        try:
            self._result = resample(self.request, limits=self.limits, cancel=self._cancel.is_set)
        except Exception as exc:
            logger.debug("Resize worker failed: %s", exc)
            self._error = exc

    def cancel(self) -> None:
        """Ask the worker to stop at the next row boundary."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def done(self) -> bool:
        return self._thread is not None and not self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker; return True if it finished."""
        if self._thread is None:
            raise RuntimeError("worker not started")
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def result(self, timeout: Optional[float] = None) -> PixelBuffer:
        """Return the resized buffer, re-raising any error from the worker.

        Raises
        ------
        TimeoutError
            If the worker is still running after ``timeout`` seconds.
        """
        if not self.join(timeout):
            raise TimeoutError("resize still running")
        if self._error is not None:
            raise self._error
        if self._result is None:
            raise RuntimeError("worker finished without a result")
        return self._result


def resize_many(
    requests: Iterable[ResizeRequest],
    max_workers: Optional[int] = None,
    limits: Optional[ResizeLimits] = None,
) -> List[PixelBuffer]:
    """Resize independent requests in parallel threads, results in input order.

    The first failing request's exception propagates once all submitted
    requests have finished.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(resample, req, limits) for req in requests]
        return [f.result() for f in futures]
