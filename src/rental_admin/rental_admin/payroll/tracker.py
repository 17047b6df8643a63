from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import Month
from .model import PayrollReport

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollRun:
    """One request for a month's payroll; ``seq`` orders requests."""

    seq: int
    month: Month


class PayrollRunTracker:
    """Latest-request-wins bookkeeping for payroll recomputation.

    Selecting another month issues a new run; a result that arrives for an
    older run is dropped instead of replacing the newer one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._seq = 0
        self._latest: Optional[PayrollReport] = None

    def begin(self, month: Month) -> PayrollRun:
        with self._lock:
            self._seq += 1
            return PayrollRun(seq=self._seq, month=month)

    def complete(self, run: PayrollRun, report: PayrollReport) -> bool:
        with self._lock:
            if run.seq != self._seq:
                log.info("dropping payroll for %s (run %s superseded by run %s)", run.month, run.seq, self._seq)
                return False
            self._latest = report
            return True

    @property
    def latest(self) -> Optional[PayrollReport]:
        with self._lock:
            return self._latest
