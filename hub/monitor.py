"""
Host readings for the system monitor page.

CPU, memory, disk and uptime come from psutil. There is no portable way to
read GPU load, so that value (and the frame rate recorded with each
snapshot) is simulated.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from collections import deque
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Deque, List, Optional

import psutil

from hub.schemas import SystemStatsCreate
from shared.constants import SAMPLE_INTERVAL_SECONDS, SAMPLER_HISTORY_LIMIT

if TYPE_CHECKING:
    from hub.db import DbClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemReading:
    cpu: int
    gpu: int
    ram: int
    disk: int
    uptime: float
    timestamp: float

    def as_dict(self) -> dict:
        return asdict(self)


def _simulated_gpu() -> int:
    return random.randint(20, 79)


def _simulated_fps() -> int:
    return random.randint(60, 144)


def read_system_stats() -> SystemReading:
    """Take one reading of the host. Never blocks waiting for a CPU interval."""
    now = time.time()
    cpu = psutil.cpu_percent(interval=None)
    ram = psutil.virtual_memory().percent
    try:
        disk = psutil.disk_usage("/").percent
    except OSError:
        disk = 0.0
    return SystemReading(
        cpu=int(round(cpu)),
        gpu=_simulated_gpu(),
        ram=int(round(ram)),
        disk=int(round(disk)),
        uptime=max(0.0, now - psutil.boot_time()),
        timestamp=now,
    )


class StatsSampler:
    """
    Periodically reads the host and records a snapshot into storage.

    Keeps its own short window of readings for the live monitor; the longer
    snapshot history lives in the storage backend.
    """

    def __init__(
        self,
        db: "DbClient",
        interval: float = SAMPLE_INTERVAL_SECONDS,
        history_limit: int = SAMPLER_HISTORY_LIMIT,
        reader=read_system_stats,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.db = db
        self.interval = interval
        self._reader = reader
        self._history: Deque[SystemReading] = deque(maxlen=history_limit)
        self._history_lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def read(self) -> SystemReading:
        """Take a reading without recording it."""
        return self._reader()

    def sample_once(self) -> SystemReading:
        reading = self.read()
        with self._history_lock:
            self._history.append(reading)
        self.db.record_stats(
            SystemStatsCreate(
                cpu_usage=min(max(reading.cpu, 0), 100),
                gpu_usage=min(max(reading.gpu, 0), 100),
                ram_usage=min(max(reading.ram, 0), 100),
                fps=_simulated_fps(),
            )
        )
        return reading

    def history(self) -> List[SystemReading]:
        with self._history_lock:
            return list(self._history)

    def latest(self) -> Optional[SystemReading]:
        with self._history_lock:
            return self._history[-1] if self._history else None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="stats-sampler", daemon=True
        )
        self._thread.start()
        logger.info("Stats sampler started (every %.1fs)", self.interval)

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.sample_once()
            except Exception:
                logger.exception("Stats sample failed")
            self._stop.wait(self.interval)
