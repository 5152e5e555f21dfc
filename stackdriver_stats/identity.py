"""Process identity attached to every series as the opencensus_task label"""
import functools
import os
import socket
from typing import Optional

OPENCENSUS_TASK = "opencensus_task"
OPENCENSUS_TASK_DESCRIPTION = "Opencensus task identifier"

RUNTIME_TAG = "py"
FALLBACK_HOSTNAME = "localhost"


def _hostname() -> str:
    try:
        return socket.gethostname() or FALLBACK_HOSTNAME
    except OSError:
        return FALLBACK_HOSTNAME


def generate_task_value(pid: Optional[int] = None, hostname: Optional[str] = None) -> str:
    """Return a task label value in the format ``py-<pid>@<hostname>``"""
    if pid is None:
        pid = os.getpid()
    if not hostname:
        hostname = _hostname()
    return f"{RUNTIME_TAG}-{pid}@{hostname}"


@functools.lru_cache(maxsize=None)
def default_task_value() -> str:
    """Task value for this process, computed on first use"""
    return generate_task_value()
