"""Point-in-time process counters: uptime, memory, CPU."""

import time

import psutil

_PROCESS = psutil.Process()


def uptime_seconds() -> float:
    """Seconds since the process was created."""
    return max(time.time() - _PROCESS.create_time(), 0.0)


def memory_usage() -> dict[str, int]:
    """Memory counters in bytes.

    Always has ``rss`` and ``vms``; the other fields depend on the platform
    psutil reports for (``shared``, ``data``, ``pagefile``...).
    """
    return dict(_PROCESS.memory_info()._asdict())


def cpu_usage() -> dict[str, int]:
    """Accumulated user/system CPU time in microseconds."""
    times = _PROCESS.cpu_times()
    return {
        "user": int(times.user * 1_000_000),
        "system": int(times.system * 1_000_000),
    }
