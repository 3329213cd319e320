import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Adds an attribute `delta` to each :class:`.logging.LogRecord`, which
    holds the time elapsed since a reference time. The :class:`.Engine` sets
    the reference time at the beginning of each run, so that log lines show
    how long the single passes take.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('folnf.demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> logger.warning('distributing')  # doctest: +SKIP
    0:00:00.001: distributing
    """

    _time_since_start_time = time.time() - logging._startTime  # type: ignore

    def format(self, record: logging.LogRecord) -> str:
        timestamp = record.relativeCreated / 1000 - self._time_since_start_time
        delta = datetime.timedelta(seconds=max(timestamp, 0.0))
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        """
        return self._time_since_start_time + logging._startTime  # type: ignore

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`, e.g., the output of :func:`.time.time`.
        """
        self._time_since_start_time = reference_time - logging._startTime  # type: ignore


class Timer:
    """Wall time in seconds since the last :meth:`.reset`. A new timer is
    reset on creation.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        return time.time() - self._reference_time

    def reset(self) -> None:
        self._reference_time = time.time()
