"""Helene: derived health signals from self-reported daily check-ins.

Every analytics component is a pure function of a window of
DailyLogEntry snapshots supplied by the caller. Nothing here writes to the
log store; the only persisted output is the per-entry sentiment snapshot,
which the caller stores alongside the entry at save time.
"""

__version__ = "1.0.0"
