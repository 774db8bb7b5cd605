"""Periodic removal of expired short URLs.

The sweep runs as an APScheduler interval job on a background thread. A
failing tick is logged and the job keeps its schedule.
"""

import atexit
import logging

from apscheduler.schedulers.background import BackgroundScheduler


logger = logging.getLogger(__name__)

SWEEP_JOB_ID = 'sweep-expired-short-urls'


def sweep_expired_urls(store):
    """Run one sweep over the store. Never raises."""
    try:
        removed = store.sweep_expired()
        logger.debug('Expiry sweep finished', extra={'removed': removed})
        return removed
    except Exception:
        logger.exception('Expiry sweep failed')
        return 0


def start_sweeper(store, interval_seconds=60):
    """Start a background scheduler sweeping ``store`` every interval."""
    scheduler = BackgroundScheduler(daemon=True)
    scheduler.add_job(
        sweep_expired_urls,
        'interval',
        seconds=interval_seconds,
        args=[store],
        id=SWEEP_JOB_ID,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=interval_seconds,
    )
    scheduler.start()
    atexit.register(shutdown_sweeper, scheduler)
    logger.info('Expiry sweep scheduled', extra={'intervalSeconds': interval_seconds})
    return scheduler


def shutdown_sweeper(scheduler):
    if scheduler.running:
        scheduler.shutdown(wait=False)
