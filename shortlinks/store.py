"""In-memory registry of short URLs.

``ShortURLStore`` owns the shortcode -> ``ShortURL`` map. Every operation runs
under one coarse lock so that request threads and the expiry sweep never see
a record half inserted or half removed. The clock and random source are
injected so expiry boundaries and shortcode retries can be pinned in tests.
"""

import logging
import random
import threading
from datetime import datetime, timedelta, timezone

from shortlinks.exceptions import Expired, NotFound
from shortlinks.models import Click, ShortURL
from shortlinks.utils.short_code import ShortCodeGenerator


logger = logging.getLogger(__name__)


def utcnow():
    return datetime.now(timezone.utc)


class ShortURLStore:
    """Thread-safe in-memory store of short URL records."""

    def __init__(self, clock=None, rng=None, code_length=6, max_attempts=1000,
                 min_custom_length=3, max_custom_length=10, reserved_codes=()):
        self.clock = clock or utcnow
        self.rng = rng or random.Random()
        self.code_length = code_length
        self.max_attempts = max_attempts
        self.min_custom_length = min_custom_length
        self.max_custom_length = max_custom_length
        self.reserved_codes = frozenset(reserved_codes)
        self._records = {}
        self._lock = threading.RLock()

    def __len__(self):
        with self._lock:
            return len(self._records)

    def _is_live(self, short_code, now):
        record = self._records.get(short_code)
        return record is not None and not record.is_expired(now)

    def _get_live(self, short_code, now):
        """Look up a record, lazily deleting it if it has expired.

        Must be called with the lock held.
        """
        record = self._records.get(short_code)
        if record is None:
            raise NotFound(f"Short URL '{short_code}' not found")
        if record.is_expired(now):
            self._records.pop(short_code, None)
            logger.info('Short URL expired on read', extra={'shortCode': short_code})
            raise Expired(f"Short URL '{short_code}' has expired")
        return record

    def create(self, original_url, validity_minutes, requested_code=None):
        """Allocate a code and insert a new record.

        The collision check and the insert happen under the same lock hold.
        An expired record still awaiting the sweep does not block its code
        and is replaced.
        """
        with self._lock:
            now = self.clock()
            code = ShortCodeGenerator.allocate(
                requested_code,
                lambda candidate: self._is_live(candidate, now),
                rng=self.rng,
                length=self.code_length,
                max_attempts=self.max_attempts,
                min_len=self.min_custom_length,
                max_len=self.max_custom_length,
                reserved=self.reserved_codes,
            )
            record = ShortURL(
                short_code=code,
                original_url=original_url,
                created_at=now,
                expires_at=now + timedelta(minutes=validity_minutes),
            )
            self._records[code] = record

        logger.info(
            'Short URL created',
            extra={'shortCode': code, 'custom': bool(requested_code), 'validity': validity_minutes},
        )
        return record

    def resolve_and_record(self, short_code, referrer=None, user_agent=None, source_ip=None):
        """Return the original URL for a live code and log the click."""
        with self._lock:
            now = self.clock()
            record = self._get_live(short_code, now)
            record.record_click(Click(
                timestamp=now,
                referrer=referrer,
                user_agent=user_agent,
                source_ip=source_ip,
            ))
            original_url = record.original_url
            clicks = record.clicks

        logger.debug('Short URL resolved', extra={'shortCode': short_code, 'clicks': clicks})
        return original_url

    def get_stats(self, short_code):
        """Return the stats document for a live code."""
        with self._lock:
            record = self._get_live(short_code, self.clock())
            return record.to_stats_dict()

    def list_active(self):
        """Return the listing projection of every unexpired record.

        Expired records are skipped but left for the sweep.
        """
        with self._lock:
            now = self.clock()
            return [
                record.to_dict()
                for record in self._records.values()
                if not record.is_expired(now)
            ]

    def count_active(self):
        with self._lock:
            now = self.clock()
            return sum(1 for record in self._records.values() if not record.is_expired(now))

    def sweep_expired(self):
        """Remove every expired record and return how many were removed."""
        with self._lock:
            now = self.clock()
            expired = [code for code, record in self._records.items() if record.is_expired(now)]
            for code in expired:
                self._records.pop(code, None)

        if expired:
            logger.info('Expired short URLs removed', extra={'removed': len(expired)})
        return len(expired)
