from datetime import timezone


def isoformat(value):
    """Render an aware datetime as ISO-8601 UTC with millisecond precision."""
    return value.astimezone(timezone.utc) \
                .isoformat(timespec='milliseconds') \
                .replace('+00:00', 'Z')


class Click:
    """A single redirect through a short URL."""

    def __init__(self, timestamp, referrer=None, user_agent=None, source_ip=None, location=None):
        self.timestamp = timestamp
        self.referrer = referrer
        self.user_agent = user_agent
        self.source_ip = source_ip
        # No geolocation lookup is done; left unset and defaulted on read
        self.location = location

    def __repr__(self):
        return f'<Click at {isoformat(self.timestamp)} from {self.source_ip}>'

    def to_dict(self):
        """Convert Click to the shape reported by the stats endpoint."""
        return {
            'timestamp': isoformat(self.timestamp),
            'referrer': self.referrer or 'Direct',
            'location': self.location or 'Unknown',
        }


class ShortURL:
    """A shortcode mapped to its original URL, with its click history."""

    def __init__(self, short_code, original_url, created_at, expires_at):
        self.short_code = short_code
        self.original_url = original_url
        self.created_at = created_at
        self.expires_at = expires_at
        self.click_log = []

    def __repr__(self):
        return f'<ShortURL {self.short_code}: {self.original_url}>'

    @property
    def clicks(self):
        return len(self.click_log)

    def is_expired(self, now):
        return now >= self.expires_at

    def record_click(self, click):
        self.click_log.append(click)

    def to_dict(self):
        """Convert ShortURL to the listing shape (click log omitted)."""
        return {
            'shortCode': self.short_code,
            'originalUrl': self.original_url,
            'createdAt': isoformat(self.created_at),
            'expiry': isoformat(self.expires_at),
            'clicks': self.clicks,
        }

    def to_stats_dict(self):
        """Convert ShortURL to the stats shape, including click data."""
        return {
            'clicks': self.clicks,
            'originalUrl': self.original_url,
            'createdAt': isoformat(self.created_at),
            'expiry': isoformat(self.expires_at),
            'clickData': [click.to_dict() for click in self.click_log],
        }
