from urllib.parse import urlparse

import validators
from flask import current_app, request

from shortlinks.exceptions import InvalidUrl, InvalidValidity
from shortlinks.models import isoformat


class URLService:
    """Business logic for URL shortening operations."""

    @staticmethod
    def get_store():
        return current_app.extensions['shortlinks']

    @staticmethod
    def base_url():
        """Host part of short links, from config or the current request."""
        return (current_app.config.get('BASE_URL') or request.host_url).rstrip('/')

    @staticmethod
    def short_link(short_code):
        return f"{URLService.base_url()}/{short_code}"

    @staticmethod
    def validate_url(url):
        """Ensure url is an absolute http(s) URL."""
        max_length = current_app.config.get('MAX_URL_LENGTH', 2048)
        if not isinstance(url, str) or not url or len(url) > max_length:
            raise InvalidUrl(f"URL is required and must be at most {max_length} characters")

        parsed = urlparse(url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise InvalidUrl("URL must be an absolute http or https URL")

        # Single-label hosts such as localhost or intranet names are valid
        if not validators.url(url, simple_host=True):
            raise InvalidUrl("Invalid URL format")

        return url

    @staticmethod
    def validate_validity(validity):
        """Return validity in minutes, applying the default when omitted."""
        if validity is None:
            return current_app.config.get('DEFAULT_VALIDITY_MINUTES', 30)

        # bool is an int subclass, but JSON true/false is not a duration
        if isinstance(validity, bool) or not isinstance(validity, int) or validity <= 0:
            raise InvalidValidity("Validity must be a positive integer number of minutes")

        return validity

    @staticmethod
    def create_short_url(original_url, validity=None, shortcode=None):
        """
        Create a shortened URL.

        Args:
            original_url: The original long URL
            validity: Optional lifetime in minutes
            shortcode: Optional custom short code

        Returns:
            dict: shortLink and ISO-8601 expiry
        """
        original_url = URLService.validate_url(original_url)
        validity = URLService.validate_validity(validity)

        record = URLService.get_store().create(original_url, validity, shortcode)

        return {
            'shortLink': URLService.short_link(record.short_code),
            'expiry': isoformat(record.expires_at),
        }

    @staticmethod
    def resolve(short_code, req):
        """
        Resolve a short code and record the click.

        Args:
            short_code: The short code to look up
            req: Flask request object

        Returns:
            str: The original URL
        """
        return URLService.get_store().resolve_and_record(
            short_code,
            referrer=req.headers.get('Referer'),
            user_agent=req.headers.get('User-Agent'),
            source_ip=URLService.client_ip(req),
        )

    @staticmethod
    def client_ip(req):
        """Best-effort client address, preferring the first forwarded hop."""
        forwarded = req.headers.get('X-Forwarded-For', '')
        if forwarded:
            return forwarded.split(',')[0].strip()
        return req.remote_addr or 'unknown'

    @staticmethod
    def get_url_stats(short_code):
        """Get statistics for a shortened URL."""
        return URLService.get_store().get_stats(short_code)

    @staticmethod
    def get_all_urls():
        """Get every active shortened URL."""
        urls = URLService.get_store().list_active()
        for url_dict in urls:
            url_dict['shortLink'] = URLService.short_link(url_dict['shortCode'])
        return urls
