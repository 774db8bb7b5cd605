from flask import request, jsonify
from shortlinks.routes import shorturls_bp
from shortlinks.exceptions import InvalidUrl
from shortlinks.services.url_service import URLService


@shorturls_bp.route('/shorturls', methods=['POST'])
def create_short_url():
    """
    Shorten a URL.

    Expected JSON payload:
    {
        "url": "https://example.com/very/long/url",
        "validity": 30,          # Optional, minutes
        "shortcode": "abc123"    # Optional
    }
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'url' not in data:
        raise InvalidUrl('URL is required')

    result = URLService.create_short_url(
        original_url=data.get('url'),
        validity=data.get('validity'),
        shortcode=data.get('shortcode')
    )

    return jsonify(result), 201


@shorturls_bp.route('/shorturls/<short_code>', methods=['GET'])
def get_url_stats(short_code):
    """Get statistics for a shortened URL."""
    return jsonify(URLService.get_url_stats(short_code)), 200
