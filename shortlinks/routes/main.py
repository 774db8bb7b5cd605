
from flask import redirect, request, jsonify, current_app
from shortlinks.routes import main_bp
from shortlinks.models import isoformat
from shortlinks.services.url_service import URLService


@main_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'service': 'shortlinks',
        'version': current_app.config.get('VERSION', '1.0.0'),
        'totalUrls': URLService.get_store().count_active(),
        'timestamp': isoformat(URLService.get_store().clock())
    }), 200


@main_bp.route('/<short_code>', methods=['GET'])
def redirect_to_url(short_code):
    """Redirect short code to original URL, tracking the click."""
    original_url = URLService.resolve(short_code, request)
    return redirect(original_url, code=302)
