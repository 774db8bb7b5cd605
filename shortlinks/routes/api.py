from flask import jsonify
from shortlinks.routes import api_bp
from shortlinks.services.url_service import URLService


@api_bp.route('/urls', methods=['GET'])
def list_urls():
    """Get all active shortened URLs."""
    return jsonify(URLService.get_all_urls()), 200
