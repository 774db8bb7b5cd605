import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from shortlinks.exceptions import ShortlinkError, InternalError


logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Render every error as a JSON ``{error, message}`` body."""

    @app.errorhandler(ShortlinkError)
    def handle_shortlink_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        name = error.name.replace(' ', '')
        return jsonify({'error': name, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error while processing request')
        return jsonify(InternalError().to_dict()), InternalError.status_code
