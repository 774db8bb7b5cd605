from flask import Blueprint

main_bp = Blueprint('main', __name__)
shorturls_bp = Blueprint('shorturls', __name__)
api_bp = Blueprint('api', __name__)

from shortlinks.routes import main, shorturls, api  # noqa: E402,F401
