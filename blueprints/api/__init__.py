"""
API Blueprint - JSON endpoints used by the portfolio front end
Handles: Liveness, project catalog, subscriptions, project update broadcasts
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
