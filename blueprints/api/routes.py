"""
API Routes - Subscriptions and project update broadcasts
"""

from flask import request, jsonify, current_app
from extensions import get_store, get_dispatcher
from utils.catalog import get_project, search_projects
from utils.errors import NotFoundError
from . import api_bp


def _json_body():
    """Request JSON as a dict; anything else counts as an empty body"""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _is_blank(value):
    return not isinstance(value, str) or not value.strip()


@api_bp.route('/hello')
def hello():
    """Liveness check used by the front end"""
    return jsonify({'ok': True, 'message': 'Hello from the portfolio API'})


@api_bp.route('/projects')
def projects():
    """Project catalog, optionally filtered with ?q="""
    return jsonify({'projects': search_projects(request.args.get('q'))})


@api_bp.route('/projects/<project_id>')
def project_detail(project_id):
    """Single catalog entry"""
    project = get_project(project_id)
    if project is None:
        raise NotFoundError(f'Unknown projectId="{project_id}".')
    return jsonify({'project': project})


@api_bp.route('/subscribe', methods=['POST'])
def subscribe():
    """Subscribe a visitor email to updates for one project"""
    payload = _json_body()
    email = payload.get('email')
    project_id = payload.get('projectId')

    if _is_blank(email) or _is_blank(project_id):
        return jsonify({'message': 'email and projectId are required'}), 400

    created = get_store().add(email, project_id)
    if not created:
        return jsonify({'message': 'Already subscribed for this project'}), 200

    return jsonify({'message': 'Subscribed successfully'}), 201


@api_bp.route('/notify-project-update', methods=['POST'])
def notify_project_update():
    """Broadcast an update email to all subscribers of a project (admin key required)"""
    admin_key = request.headers.get('x-admin-key', '')
    payload = _json_body()

    result = get_dispatcher().broadcast_update(
        payload.get('projectId'),
        payload.get('subject'),
        payload.get('message'),
        admin_key
    )

    current_app.logger.info(f"Project update for {payload.get('projectId')} sent to {result['sentTo']} subscribers")
    return jsonify(result), 200
