"""
Command Bridge 라우트
- 웹 UI -> 런처 커맨드 호출 (POST /invoke/<command>)
- Health Check
"""

from flask import Blueprint, Flask, request, jsonify, make_response
from flask_cors import CORS

from config import APP_VERSION
from services import commands
from services.commands import CommandError

command_bp = Blueprint('commands', __name__)


def json_response(data, status=200):
    return make_response(jsonify(data), status)


def error_response(message, status=500):
    return json_response({"success": False, "error": message}, status)


@command_bp.route('/health')
def health():
    return jsonify({'status': 'ok', 'service': 'launcher', 'version': APP_VERSION})


@command_bp.route('/invoke/greet', methods=['POST'])
def invoke_greet():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return error_response("request body must be a JSON object", 400)
    name = data.get('name', '')
    if not isinstance(name, str):
        return error_response("'name' must be a string", 400)
    return json_response({"success": True, "result": commands.greet(name)})


@command_bp.route('/invoke/get_app_version', methods=['POST'])
def invoke_get_app_version():
    return json_response({"success": True, "result": commands.get_app_version()})


@command_bp.route('/invoke/check_previous_deployment', methods=['POST'])
async def invoke_check_previous_deployment():
    try:
        found = await commands.check_previous_deployment()
    except CommandError as e:
        return error_response(str(e))
    return json_response({"success": True, "result": found})


@command_bp.route('/invoke/<command>', methods=['POST'])
def invoke_unknown(command):
    return error_response(f"Unknown command: {command}", 404)


def create_command_app():
    """Command Bridge Flask 앱 생성"""
    app = Flask(__name__)
    CORS(app)
    app.register_blueprint(command_bp)
    return app
