import os

from flask import Blueprint, Response, current_app, jsonify

import config
from core.errors import ErrorCode, create_error_response
from core.logging_config import log_error, log_request

health_bp = Blueprint('health', __name__)


def _check_resources(app):
    resources_dir = app.config['ai_resources_dir']
    index_path = os.path.join(resources_dir, config.AI_HOME_INDEX)
    dir_ok = os.path.isdir(resources_dir) and os.access(resources_dir, os.R_OK)
    index_ok = os.path.isfile(index_path) and os.access(index_path, os.R_OK)
    metrics = app.config.get('metrics')
    if metrics is not None:
        metrics.set_gauge('ai_home_resources_available', {}, 1 if (dir_ok and index_ok) else 0)
    return dir_ok, index_ok


@health_bp.route('/health', methods=['GET'])
def health_check():
    logger = current_app.logger
    log_request(logger, '/health')

    try:
        dir_ok, index_ok = _check_resources(current_app)
    except Exception as exc:
        log_error(logger, exc, {"endpoint": "/health"})
        body, status = create_error_response(
            ErrorCode.SYSTEM_ERROR,
            "Health check failed",
            {"reason": str(exc)},
            status_code=500,
        )
        return jsonify(body), status

    return jsonify({
        "status": "ok" if (dir_ok and index_ok) else "degraded",
        "resources": {
            "path": current_app.config['ai_resources_dir'],
            "directory_readable": dir_ok,
            "index_readable": index_ok,
        },
    })


@health_bp.route('/metrics', methods=['GET'])
def metrics():
    _check_resources(current_app)
    text = current_app.config['metrics'].render_prometheus()
    return Response(text, mimetype='text/plain; version=0.0.4')


@health_bp.route('/config', methods=['GET'])
def get_config():
    return jsonify({
        "config": {
            "prefix": config.AI_HOME_PREFIX,
            "index": config.AI_HOME_INDEX,
            "resources_dir": current_app.config['ai_resources_dir'],
            "cache_max_age": getattr(current_app.config['ai_file_sender'], 'max_age', config.AI_HOME_CACHE_MAX_AGE),
            "log_level": config.LOG_LEVEL,
        }
    })
