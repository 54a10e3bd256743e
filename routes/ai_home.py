import os

from flask import Blueprint, current_app, g, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

import config
from core.errors import (
    AiHomeError,
    ErrorCode,
    TemplateRenderError,
    create_error_response,
    resource_not_found_error,
)
from core.logging_config import log_error, log_request
from core.middleware import track_request_metrics
from core.resources import path_after_prefix
from core.templating import TemplateFilter

ai_home_bp = Blueprint('ai_home', __name__)


def handle_ai_home_request(req, js_callbacks, *, resources_dir, renderer, sender):
    """Serve the assistant home document or one of its static assets.

    The empty remainder renders ``index.htm`` with ``js_callbacks`` injected
    and caching disabled; anything else is sent as a cacheable file from
    ``resources_dir``. Missing files surface from the collaborators.
    """
    relative_path = path_after_prefix(req.path, config.AI_HOME_PREFIX)

    if not relative_path:
        g.ai_home_kind = 'template'
        template_filter = TemplateFilter({'js_callbacks': js_callbacks})
        response = renderer.render_file(
            os.path.join(resources_dir, config.AI_HOME_INDEX),
            req,
            template_filter,
        )
        return renderer.set_no_cache_headers(response)

    g.ai_home_kind = 'file'
    return sender.send_cacheable_file(resources_dir, relative_path, req)


@ai_home_bp.route('/ai/doc/home/', strict_slashes=False)
@ai_home_bp.route('/ai/doc/home/<path:relative_path>')
@track_request_metrics
def ai_home(relative_path=''):
    log_request(
        current_app.logger,
        config.AI_HOME_PREFIX,
        relative_path=relative_path,
        kind='file' if relative_path else 'template',
    )
    return handle_ai_home_request(
        request,
        current_app.config['ai_js_callbacks'],
        resources_dir=current_app.config['ai_resources_dir'],
        renderer=current_app.config['ai_file_renderer'],
        sender=current_app.config['ai_file_sender'],
    )


def _relative_path():
    return (request.view_args or {}).get('relative_path', '')


@ai_home_bp.errorhandler(NotFound)
def _handle_not_found(exc):
    current_app.logger.warning(
        "AI home resource not found",
        extra={'endpoint': config.AI_HOME_PREFIX, 'relative_path': _relative_path()},
    )
    body, status = resource_not_found_error(_relative_path())
    return jsonify(body), status


@ai_home_bp.errorhandler(AiHomeError)
def _handle_ai_home_error(exc):
    current_app.logger.warning(
        "AI home request rejected: %s", exc.message,
        extra={'endpoint': config.AI_HOME_PREFIX},
    )
    return jsonify(exc.to_dict()), exc.status_code


@ai_home_bp.errorhandler(TemplateRenderError)
def _handle_template_error(exc):
    log_error(current_app.logger, exc, {'endpoint': config.AI_HOME_PREFIX, 'relative_path': '', 'kind': 'template'})
    return jsonify(exc.to_dict()), exc.status_code


@ai_home_bp.errorhandler(HTTPException)
def _pass_through_http_error(exc):
    return exc


@ai_home_bp.errorhandler(Exception)
def _handle_unexpected(exc):
    log_error(current_app.logger, exc, {'endpoint': config.AI_HOME_PREFIX, 'relative_path': _relative_path()})
    body, status = create_error_response(ErrorCode.SYSTEM_ERROR, status_code=500)
    return jsonify(body), status
