from flask import Flask

import config
from core.logging_config import setup_logging
from core.metrics import PrometheusMetrics
from core.resources import FlaskFileRenderer, FlaskFileSender
from routes.ai_home import ai_home_bp
from routes.health import health_bp


def create_app(resources_path=None, js_callbacks=None):
    app = Flask(__name__)

    app_logger = setup_logging(app)

    # Dependency injection into app config for route access
    app.config['metrics'] = PrometheusMetrics()
    app.config['ai_resources_dir'] = config.ai_resources_dir(resources_path)
    app.config['ai_js_callbacks'] = config.AI_HOME_JS_CALLBACKS if js_callbacks is None else js_callbacks
    app.config['ai_file_renderer'] = FlaskFileRenderer()
    app.config['ai_file_sender'] = FlaskFileSender(max_age=config.AI_HOME_CACHE_MAX_AGE)

    app.register_blueprint(ai_home_bp)
    app.register_blueprint(health_bp)

    app_logger.debug("AI resources at %s", app.config['ai_resources_dir'])
    return app


if __name__ == '__main__':
    print("🚀 Starting AI home resource server...")
    app = create_app()
    print(f"📁 Resources: {app.config['ai_resources_dir']}")

    issues = []
    if config.AI_HOME_CACHE_MAX_AGE < 0:
        issues.append('AI_HOME_CACHE_MAX_AGE must be >= 0')
    if not 0 < config.PORT < 65536:
        issues.append('AI_HOME_PORT must be a valid TCP port')
    if issues:
        print("⚠️ Config issues:", "; ".join(issues))

    print(f"🌐 Serving on: http://{config.HOST}:{config.PORT}{config.AI_HOME_PREFIX}")
    app.run(host=config.HOST, port=config.PORT, debug=False)
