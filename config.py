import os
import os.path as _p

# Environment mapping: prefixed name first, bare name as fallback
_default_resources_path = _p.join(_p.dirname(__file__), 'resources')
RESOURCES_PATH = os.getenv(
    'AI_HOME_RESOURCES_PATH',
    os.getenv('RESOURCES_PATH', _default_resources_path)
)
AI_RESOURCES_DIRNAME = 'ai_resources'
AI_HOME_PREFIX = '/ai/doc/home/'
AI_HOME_INDEX = 'index.htm'

AI_HOME_CACHE_MAX_AGE = int(os.getenv('AI_HOME_CACHE_MAX_AGE', os.getenv('CACHE_MAX_AGE', '3600')))
AI_HOME_JS_CALLBACKS = os.getenv('AI_HOME_JS_CALLBACKS', os.getenv('JS_CALLBACKS', ''))
LOG_LEVEL = os.getenv('AI_HOME_LOG_LEVEL', os.getenv('LOG_LEVEL', 'INFO')).upper()
LOG_DIR = os.getenv('AI_HOME_LOG_DIR', os.getenv('LOG_DIR', _p.join(_p.dirname(__file__), 'logs')))

HOST = os.getenv('AI_HOME_HOST', os.getenv('HOST', '0.0.0.0'))
PORT = int(os.getenv('AI_HOME_PORT', os.getenv('PORT', '8080')))


def ai_resources_dir(resources_path=None):
    """Return the directory anchoring every AI home lookup."""
    return _p.normpath(_p.join(resources_path or RESOURCES_PATH, AI_RESOURCES_DIRNAME))
