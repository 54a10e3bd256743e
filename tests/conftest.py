import pytest

from main import create_app

INDEX_TEMPLATE = (
    "<html>\n"
    "<head><style>body { color: #333; }</style></head>\n"
    "<script>{{ js_callbacks }}</script>\n"
    "</html>\n"
)
APP_CSS = b"#ai-home { padding: 12px; }\n"


@pytest.fixture
def resources_path(tmp_path):
    ai_dir = tmp_path / "ai_resources"
    (ai_dir / "styles").mkdir(parents=True)
    (ai_dir / "index.htm").write_text(INDEX_TEMPLATE, encoding="utf-8")
    (ai_dir / "styles" / "app.css").write_bytes(APP_CSS)
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")
    return tmp_path


@pytest.fixture
def app(resources_path):
    app = create_app(resources_path=str(resources_path), js_callbacks="cb123")
    app.config.update(TESTING=True)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def metrics(app):
    return app.config["metrics"]


@pytest.fixture
def index_template():
    return INDEX_TEMPLATE


@pytest.fixture
def app_css():
    return APP_CSS
