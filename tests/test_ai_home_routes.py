import pytest


def test_root_renders_index_with_callbacks(client, index_template):
    response = client.get("/ai/doc/home/")
    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert response.get_data(as_text=True) == index_template.replace("{{ js_callbacks }}", "cb123")


def test_root_disables_caching(client):
    response = client.get("/ai/doc/home/")
    cache_control = response.headers["Cache-Control"]
    assert "no-cache" in cache_control
    assert "no-store" in cache_control
    assert response.headers["Pragma"] == "no-cache"
    assert response.headers["Expires"] == "Fri, 01 Jan 1990 00:00:00 GMT"


def test_root_without_trailing_slash_is_the_same_document(client):
    with_slash = client.get("/ai/doc/home/")
    without_slash = client.get("/ai/doc/home")
    assert without_slash.status_code == 200
    assert without_slash.get_data() == with_slash.get_data()
    assert "no-cache" in without_slash.headers["Cache-Control"]


def test_root_rendering_is_idempotent(client):
    first = client.get("/ai/doc/home/")
    second = client.get("/ai/doc/home/")
    assert first.get_data() == second.get_data()
    assert first.headers["ETag"] == second.headers["ETag"]


def test_root_revalidates_with_etag(client):
    etag = client.get("/ai/doc/home/").headers["ETag"]
    response = client.get("/ai/doc/home/", headers={"If-None-Match": etag})
    assert response.status_code == 304
    assert "no-cache" in response.headers["Cache-Control"]


def test_callbacks_are_injected_verbatim(app, client):
    app.config["ai_js_callbacks"] = "window.cb = {a: '<b>' && 1};"
    body = client.get("/ai/doc/home/").get_data(as_text=True)
    assert "window.cb = {a: '<b>' && 1};" in body
    assert "&lt;" not in body


def test_static_asset_is_served_cacheable(app, client, app_css):
    response = client.get("/ai/doc/home/styles/app.css")
    assert response.status_code == 200
    assert response.get_data() == app_css
    assert response.mimetype == "text/css"
    assert "no-cache" not in response.headers["Cache-Control"]
    assert response.cache_control.max_age == app.config["ai_file_sender"].max_age
    assert response.cache_control.must_revalidate
    assert response.headers.get("ETag")
    assert response.headers.get("Last-Modified")


def test_static_asset_conditional_get(client):
    etag = client.get("/ai/doc/home/styles/app.css").headers["ETag"]
    response = client.get("/ai/doc/home/styles/app.css", headers={"If-None-Match": etag})
    assert response.status_code == 304


def test_static_asset_is_not_templated(resources_path, client):
    (resources_path / "ai_resources" / "raw.htm").write_text("{{ js_callbacks }}", encoding="utf-8")
    response = client.get("/ai/doc/home/raw.htm")
    assert response.get_data(as_text=True) == "{{ js_callbacks }}"


def test_missing_asset_returns_not_found(client):
    response = client.get("/ai/doc/home/missing.js")
    assert response.status_code == 404
    data = response.get_json()
    assert data["code"] == "RESOURCE_NOT_FOUND"
    assert data["details"]["relative_path"] == "missing.js"


def test_missing_index_returns_not_found(resources_path, client):
    (resources_path / "ai_resources" / "index.htm").unlink()
    response = client.get("/ai/doc/home/")
    assert response.status_code == 404
    assert response.get_json()["code"] == "RESOURCE_NOT_FOUND"


def test_directory_reference_returns_not_found(client):
    response = client.get("/ai/doc/home/styles")
    assert response.status_code == 404


def test_other_brace_syntax_in_index_is_served_unchanged(resources_path, client):
    (resources_path / "ai_resources" / "index.htm").write_text(
        "<script>{{ js_callbacks }}; var s = '{#';</script><div>{{ user.name }}</div>{% raw %}",
        encoding="utf-8",
    )
    response = client.get("/ai/doc/home/")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == (
        "<script>cb123; var s = '{#';</script><div>{{ user.name }}</div>{% raw %}"
    )


def test_undecodable_index_reports_template_error(resources_path, client):
    (resources_path / "ai_resources" / "index.htm").write_bytes(b"<p>\xff\xfe{{ js_callbacks }}</p>")
    response = client.get("/ai/doc/home/")
    assert response.status_code == 500
    assert response.get_json()["code"] == "TEMPLATE_ERROR"


def test_requests_are_counted_per_branch(client, metrics):
    client.get("/ai/doc/home/")
    client.get("/ai/doc/home/styles/app.css")
    client.get("/ai/doc/home/missing.js")
    assert metrics.get_counter("ai_home_requests_total", {"kind": "template", "status": "200"}) == 1
    assert metrics.get_counter("ai_home_requests_total", {"kind": "file", "status": "200"}) == 1
    assert metrics.get_counter("ai_home_requests_total", {"kind": "file", "status": "404"}) == 1


def test_unexpected_sender_failure_is_a_system_error(app, client):
    class ExplodingSender:
        def send_cacheable_file(self, directory, relative_path, request):
            raise RuntimeError("disk on fire")

    app.config["ai_file_sender"] = ExplodingSender()
    response = client.get("/ai/doc/home/styles/app.css")
    assert response.status_code == 500
    assert response.get_json()["code"] == "SYSTEM_ERROR"


def test_unsatisfiable_range_keeps_its_status(client):
    response = client.get("/ai/doc/home/styles/app.css", headers={"Range": "bytes=9999-"})
    assert response.status_code == 416


@pytest.mark.parametrize("path", ["/ai/doc/home/%2e%2e/secret.txt", "/ai/doc/home/styles/%2e%2e/%2e%2e/secret.txt"])
def test_traversal_outside_resources_is_not_found(client, path):
    response = client.get(path)
    assert response.status_code == 404
    assert "do not serve" not in response.get_data(as_text=True)
