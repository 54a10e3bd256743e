"""File collaborators used by the AI home router.

The router only talks to the two narrow protocols below, so tests can swap
in fakes and the Flask-backed implementations stay the single place that
touches the filesystem.
"""

from __future__ import annotations

import os
from typing import Callable, Protocol

from flask import Request, Response, current_app
from werkzeug.exceptions import NotFound
from werkzeug.utils import send_from_directory

from core.errors import InvalidResourcePath, TemplateRenderError

NO_CACHE_HEADERS = {
    'Expires': 'Fri, 01 Jan 1990 00:00:00 GMT',
    'Pragma': 'no-cache',
    'Cache-Control': 'no-cache, no-store, max-age=0, must-revalidate',
}


def path_after_prefix(path: str, prefix: str) -> str:
    """Return the part of ``path`` that follows ``prefix``.

    A path equal to the prefix without its trailing slash resolves to the
    empty remainder. Anything else outside the prefix is rejected.
    """
    if path.startswith(prefix):
        return path[len(prefix):]
    if prefix.endswith('/') and path == prefix[:-1]:
        return ''
    raise InvalidResourcePath(path, prefix)


class FileRenderer(Protocol):
    def render_file(self, path: str, request: Request, transform: Callable[[str], str]) -> Response:
        ...

    def set_no_cache_headers(self, response: Response) -> Response:
        ...


class FileSender(Protocol):
    def send_cacheable_file(self, directory: str, relative_path: str, request: Request) -> Response:
        ...


class FlaskFileRenderer:
    """Render a text file through a transform into an HTML response."""

    encoding = 'utf-8'

    def render_file(self, path, request, transform):
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                text = f.read()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError, PermissionError):
            raise NotFound()
        except UnicodeDecodeError as exc:
            raise TemplateRenderError(os.path.basename(path), f"not valid {self.encoding} text") from exc
        response = current_app.response_class(transform(text), mimetype='text/html')
        response.add_etag()
        return response.make_conditional(request)

    def set_no_cache_headers(self, response):
        for name, value in NO_CACHE_HEADERS.items():
            response.headers[name] = value
        return response


class FlaskFileSender:
    """Send a file from a directory with validators and a cacheable policy."""

    def __init__(self, max_age: int = 3600) -> None:
        self.max_age = max_age

    def send_cacheable_file(self, directory, relative_path, request):
        # safe_join inside send_from_directory raises NotFound for '..' and absolute segments
        response = send_from_directory(
            os.fspath(directory),
            relative_path,
            request.environ,
            max_age=self.max_age,
            conditional=True,
            etag=True,
            response_class=current_app.response_class,
            use_x_sendfile=current_app.config.get('USE_X_SENDFILE', False),
        )
        response.cache_control.must_revalidate = True
        return response
