"""Template variable substitution for documents served at request time."""

from __future__ import annotations

import re
from typing import Dict, Mapping

from core.errors import TemplateRenderError


class TemplateFilter:
    """Text transform that substitutes ``{{ name }}`` references from a mapping.

    Only names present in the mapping are replaced. Any other brace syntax
    in the document (client-side bindings, script or style text) is left
    byte for byte as written. Values are inserted verbatim, never escaped.
    """

    def __init__(self, variables: Mapping[str, str]) -> None:
        for name, value in variables.items():
            if not isinstance(value, str):
                raise TemplateRenderError(name, f"value must be text, not {type(value).__name__}")
        self.variables: Dict[str, str] = dict(variables)
        self._pattern = None
        if self.variables:
            names = '|'.join(re.escape(name) for name in sorted(self.variables, key=len, reverse=True))
            self._pattern = re.compile(r'\{\{\s*(' + names + r')\s*\}\}')

    def filter(self, text: str) -> str:
        if self._pattern is None:
            return text
        return self._pattern.sub(lambda m: self.variables[m.group(1)], text)

    __call__ = filter

    def __repr__(self) -> str:
        return f"TemplateFilter({sorted(self.variables)!r})"
