from __future__ import annotations

import re
from collections.abc import Callable

from jinja2 import Environment, StrictUndefined, TemplateError

from .errors import RenderError
from .model import WrappedType, camelize


def capitalize(s: str) -> str:
    """Title-case every word without touching the remaining letters."""
    return re.sub(r"\b(\w)", lambda m: m.group(1).upper(), s)


def lowercase(s: str) -> str:
    return s.lower()


def uppercase(s: str) -> str:
    return s.upper()


HELPERS: dict[str, Callable[[str], str]] = {
    "camelize": camelize,
    "capitalize": capitalize,
    "lowercase": lowercase,
    "uppercase": uppercase,
}


def _build_environment() -> Environment:
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    # Available both as `{{ name|camelize }}` and `{{ camelize(name) }}`.
    env.filters.update(HELPERS)
    env.globals.update(HELPERS)
    return env


def complete_template(template_text: str, *, package: str, command: str | None = None) -> str:
    """Prefix a template with the package clause and a go:generate directive."""
    parts = [f"package {package}"]
    if command:
        parts.append(f"//go:generate {command}")
    parts.append(template_text)
    return "\n\n".join(parts)


def render(wrapped: WrappedType, template_text: str, *, command: str | None = None) -> str:
    """Render `template_text` against `wrapped`, exposed to the template as `type`."""
    source = complete_template(template_text, package=wrapped.target_package, command=command)
    try:
        tmpl = _build_environment().from_string(source)
        return tmpl.render(type=wrapped)
    except TemplateError as e:
        raise RenderError(f"render template: {e}") from e
    except Exception as e:  # noqa: BLE001
        raise RenderError(f"render template: {type(e).__name__}: {e}") from e
