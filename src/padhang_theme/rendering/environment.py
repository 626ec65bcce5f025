"""Jinja2 environment for the theme's templates."""

import gettext
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from padhang_theme.shared.errors import TemplateRenderError
from padhang_theme.shared.i18n import get_translations

TEMPLATES_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=16)
def get_environment(translations: gettext.NullTranslations | None = None) -> Environment:
    environment = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
        extensions=["jinja2.ext.i18n"],
    )

    environment.install_gettext_translations(translations or get_translations(), newstyle=True)  # pyright: ignore[reportAttributeAccessIssue]

    return environment


def render_template(template_name: str, translations: gettext.NullTranslations | None = None, **context: Any) -> str:  # pyright: ignore[reportAny]
    try:
        return get_environment(translations).get_template(template_name).render(**context)
    except TemplateError as e:
        raise TemplateRenderError(template=template_name, message=str(e)) from e
