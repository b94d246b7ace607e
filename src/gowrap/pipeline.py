from __future__ import annotations

import logging
from pathlib import Path

from .config import WrapConfig
from .errors import TemplateReadError, WriteError
from .format import format_source
from .loader.scan import GoTypeLoader
from .loader.symbols import TypeLoader
from .render import render
from .resolver import resolve

logger = logging.getLogger(__name__)


def generate(config: WrapConfig, *, loader: TypeLoader | None = None) -> Path:
    """Generate the wrapper described by `config` and return the written path.

    Nothing is written unless every step succeeds.
    """
    if loader is None:
        loader = GoTypeLoader(work_dir=config.work_dir)

    target_package = config.target_package or loader.package_name(config.work_dir)
    logger.debug("target package: %s", target_package)

    loaded = loader.load(config.package, type_name=config.type_name)
    wrapped = resolve(config.type_name, loaded, target_package)

    try:
        template_text = config.template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(f"read template {config.template_path}: {e}") from e

    source = render(wrapped, template_text, command=config.generate_command)
    pretty = format_source(source, formatter=config.formatter)

    dest = config.dest_path
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(pretty, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"write file {dest}: {e}") from e

    logger.debug("wrote %s (%d methods)", dest, len(wrapped.methods))
    return dest
