"""
Convert a whole legacy app into a file-per-step app tree.
"""

import concurrent.futures
import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from app_convert.config import ConvertConfig
from app_convert.convert.index import render_index
from app_convert.convert.package import render_package_json
from app_convert.convert.steps import render_step
from app_convert.exceptions import ConversionError
from app_convert.mapping import step_directory
from app_convert.models import LegacyApp, coerce_app
from app_convert.util.files import write_text
from app_convert.util.naming import snake_case
from app_convert.util.progress import report_file_written
from app_convert.util.templates import TemplateLoader

logger = logging.getLogger(__name__)


def step_file_name(category: str, key: str) -> str:
    """Output file of a step relative to the app root ("writes/create_contact.js")."""
    return f"{step_directory(category)}/{snake_case(key)}.js"


def create_file(content: str, file_name: str, output_dir: Path) -> Path:
    """Write one generated file below output_dir and report it."""
    dest_file = output_dir / file_name
    write_text(dest_file, content)
    logger.debug(f"Wrote {dest_file} ({len(content)} chars)")
    report_file_written(file_name)
    return dest_file


def generate_file(render: Callable[[], str], file_name: str, output_dir: Path) -> Path:
    """Render one file and write it."""
    return create_file(render(), file_name, output_dir)


def plan_conversion(
    legacy_app: LegacyApp,
    config: ConvertConfig,
    loader: TemplateLoader,
) -> list[tuple[str, Callable[[], str]]]:
    """
    List every file of the converted app with the callable that renders it.

    Step files come first (triggers, searches, writes in definition order),
    followed by index.js and package.json.
    """
    tasks = []

    for category, key, step in legacy_app.iter_steps():

        def render(category=category, key=key, step=step):
            return render_step(category, step, key, loader, config.min_help_text_length)

        tasks.append((step_file_name(category, key), render))

    tasks.append(("index.js", lambda: render_index(legacy_app, loader)))
    tasks.append(
        (
            "package.json",
            lambda: render_package_json(legacy_app, loader, config.platform_core_version),
        )
    )
    return tasks


def convert_app(
    legacy_app: LegacyApp | Mapping,
    output_dir: str | Path,
    config: ConvertConfig | None = None,
    loader: TemplateLoader | None = None,
    max_workers: int | None = None,
) -> list[Path]:
    """
    Render and write every file of the converted app.

    All files are rendered and written concurrently on a thread pool. The
    call returns once every file is written, or raises on the first failure.
    Files already written when a failure happens are left in place.

    Args:
        legacy_app: LegacyApp or the raw legacy definition mapping
        output_dir: Root directory of the converted app
        config: Conversion settings (defaults when None)
        loader: Template loader (defaults to the bundled templates)
        max_workers: Thread pool size, overriding config.max_workers

    Returns:
        Paths of the written files, in planning order

    Raises:
        ConversionError: If rendering or writing any file fails
    """
    legacy_app = coerce_app(legacy_app)
    config = config or ConvertConfig()
    loader = loader or TemplateLoader()
    output_dir = Path(output_dir)
    workers = max_workers or config.max_workers

    tasks = plan_conversion(legacy_app, config, loader)
    logger.info(f"Converting '{legacy_app.title}': {len(tasks)} files into {output_dir}")

    written: dict[str, Path] = {}

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_file = {
            executor.submit(generate_file, render, name, output_dir): name
            for name, render in tasks
        }
        for future in concurrent.futures.as_completed(future_to_file):
            file_name = future_to_file[future]
            try:
                written[file_name] = future.result()
            except Exception as e:
                logger.error(f"Failed to generate {file_name}: {e}")
                for pending in future_to_file:
                    pending.cancel()
                raise ConversionError(file_name, e, sorted(written)) from e

    return [written[name] for name, _ in tasks]
