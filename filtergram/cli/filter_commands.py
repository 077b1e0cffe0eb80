"""
Filter CLI commands for FilterGram

Provides the list, apply and batch commands.
"""

import click
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Optional

from tqdm import tqdm

from ..config import get_config_value
from ..exceptions import FilterGramError, UnknownFilterError
from ..io.images import derive_output_path, load_image, save_image
from ..processing.filters import FilterPresets, PipelineExecutor, get_filter_spec, list_filters
from ..utils.logging import ProcessingStats, StructuredLogger

logger = StructuredLogger(__name__)

UNKNOWN_FILTER_HINT = "Run 'filtergram list' to see available filters."


def _resolve_filter(name: str):
    try:
        return get_filter_spec(name)
    except UnknownFilterError as e:
        raise click.ClickException(f"{e}\n{UNKNOWN_FILTER_HINT}")


def _config(ctx: click.Context) -> Dict:
    obj = ctx.ensure_object(dict)
    return obj.get('config', {})


def filter_file(spec, input_path: Path, output_path: Path, quality: int = 95,
                overwrite: bool = True, executor: Optional[PipelineExecutor] = None) -> Path:
    """
    Decode ``input_path``, apply ``spec`` and encode the result.

    Nothing is written unless every step succeeds.

    Raises:
        FileNotFoundError: If the input does not exist
        FileExistsError: If the output exists and overwriting is disabled
        FilterGramError: On decode, filter or encode failure
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    if not input_path.is_file():
        raise FileNotFoundError(f"Input file '{input_path}' not found")
    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file '{output_path}' already exists")

    executor = executor or PipelineExecutor()
    image = load_image(input_path)
    logger.debug("Applying filter", filter=spec.name, input=input_path,
                 width=image.shape[1], height=image.shape[0])
    filtered = executor.apply(image, spec)
    return save_image(filtered, output_path, quality=quality)


@click.command('list')
@click.option('--describe', '-d', is_flag=True, help='Show each preset\'s recipe')
def list_command(describe: bool):
    """List available filters"""
    click.echo("Available filters:")
    for name in list_filters():
        if describe:
            spec = FilterPresets.ALL_PRESETS[name]
            click.echo(f"  {name:<10} {spec.description}")
        else:
            click.echo(f"  {name}")


@click.command('apply')
@click.argument('filter_name', metavar='FILTER')
@click.argument('input_path', metavar='INPUT', type=click.Path(path_type=Path))
@click.argument('output_path', metavar='[OUTPUT]', required=False,
                type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def apply_command(ctx, filter_name: str, input_path: Path, output_path: Optional[Path]):
    """
    Apply FILTER to INPUT and save the result.

    If OUTPUT is omitted, saves to <input_base>-<filter>.<ext>
    """
    config = _config(ctx)
    spec = _resolve_filter(filter_name)

    if not input_path.is_file():
        raise click.ClickException(f"Input file '{input_path}' not found")

    if output_path is None:
        output_path = derive_output_path(input_path, filter_name)

    try:
        filter_file(
            spec, input_path, output_path,
            quality=get_config_value(config, 'output.jpeg_quality', 95),
            overwrite=get_config_value(config, 'output.overwrite', True),
        )
    except (FilterGramError, FileExistsError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Saved: {output_path}")


@click.command('batch')
@click.argument('filter_name', metavar='FILTER')
@click.argument('inputs', metavar='INPUTS...', nargs=-1, required=True,
                type=click.Path(path_type=Path))
@click.option('--output-dir', '-o', type=click.Path(file_okay=False, path_type=Path),
              help='Directory for filtered images (default: next to each input)')
@click.option('--workers', '-w', type=click.IntRange(min=1),
              help='Number of images filtered concurrently')
@click.pass_context
def batch_command(ctx, filter_name: str, inputs, output_dir: Optional[Path],
                  workers: Optional[int]):
    """
    Apply FILTER to every file in INPUTS.

    Each output is named <input_base>-<filter>.<ext>.
    """
    config = _config(ctx)
    quiet = ctx.ensure_object(dict).get('quiet', False)
    spec = _resolve_filter(filter_name)

    workers = workers or get_config_value(config, 'batch.workers', 4)
    quality = get_config_value(config, 'output.jpeg_quality', 95)
    overwrite = get_config_value(config, 'output.overwrite', True)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    stats = ProcessingStats()
    stats.set_total(len(inputs))
    executor = PipelineExecutor()
    logger.info("Starting batch", filter=filter_name, files=len(inputs), workers=workers)

    def process(input_path: Path) -> float:
        started = time.perf_counter()
        output_path = derive_output_path(input_path, filter_name, output_dir)
        filter_file(spec, input_path, output_path, quality=quality,
                    overwrite=overwrite, executor=executor)
        return time.perf_counter() - started

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {pool.submit(process, path): path for path in inputs}
        for future in tqdm(as_completed(futures), total=len(futures),
                           desc=f"Applying {filter_name}", disable=quiet):
            input_path = futures[future]
            try:
                stats.add_success(future.result())
            except (FilterGramError, FileNotFoundError, FileExistsError) as e:
                logger.error("Failed to filter image", file=input_path, error=e)
                stats.add_error(str(input_path), str(e))

    if not quiet:
        click.echo(stats.format_summary())

    if stats.failed_files:
        ctx.exit(1)
