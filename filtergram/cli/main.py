"""
FilterGram Command Line Interface

Main CLI group. Usage mirrors the classic script form:

    filtergram <filter> <input> [output]
    filtergram list
"""

import click
import logging
from pathlib import Path
from typing import Optional

from ..config import load_config, get_config_value
from ..utils.logging import setup_console_logging
from .filter_commands import apply_command, batch_command, list_command

logger = logging.getLogger(__name__)


class FilterGroup(click.Group):
    """Command group that treats an unknown first word as a filter name for `apply`."""

    LIST_ALIASES = ('--list', '-l')
    USAGE_EXIT_CODE = 1

    def parse_args(self, ctx, args):
        if not args and not ctx.resilient_parsing:
            click.echo(ctx.get_help(), err=True)
            ctx.exit(self.USAGE_EXIT_CODE)
        if args and args[0] in self.LIST_ALIASES:
            args = ['list'] + list(args[1:])
        return super().parse_args(ctx, args)

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands and not args[0].startswith('-'):
            args = ['apply'] + list(args)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            # Subcommand usage errors exit with status 1
            e.exit_code = self.USAGE_EXIT_CODE
            raise


@click.group(cls=FilterGroup, context_settings={'help_option_names': ['-h', '--help']})
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.version_option(package_name='filtergram')
@click.pass_context
def main(ctx, config: Optional[Path] = None, verbose: bool = False, quiet: bool = False):
    """
    FilterGram - Instagram-style photo filters

    Apply CSSgram presets to images. If OUTPUT is omitted, the result is
    saved to <input_base>-<filter>.<ext>.

    Run 'filtergram list' to see all available filters.
    """
    ctx.ensure_object(dict)

    ctx.obj['config'] = load_config(config)
    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet

    level = get_config_value(ctx.obj['config'], 'logging.level', 'INFO')
    if verbose:
        level = 'DEBUG'
    elif quiet:
        level = 'ERROR'

    setup_console_logging(
        level=level,
        color=get_config_value(ctx.obj['config'], 'logging.color', True),
        fmt=get_config_value(ctx.obj['config'], 'logging.format',
                             '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
    )


main.add_command(list_command)
main.add_command(apply_command)
main.add_command(batch_command)
