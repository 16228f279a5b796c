# linelag/cli.py - Command-line interface
"""
Command-line interface for linelag.
"""

import click
import sys
import logging

from click.core import ParameterSource
from colorama import just_fix_windows_console

from linelag import __version__
from linelag.pipeline import highlight
from linelag.utils.config import Config, Settings
from linelag.utils.errors import ConfigurationError, LinelagError
from linelag.utils.helpers import LATENCY_UNITS, parse_duration
from linelag.utils.logger import setup_logging


# CLI parameter name -> dotted config key
CONFIG_KEYS = {
    'debug': 'highlight.debug',
    'no_echo': 'highlight.no_echo',
    'min_latency': 'highlight.min_latency',
    'latency_unit': 'highlight.latency_unit',
    'color': 'highlight.color',
    'log_level': 'logging.level',
    'log_file': 'logging.file',
}


def _validate_duration(ctx, param, value):
    try:
        parse_duration(value)
    except ConfigurationError as e:
        raise click.BadParameter(str(e))
    return value


@click.command()
@click.option('-d', '--debug', is_flag=True, help='Turn debugging information on')
@click.option('-n', '--no-echo', is_flag=True,
              help='Do not echo lines of input as they arrive; show highlighted output after the command finishes')
@click.option('-m', '--min-latency', default='1ms', show_default=True, callback=_validate_duration,
              help="Don't highlight lines with latency below this threshold")
@click.option('-l', '--latency-unit', default='ms', show_default=True, type=click.Choice(LATENCY_UNITS),
              help='Show the latency between lines in the given unit')
@click.option('--color/--no-color', default=True, help='Paint the latency swatch')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with default option values')
@click.option('--log-level', default='WARNING', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']))
@click.option('--log-file', type=click.Path(dir_okay=False), help='Log file path')
@click.version_option(__version__, prog_name='linelag')
@click.pass_context
def cli(ctx, debug, no_echo, min_latency, latency_unit, color, config_file, log_level, log_file):
    """
    Highlight lines of program output based on the latency between them.

    Example:
        make 2>&1 | linelag
        ./deploy.sh | linelag --no-echo --latency-unit s --min-latency 500ms
    """
    try:
        cfg = Config(config_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Explicit flags win over the config file
    for name, key in CONFIG_KEYS.items():
        source = ctx.get_parameter_source(name)
        if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT) or config_file is None:
            cfg.set(key, ctx.params[name])

    setup_logging(level=str(cfg.get('logging.level', 'WARNING')), log_file=cfg.get('logging.file'))
    logger = logging.getLogger(__name__)

    try:
        settings = Settings.from_config(cfg)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.debug(f"Settings: {settings}")
    just_fix_windows_console()

    try:
        rows = highlight(click.get_binary_stream('stdin'), settings)
    except LinelagError as e:
        logger.error(f"Error during highlighting: {e}")
        sys.exit(1)

    logger.info(f"Rendered {rows} lines")


if __name__ == '__main__':
    cli()
