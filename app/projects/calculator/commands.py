import click
from app.projects.calculator.core.accumulator import initial_state
from app.projects.calculator.core.errors import InvalidKeyError
from app.projects.calculator.core.keys import press, tokenize
import logging

logger = logging.getLogger(__name__)

@click.group(name='calculator')
def calculator_cli():
    """Calculator project commands."""
    pass

@calculator_cli.command('press', context_settings={'ignore_unknown_options': True})
@click.argument('keys', nargs=-1, required=True)
@click.option('--trace', is_flag=True, help='Print the display after every key')
def press_command(keys, trace):
    """Press KEYS on a fresh calculator and print the display.

    Keys may be given one per argument or run together, e.g. "2+3×4=".
    ASCII "*" and "/" stand for × and ÷. Keys starting with "-" (e.g. "-5=")
    are read as keys, not options.
    """
    state = initial_state()
    for arg in keys:
        for key in tokenize(arg):
            try:
                state = press(state, key)
            except InvalidKeyError as e:
                raise click.BadParameter(str(e), param_hint='KEYS')
            if trace:
                click.echo(f"{key:>6}  {state.display}")

    logger.debug(f"Pressed {len(keys)} key argument(s), display {state.display}")
    if not trace:
        click.echo(state.display)
