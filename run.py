#!/usr/bin/env python3
"""Application entry point."""
import os

import click

from alloylab import create_app
from alloylab.services import (
    DEFAULT_COMPOSITION, ELEMENTS, ProcessParameters, evaluate, generate_text_report,
)

# Get config from environment or use development
config_name = os.environ.get('FLASK_CONFIG') or 'development'
app = create_app(config_name)


@app.shell_context_processor
def make_shell_context():
    """Make the engine entry points available in flask shell."""
    return {'evaluate': evaluate, 'ProcessParameters': ProcessParameters}


@app.cli.command()
@click.option('--name', default=None, help='Alloy display name.')
@click.option('--quench', default=None, help='Quench medium: Water, Oil or Air.')
@click.option('--grain-size', type=float, default=None, help='Grain size in um.')
@click.option('--element', '-e', multiple=True, metavar='SYMBOL=WT',
              help='Alloying addition, e.g. -e Cr=18 -e Ni=8. Repeatable.')
def report(name, quench, grain_size, element):
    """Print the technical report for the default or a given alloy."""
    composition = dict(DEFAULT_COMPOSITION)
    for item in element:
        symbol, _, wt = item.partition('=')
        if symbol not in ELEMENTS:
            raise click.BadParameter(f'Unknown element {symbol!r}', param_hint='--element')
        try:
            composition[symbol] = float(wt)
        except ValueError:
            raise click.BadParameter(f'Invalid weight in {item!r}', param_hint='--element')

    process = ProcessParameters(
        quench_medium=quench or app.config['ALLOY_DEFAULT_QUENCH'],
        grain_size=grain_size if grain_size is not None else app.config['ALLOY_DEFAULT_GRAIN_SIZE'],
        target_yield_strength=app.config['ALLOY_DEFAULT_TARGET_YS'],
    )
    snapshot = evaluate(composition, process)
    click.echo(generate_text_report(name or app.config['ALLOY_DEFAULT_NAME'], snapshot))


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5004, debug=True)
