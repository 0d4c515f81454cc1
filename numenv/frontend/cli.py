from logging import info

import click

from numenv import errors, persist
from numenv.frontend import log
from numenv.settings import AngleUnit, convert_value
from numenv.value import Value

UNITS = click.Choice([u.name for u in AngleUnit], case_sensitive=False)
SESSION = click.Path(exists=True, dir_okay=False)


def unit(name: str) -> AngleUnit:
    return next(u for u in AngleUnit if u.name.lower() == name.lower())


def load_session(path):
    try:
        return persist.load(path)
    except (errors.SessionFormatError, errors.InvalidSetting) as e:
        raise click.ClickException(f"{path}: {e}")


@click.group()
@click.option("--debug", is_flag=True)
def cli(debug):
    log.install(debug)


@cli.command()
@click.argument("file", type=SESSION)
def show(file):
    """Print the settings and bindings of a saved session."""
    click.echo(str(load_session(file)))


@cli.command()
@click.argument("base", type=SESSION)
@click.argument("others", type=SESSION, nargs=-1)
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None)
def join(base, others, output):
    """Merge sessions into BASE, left to right; later bindings win."""
    env = load_session(base)
    for other in others:
        info(f"joining {other} into {base}")
        env.join_with(load_session(other))

    if output is None:
        click.echo(persist.dumps(env))
    else:
        persist.save(env, output)


@cli.command()
@click.argument("value", type=float)
@click.option("--from", "from_", type=UNITS, default=AngleUnit.default().name)
@click.option("--to", type=UNITS, required=True)
def convert(value, from_, to):
    """Convert an angle between radians, degrees and turns."""
    try:
        result = convert_value(unit(from_), unit(to), Value(value))
    except errors.MathError as e:
        raise click.ClickException(str(e))
    click.echo(str(result))
