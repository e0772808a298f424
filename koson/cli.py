"""
Command line interface.

    koson object name=koson version:=1 stable=true
    koson array 1 x true null
    koson template body.json.j2 --set user=alice
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import jinja2

from .builders import new_array_builder, new_object_builder
from .cli_utils import coerce_scalar, parse_assignment
from .config import KosonConfig
from .errors import KosonError
from .renderer import render
from .templating import create_environment


def _assignments(config: KosonConfig, raw: bool, args: tuple[str, ...], param: str) -> list:
    coerce = config.coerce_cli_scalars and not raw
    pairs = []
    for arg in args:
        try:
            pairs.append(parse_assignment(arg, coerce=coerce))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint=param) from e
    return pairs


@click.group()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug information")
@click.pass_context
def main(ctx, config, verbose):
    """Build JSON values from the command line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if config is None:
        ctx.obj = KosonConfig()
        return
    try:
        ctx.obj = KosonConfig.from_file(config)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


@main.command("object")
@click.option("--raw", "-r", is_flag=True, default=False, help="Keep KEY=VALUE values as strings")
@click.argument("assignments", nargs=-1)
@click.pass_obj
def object_command(config, raw, assignments):
    """Print an object built from KEY=VALUE and KEY:=LITERAL arguments."""
    pairs = _assignments(config, raw, assignments, "ASSIGNMENTS")
    try:
        builder = new_object_builder(config)
        for name, value in pairs:
            builder.key(name, value)
        click.echo(render(builder.finish(), config))
    except KosonError as e:
        raise click.ClickException(str(e)) from e


@main.command("array")
@click.option("--raw", "-r", is_flag=True, default=False, help="Keep values as strings")
@click.argument("values", nargs=-1)
@click.pass_obj
def array_command(config, raw, values):
    """Print an array of VALUES, in order."""
    if config.coerce_cli_scalars and not raw:
        values = [coerce_scalar(value) for value in values]
    try:
        click.echo(render(new_array_builder(config).push(*values).finish(), config))
    except KosonError as e:
        raise click.ClickException(str(e)) from e


@main.command("template")
@click.option("--set", "-s", "assignments", multiple=True, help="Template variable KEY=VALUE")
@click.option("--raw", "-r", is_flag=True, default=False, help="Keep --set values as strings")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.pass_obj
def template_command(config, assignments, raw, path):
    """Render the Jinja2 template at PATH; use {{ value | koson }} to embed JSON."""
    context = dict(_assignments(config, raw, assignments, "--set"))
    template_path = Path(path)
    env = create_environment(jinja2.FileSystemLoader(str(template_path.parent)), config)
    try:
        out = env.get_template(template_path.name).render(**context)
    except (KosonError, jinja2.TemplateError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(out, nl=False)
