import io
import typing as ty
from contextlib import redirect_stdout

import click
from omegaconf import DictConfig, ListConfig, OmegaConf

from chainlast.text import split_last
from chainlast._version import __version__


def load_separators(config_path: str) -> ty.Tuple[str, ...]:
    """Reads the ``separators`` list from a YAML config file."""
    hide_stdout = io.StringIO()
    with redirect_stdout(hide_stdout):
        conf = OmegaConf.load(config_path)
    if not isinstance(conf, DictConfig):
        raise click.BadParameter(
            "config must be a mapping.", param_hint="--config"
        )
    separators = conf.get("separators", None)
    if separators is None:
        return tuple()
    if not isinstance(separators, ListConfig):
        raise click.BadParameter(
            "'separators' must be a list of strings.", param_hint="--config"
        )
    return tuple(map(str, OmegaConf.to_object(separators)))


@click.group()
@click.version_option(__version__, prog_name="chainlast")
def chainlast():
    """Lazily chain sequences from their last element."""


@chainlast.command()
@click.argument("text")
@click.option(
    "-s",
    "--sep",
    "separators",
    multiple=True,
    help="Separator, applied to the last fragment of the previous split. "
    "May be repeated.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with a 'separators' list, used if no --sep is given.",
)
@click.option("--header/--no-header", default=False, help="Print a title.")
def split(text, separators, config_path, header):
    """Splits TEXT, sub-splitting the trailing fragment at each level."""
    if not separators and config_path is not None:
        separators = load_separators(config_path)
    if header:
        title = "chainlast split"
        underline = "-" * len(title)
        title_fmt = click.style(title, fg="green")
        click.echo(f"{title_fmt}\n{underline}")
    try:
        fragments = split_last(text, *separators)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--sep") from None
    for fragment in fragments:
        click.echo(fragment)
