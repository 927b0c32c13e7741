import json
import logging

import click
from graphql import GraphQLSyntaxError

from .pipeline import DatamodelError, DatamodelParser, ParserConfig
from .pipeline.config import POLICY_NAMES
from .summary import render_summary


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--policy", "-p", default=None, type=click.Choice(POLICY_NAMES))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
def sdl_datamodel(config, policy, verbose, path):
    """Parse the SDL datamodel at PATH and print a summary of its types and relations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if config is not None:
        with open(config) as f:
            try:
                config_data = json.load(f)
            except json.JSONDecodeError as e:
                raise click.ClickException(f"Invalid config file: {e}") from e
        if not isinstance(config_data, dict):
            raise click.ClickException("Invalid config file: expected a JSON object")
        config = ParserConfig.from_dict(config_data)
    else:
        config = ParserConfig()

    # CLI flag overrides the config file
    if policy is not None:
        config.policy = policy

    with open(path) as f:
        source = f.read()

    try:
        model = DatamodelParser(config=config).parse_from_schema_string(source)
    except (DatamodelError, GraphQLSyntaxError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(render_summary(model), nl=False)
