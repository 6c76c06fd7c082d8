import json

import click

from .config import GeneratorConfig
from .generator import SyntaxFactoryGenerator

USAGE = "Usage:\n\tsyntax_factory <syntax-json-input-file>"


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False), help="Write here instead of next to the input file")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Report what was generated")
@click.argument("path", required=False, default=None, type=click.Path(dir_okay=False))
def syntax_factory(config, output, verbose, path):
    if path is None:
        click.echo(USAGE)
        return

    # Read and decode errors are left to surface as they are
    with open(path, encoding="utf-8") as f:
        syntax = json.load(f)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    codegen = SyntaxFactoryGenerator(syntax, config)
    output_path = codegen.write(output if output is not None else codegen.output_path_for(path))

    if verbose:
        click.echo(f"Generated {len(codegen.tables.kinds)} node kinds -> {output_path}")
