import click

from nsidc.tubegen import config
from nsidc.tubegen import tubegen
from nsidc.tubegen.models import GapFill


@click.group(epilog="For detailed help on each command, run: tubegen COMMAND --help")
def cli():
    """The tubegen utility builds time-ordered trajectory tubes from
    spatiotemporal observations, for use as input to spatial-temporal
    range queries."""
    pass


@cli.command()
@click.option("-c", "--config", help="Path to configuration file to create or replace")
def init(config):
    """Populates a configuration file based on user input."""
    click.echo(tubegen.banner())
    config = tubegen.init_config(config)
    click.echo(f"Initialized the tubegen configuration file {config}")


@cli.command()
@click.option("-c", "--config", "config_filename", help="Path to configuration file to display", required=True)
def info(config_filename):
    """Summarizes the contents of a configuration file."""
    click.echo(tubegen.banner())
    configuration = config.configuration(config.config_parser_factory(config_filename), {})
    tubegen.init_logging()
    configuration.show()


@cli.command()
@click.option("-c", "--config", "config_filename", help="Path to configuration file", required=True)
@click.option("-g", "--gap-fill", type=click.Choice([g.value for g in GapFill]), help="Gap fill method.")
@click.option("-b", "--buffer-distance", type=float, help="Buffer distance in meters.", metavar="meters")
@click.option("-n", "--max-bins", type=int, help="Combine observations into at most 'count' segments.", metavar="count")
@click.option("-o", "--output", "output_file", help="Path to the tube output file.")
def process(config_filename, gap_fill, buffer_distance, max_bins, output_file):
    """Builds a tube from the observations named in the configuration file."""
    click.echo(tubegen.banner())
    overrides = {
        "gap_fill": gap_fill,
        "buffer_distance": buffer_distance,
        "max_bins": max_bins,
        "output_file": output_file,
    }
    try:
        configuration = config.configuration(config.config_parser_factory(config_filename), overrides)
        tubegen.init_logging()
        tubegen.process(configuration)
    except Exception as e:
        print("\nUnable to process data: " + str(e))
        exit(1)
    click.echo(f"Processed observations using the configuration file {config_filename}")


if __name__ == "__main__":
    cli()
