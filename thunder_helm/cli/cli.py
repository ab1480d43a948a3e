import logging

import click

from thunder_helm.chart_manager import get_chart_manager


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!", err=True)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("engine_args", nargs=-1, type=click.UNPROCESSED)
def serve(engine_args):
    """Serve the provider to the Pulumi engine"""
    from thunder_helm.launcher import serve as serve_provider

    serve_provider(list(engine_args))


@cli.command()
def charts():
    """List the charts served by the provider"""
    for chart in get_chart_manager().get_all_charts():
        click.echo()
        echo_key_value("Type", chart.type_token)
        echo_key_value("Chart", chart.chart_cls.default_chart_name())
        echo_key_value("Repository", chart.chart_cls.default_repo_url())
        echo_key_value("Args", chart.args_cls.__name__)


def run():
    exit(cli())


if __name__ == "__main__":
    run()
