import click

from osc.config import Config
from osc.internal.utils.logging import handle_set_level
from osc.internal.utils.logging import install_logger
from osc.internal.utils.osc_types import AliasedGroup

pass_config = click.make_pass_decorator(Config, ensure=True)


# noinspection PyUnusedLocal
def _version_callback(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return

    config = ctx.ensure_object(Config)
    install_logger(config.logger, 'INFO')

    from osc.internal.commands.version import VersionCommand
    command = VersionCommand(config)
    command.run()

    ctx.exit()


@click.group(cls=AliasedGroup, context_settings={'help_option_names': ['-h', '--help']})
@click.option('--version', '-V', is_flag=True, is_eager=True, expose_value=False,
              callback=_version_callback,
              help='Show the version and exit.')
@click.option('kubeconfig_path', '--config', envvar='OSC_CONFIG', type=click.Path(dir_okay=False),
              help='Path to the config file to use for this command.')
@click.option('--server', help='The address of the API server, overriding the current context.')
@click.option('--token', help='Bearer token for authentication to the API server.')
@click.option('--context', help='The name of the config context to use.')
@click.option('--no-color', is_flag=True, default=False,
              help='Disable rich console output.')
@click.option('--verbosity', '-v', expose_value=False, is_eager=True, callback=handle_set_level,
              help='Either CRITICAL, ERROR, WARNING, INFO, DEBUG or TRACE')
@pass_config
def cli(config, kubeconfig_path, server, token, context, no_color):
    """
    osc is the command line client for the Origin platform.
    """

    from osc.internal.commands.cli_init import CliInitCommand
    command = CliInitCommand(config, no_color, kubeconfig_path, server, token, context)
    command.run()


@cli.command(context_settings={'ignore_unknown_options': True})
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@pass_config
def logout(config, args):
    """
    Log out of the active session.

    \b
    The token of the current session is revoked on the server and then
    cleared from every user in the config file that holds it.

    \b
    Example:
      $ osc logout
    """

    from osc.internal.commands.logout import LogoutCommand
    command = LogoutCommand(config, args)
    command.run()


@cli.command()
@pass_config
def whoami(config):
    """
    Display the user name the server reports for the active session.
    """

    from osc.internal.commands.whoami import WhoamiCommand
    command = WhoamiCommand(config)
    command.run()


@cli.command(hidden=True)
@pass_config
def version(config):
    """Display the osc version."""

    from osc.internal.commands.version import VersionCommand
    command = VersionCommand(config)
    command.run()


@cli.command()
@click.argument('command', nargs=-1)
@pass_config
def help(config, command):
    """
    Display help information.

    \b
      COMMAND the name of the command.
    """

    from osc.internal.commands.help import HelpCommand
    command = HelpCommand(config, command)
    command.run()


def main():
    cli()


if __name__ == '__main__':
    main()
