import click

from osc.config import Config
from osc.internal.commands.command import Command


class HelpCommand(Command):
    def __init__(self, config: Config, commands: tuple):
        super(HelpCommand, self).__init__(config)
        self.commands = commands

    @Command.helper('help')
    def run(self):
        # Imported here, osc.cli imports this module.
        from osc.cli import cli

        ctx = click.get_current_context()
        self.config.logger.info(self._find(ctx, cli).get_help(ctx))

    def _find(self, ctx, command):
        path = ['osc']
        for name in self.commands:
            sub_command = None
            if isinstance(command, click.Group):
                sub_command = command.get_command(ctx, name)
            if sub_command is None:
                raise click.BadArgumentUsage(
                    "'{}' is not an osc command. See 'osc help'.".format(' '.join(path + [name])))
            path.append(name)
            command = sub_command
        return command
