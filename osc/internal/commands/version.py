from osc.config import Config
from osc.internal.commands.command import Command
from osc.version import __version__


class VersionCommand(Command):
    def __init__(self, config: Config):
        super(VersionCommand, self).__init__(config)

    @Command.helper('version')
    def run(self):
        self.config.logger.info('osc v{}'.format(__version__))
