import click_log

from osc.config import Config
from osc.internal.commands.command import Command


class CliInitCommand(Command):
    def __init__(
        self,
        config: Config,
        no_color: bool,
        kubeconfig_path: str,
        server: str,
        token: str,
        context: str
    ):
        super(CliInitCommand, self).__init__(config)

        self.no_color = no_color
        self.kubeconfig_path = kubeconfig_path
        self.server = server
        self.token = token
        self.context = context

    @Command.helper('cli')
    def run(self):
        self._update_logging()
        self._update_overrides()

    def _update_logging(self):
        if self.no_color:
            click_log.ColorFormatter.colors = {
                'error': {},
                'exception': {},
                'critical': {},
                'debug': {},
                'warning': {}
            }

        self.config.logger.log(1, 'Lowest logging level activated.')
        self.config.logger.debug('Debug logging activated.')

    def _update_overrides(self):
        if self.kubeconfig_path:
            self.config.kubeconfig_path = self.kubeconfig_path
        self.config.logger.debug('Using configuration at {}'.format(self.config.kubeconfig_path))

        overrides = {'server': self.server, 'token': self.token, 'context': self.context}
        for (key, value) in overrides.items():
            if value is not None:
                self.config.overrides[key] = value
                self.config.logger.debug('Overriding {} from the command line'.format(key))
