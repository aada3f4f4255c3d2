from osc.config import Config
from osc.internal.commands.command import Command
from osc.internal.utils.errors import ConfigUnavailable
from osc.internal.utils.remote import ApiError
from osc.internal.utils.validation import validate_session


class WhoamiCommand(Command):
    def __init__(self, config: Config):
        super(WhoamiCommand, self).__init__(config)

    @Command.helper('whoami')
    def run(self):
        kubeconfig = self.config.load_kubeconfig()
        if not kubeconfig.exists() and not self.config.overrides.get('server'):
            raise ConfigUnavailable(kubeconfig.path)

        session = kubeconfig.active_session(self.config.overrides)
        validate_session(kubeconfig, session)

        user = self.config.api.whoami(session)
        name = (user.get('metadata') or {}).get('name')
        if not name:
            raise ApiError('Server did not report a user name.')

        self.config.logger.info(name)
