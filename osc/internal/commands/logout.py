from osc.config import Config
from osc.internal.commands.command import Command
from osc.internal.mutator import ConfigMutator
from osc.internal.revoker import RemoteSessionRevoker
from osc.internal.utils.errors import ConfigUnavailable
from osc.internal.utils.errors import OscError
from osc.internal.utils.errors import PersistFailed
from osc.internal.utils.errors import RemoteRevokeFailed
from osc.internal.utils.validation import validate_no_arguments
from osc.internal.utils.validation import validate_session


class LogoutCommand(Command):
    START = 'START'
    GATHERED = 'GATHERED'
    VALIDATED = 'VALIDATED'
    REMOTE_REVOKED = 'REMOTE_REVOKED'
    LOCAL_SCRUBBED = 'LOCAL_SCRUBBED'
    FAILED_VALIDATION = 'FAILED_VALIDATION'
    FAILED_REMOTE = 'FAILED_REMOTE'
    FAILED_PERSIST = 'FAILED_PERSIST'

    def __init__(self, config: Config, args: tuple = (), mutator: ConfigMutator = None):
        super(LogoutCommand, self).__init__(config)

        self.args = args
        self.mutator = mutator or ConfigMutator(config)

        self.kubeconfig = None
        self.session = None
        self.state = self.START

    @Command.helper('logout')
    def run(self):
        self.gather()
        self.validate(self.args)
        self.execute()

    def gather(self):
        try:
            kubeconfig = self.config.load_kubeconfig()
            if not kubeconfig.exists():
                raise ConfigUnavailable(kubeconfig.path)
        except ConfigUnavailable:
            self._transition(self.FAILED_VALIDATION)
            raise

        self.kubeconfig = kubeconfig
        self.session = kubeconfig.active_session(self.config.overrides)
        self._transition(self.GATHERED)

    def validate(self, args):
        try:
            validate_no_arguments(args)
            validate_session(self.kubeconfig, self.session)
        except OscError:
            self._transition(self.FAILED_VALIDATION)
            raise

        self._transition(self.VALIDATED)

    def execute(self):
        token = self.session.token
        revoker = RemoteSessionRevoker(self.config, self.session)

        try:
            user = revoker.identify()
            revoker.revoke(token)
        except RemoteRevokeFailed:
            self._transition(self.FAILED_REMOTE)
            raise
        self._transition(self.REMOTE_REVOKED)

        try:
            self.mutator.scrub(self.kubeconfig, token)
            self.mutator.persist(self.kubeconfig)
        except PersistFailed:
            self._transition(self.FAILED_PERSIST)
            raise
        self._transition(self.LOCAL_SCRUBBED)

        self.config.logger.info('User, {}, logged out of {}'.format(user.name, self.session.server))

    def _transition(self, state):
        self.config.logger.log(1, 'logout: {} -> {}'.format(self.state, state))
        self.state = state
