from osc.internal.models.kubeconfig import ActiveSession
from osc.internal.models.kubeconfig import UserIdentity
from osc.internal.utils.errors import RemoteRevokeFailed
from osc.internal.utils.remote import ApiError


class RemoteSessionRevoker:
    """
    Talks to the server on behalf of the session being closed. Both calls authenticate
    with the session's own token, so `identify` has to happen while that token still
    works, i.e. before `revoke`.
    """

    def __init__(self, config, session: ActiveSession):
        self.config = config
        self.session = session

    def identify(self) -> UserIdentity:
        try:
            user = self.config.api.whoami(self.session)
        except ApiError as e:
            raise RemoteRevokeFailed(self.session.server, e, 'identify the user') from e

        metadata = user.get('metadata') or {}
        name = metadata.get('name')
        if not name:
            raise RemoteRevokeFailed(
                self.session.server, ApiError('server did not report a user name'),
                'identify the user')

        self.config.logger.debug('Token belongs to {}'.format(name))
        return UserIdentity(name=name, uid=metadata.get('uid'))

    def revoke(self, token: str):
        self.config.logger.debug('Revoking token on {}'.format(self.session.server))
        try:
            self.config.api.delete_access_token(self.session, token)
        except ApiError as e:
            raise RemoteRevokeFailed(self.session.server, e) from e
