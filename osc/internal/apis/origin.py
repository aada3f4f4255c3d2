from urllib.parse import quote

from osc.internal.utils.constants import ENDPOINTS
from osc.internal.utils.remote import ApiError


class OriginApi:
    def __init__(self, handler, endpoints=ENDPOINTS):
        self.handler = handler
        self.endpoints = endpoints

    def whoami(self, session):
        return self._whoami(session)

    def delete_access_token(self, session, token):
        return self._delete_access_token(session, token)

    def _whoami(self, session):
        url = session.server + self.endpoints['user_info_path']
        user = self.handler.get(url, headers=self._headers(session), verify=self._verify(session))
        if not isinstance(user, dict):
            raise ApiError('User info not found.')
        return user

    def _delete_access_token(self, session, token):
        url = session.server + self.endpoints['access_tokens_path'] + '/{}'.format(
            quote(token, safe=''))
        self.handler.delete(url, headers=self._headers(session), verify=self._verify(session))

    @staticmethod
    def _headers(session):
        return {
            'Accept': 'application/json',
            'Authorization': 'Bearer {}'.format(session.token)
        }

    @staticmethod
    def _verify(session):
        if session.insecure:
            return False
        return session.certificate_authority or True
