from collections import namedtuple

import yaml

from osc.internal.utils.constants import KUBECONFIG_DEFAULTS
from osc.internal.utils.errors import ConfigUnavailable
from osc.internal.utils.store import Store

ActiveSession = namedtuple(
    'ActiveSession', ['server', 'token', 'identity', 'insecure', 'certificate_authority'])
UserIdentity = namedtuple('UserIdentity', ['name', 'uid'])


class IdentityRecord(object):
    """
    A live view over one ``users`` stanza of the config document:
    ::

        - name: alice
          user:
            token: tok-1

    Writes go straight into the underlying stanza, so the owning document sees them
    without copying.
    """

    def __init__(self, stanza: dict):
        self._stanza = stanza

    @property
    def name(self):
        return self._stanza.get('name')

    @property
    def token(self):
        user = self._stanza.get('user')
        if not isinstance(user, dict):
            return None
        return user.get('token')

    @token.setter
    def token(self, value):
        if not isinstance(self._stanza.get('user'), dict):
            self._stanza['user'] = {}
        self._stanza['user']['token'] = value

    def __repr__(self):
        return 'IdentityRecord(name={!r})'.format(self.name)


class KubeConfig(object):
    def __init__(self, store: Store):
        self.store = store

    @staticmethod
    def load(path):
        store = Store(path, KUBECONFIG_DEFAULTS, restore=False)
        try:
            store.restore()
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as err:
            raise ConfigUnavailable(store.path, err)
        return KubeConfig(store)

    @property
    def path(self):
        return self.store.path

    @property
    def current_context(self):
        return self.store['current-context']

    def exists(self):
        return self.store.exists()

    def save(self):
        self.store.save()

    def identities(self):
        """
        Every identity stanza in document order. Names are not assumed to be unique, so
        callers that need to see every stanza should walk this list rather than look
        records up by name.
        """

        return [IdentityRecord(stanza) for stanza in self._entries('users')]

    def get_identity(self, name):
        for record in self.identities():
            if record.name == name:
                return record
        return None

    def get_context(self, name):
        return self._named('contexts', 'context', name)

    def get_cluster(self, name):
        return self._named('clusters', 'cluster', name)

    def active_session(self, overrides: dict = None):
        overrides = overrides or {}

        context = self.get_context(overrides.get('context') or self.current_context) or {}
        cluster = self.get_cluster(context.get('cluster')) or {}
        identity = self.get_identity(context.get('user'))

        server = overrides.get('server') or cluster.get('server')
        if not server:
            return None

        token = overrides.get('token')
        if token is None:
            token = identity.token if identity else None

        return ActiveSession(
            server=server.rstrip('/'),
            token=token or '',
            identity=identity.name if identity else None,
            insecure=bool(cluster.get('insecure-skip-tls-verify')),
            certificate_authority=cluster.get('certificate-authority'))

    def _entries(self, key):
        entries = self.store[key]
        if not isinstance(entries, list):
            return []
        return [entry for entry in entries if isinstance(entry, dict)]

    def _named(self, key, field, name):
        if not name:
            return None
        for entry in self._entries(key):
            if entry.get('name') == name:
                value = entry.get(field)
                return value if isinstance(value, dict) else {}
        return None
