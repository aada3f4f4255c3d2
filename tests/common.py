import copy
import os

import yaml
from mock import MagicMock

from osc.internal.models.kubeconfig import ActiveSession
from osc.internal.models.kubeconfig import KubeConfig

SERVER = 'https://origin.example.com:8443'


class Common(object):

    @staticmethod
    def create_mock_config():
        mock_config = MagicMock()
        mock_config.overrides = {}
        return mock_config

    @staticmethod
    def create_session(token='tok-1', server=SERVER):
        return ActiveSession(
            server=server, token=token, identity='alice', insecure=False,
            certificate_authority=None)

    @staticmethod
    def create_kubeconfig_data(users=None, current_user='alice'):
        users = users if users is not None else {'alice': 'tok-1'}
        return {
            'apiVersion': 'v1',
            'kind': 'Config',
            'clusters': [{
                'name': 'origin',
                'cluster': {'server': SERVER}
            }],
            'contexts': [{
                'name': 'default/origin/alice',
                'context': {'cluster': 'origin', 'user': current_user, 'namespace': 'default'}
            }],
            'current-context': 'default/origin/alice',
            'users': [{'name': name, 'user': {'token': token}} for (name, token) in users.items()],
        }

    @staticmethod
    def write_kubeconfig(dir, data=None):
        path = os.path.join(dir, 'config.yml')
        with open(path, 'w') as f:
            yaml.safe_dump(copy.deepcopy(data or Common.create_kubeconfig_data()), f)
        return KubeConfig.load(path)

    @staticmethod
    def read_tokens(path):
        with open(path) as f:
            data = yaml.safe_load(f)
        return {user['name']: user['user'].get('token') for user in data['users']}

    @staticmethod
    def create_user_info(name='alice'):
        return {
            'kind': 'User',
            'apiVersion': 'v1',
            'metadata': {'name': name, 'uid': '5d2bd1b0-0000-11e5-8f32-080027242396'},
            'identities': ['htpasswd:{}'.format(name)]
        }
