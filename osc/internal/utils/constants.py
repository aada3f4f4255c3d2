import os

import click

LOG_PROTOCOL_TRACE = 4

REQUEST_TIMEOUT_SECONDS = 30

DEFAULT_CONFIG_PATH = os.path.join(click.get_app_dir('osc'), 'config.yml')

KUBECONFIG_DEFAULTS = {
    'apiVersion': 'v1',
    'kind': 'Config',
    'clusters': None,
    'contexts': None,
    'users': None,
    'current-context': None,
}

ENDPOINTS = {
    'user_info_path': '/oapi/v1/users/~',
    'access_tokens_path': '/oapi/v1/oauthaccesstokens',
}
