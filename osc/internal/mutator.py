import yaml

from osc.internal.models.kubeconfig import KubeConfig
from osc.internal.utils.errors import PersistFailed


class ConfigMutator:
    def __init__(self, config):
        self.config = config

    def scrub(self, kubeconfig: KubeConfig, token: str) -> KubeConfig:
        cleared = 0
        for record in kubeconfig.identities():
            if record.token == token:
                record.token = ''
                cleared += 1
                self.config.logger.debug("Cleared token of user '{}'".format(record.name))
                # No break: aliased users can share the same token.

        self.config.logger.debug('Cleared {} user(s) in {}'.format(cleared, kubeconfig.path))
        return kubeconfig

    def persist(self, kubeconfig: KubeConfig):
        try:
            kubeconfig.save()
        except (OSError, yaml.YAMLError) as e:
            raise PersistFailed(kubeconfig.path, e) from e
