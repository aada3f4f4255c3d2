import logging

from osc.internal.apis.origin import OriginApi
from osc.internal.models.kubeconfig import KubeConfig
from osc.internal.utils.constants import DEFAULT_CONFIG_PATH
from osc.internal.utils.remote import RequestHandler


class Config(object):
    """
    Global config object, utilized to set verbosity of logging events
    and other flags.
    """

    def __init__(
        self,
        logger: logging.Logger = None,
        api: OriginApi = None,
        kubeconfig: KubeConfig = None,
        kubeconfig_path: str = DEFAULT_CONFIG_PATH
    ):
        logger = logger or logging.getLogger(__name__)
        api = api or OriginApi(RequestHandler(self))

        self.logger = logger
        self.api = api
        self.kubeconfig = kubeconfig
        self.kubeconfig_path = kubeconfig_path
        self.overrides = {}

    def load_kubeconfig(self) -> KubeConfig:
        if self.kubeconfig is None:
            self.kubeconfig = KubeConfig.load(self.kubeconfig_path)
        return self.kubeconfig
