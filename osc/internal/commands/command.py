import abc
import time
from abc import abstractmethod

from osc.internal.utils.errors import OscError


class Command(metaclass=abc.ABCMeta):
    def __init__(self, config):
        self.config = config

    @abstractmethod
    def run(self):
        pass

    @staticmethod
    def helper(name: str):
        def decorator(f):
            def wrapper(self, *args, **kwargs):
                start = time.time()
                error = None
                try:
                    return f(self, *args, **kwargs)
                except OscError as e:
                    error = e
                    e.exit(self.config)
                finally:
                    diff = time.time() - start
                    self.config.logger.debug('Command {} finished in {:.2f}s{}'.format(
                        name, diff, ' with {}'.format(error.__class__.__name__) if error else ''))

            return wrapper

        return decorator
