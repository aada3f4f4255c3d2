import re
from json.decoder import JSONDecodeError

import requests

from osc.internal.utils.constants import REQUEST_TIMEOUT_SECONDS
from osc.internal.utils.errors import OscError
from osc.internal.utils.logging import LazyLog

_TOKEN_PATH = re.compile(r'(/oauthaccesstokens/)[^/?]+')


class RequestHandler:
    def __init__(self, config):
        self.config = config

    def get(self, url, *args, **kwargs):
        return self._request_wrapper('get', url, *args, **kwargs)

    def post(self, url, *args, **kwargs):
        return self._request_wrapper('post', url, *args, **kwargs)

    def delete(self, url, *args, **kwargs):
        return self._request_wrapper('delete', url, *args, **kwargs)

    def _request_wrapper(self, type, url, *args, **kwargs):
        self.config.logger.debug(LazyLog(lambda: 'Starting {} request to {} with payload {}'.format(
            type.upper(), redact_url(url), kwargs.get('json'))))
        r = self._safe_request(type, url, *args, **kwargs)
        self.config.logger.debug(LazyLog(
            lambda: 'Finished request to {} with status code {} '
                    'and response {}'.format(redact_url(url), r.status_code, r.text)))

        if not r.ok:
            self._handle_failed_response(r)
        if r.text:
            try:
                return r.json()
            except JSONDecodeError as e:
                self.config.logger.debug(e)
                return r.text

    def _safe_request(self, type, *args, **kwargs) -> requests.Response:
        func = getattr(requests, type)
        kwargs.setdefault('timeout', REQUEST_TIMEOUT_SECONDS)
        try:
            return func(*args, **kwargs)
        except requests.RequestException as e:
            self.config.logger.debug('{} request to {} failed: {}'.format(
                type.upper(), redact_url(args[0]), e))
            raise ApiError('Network request failed. Check your connection to the server.')

    def _handle_failed_response(self, r):
        self._handle_status(r.status_code)

        if r.text:
            self._handle_status_object(r)
            self._handle_errors_plain(r)
            raise ApiError(r.text, r.status_code)

        raise ApiError('Request failed with status code {}.'.format(r.status_code), r.status_code)

    def _handle_status(self, status_code):
        if status_code == 400:
            self.config.logger.debug('Client made a bad request, failed.')
        elif status_code == 401:
            raise ApiError("Unauthorized: the token is expired or has already been revoked. "
                           "Run 'osc login' to start a new session.", status_code)
        elif status_code == 403:
            self.config.logger.debug('Access to resource is forbidden.')
        elif status_code == 404:
            self.config.logger.debug('Resource is unavailable, failed')
        elif status_code >= 500:
            self.config.logger.debug('Server or resource is currently unavailable.')

    def _handle_status_object(self, r):
        """
        Makes an effort to parse body of the `response` object as an API ``Status`` object:
        ::

            {
                'kind': 'Status',
                'status': 'Failure',
                'message': 'description of error',
                'reason': 'NotFound',
                'code': 404
            }

        Returns silently if the body does not look like one.

        :param r: Response
        """

        try:
            status = r.json()
            self.config.logger.debug(status)

            if status['kind'] != 'Status':
                return

            message = str(status['message'])
            reason = status.get('reason')
            if reason:
                message = '{} ({})'.format(message, reason)
            raise ApiError(message, r.status_code)
        except (KeyError, TypeError, ValueError):
            return

    def _handle_errors_plain(self, r):
        try:
            raise ApiError(str(r.json()['error']), r.status_code)
        except (KeyError, TypeError, ValueError):
            try:
                raise ApiError(str(r.json()['message']), r.status_code)
            except (KeyError, TypeError, ValueError):
                return


class ApiError(OscError):
    def __init__(self, message=None, status_code=None):
        super(ApiError, self).__init__(message)
        self.status_code = status_code


def redact_url(url):
    return _TOKEN_PATH.sub(r'\1<redacted>', str(url))
