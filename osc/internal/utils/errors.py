import click


class OscError(Exception):
    def __init__(self, message=None):
        super(OscError, self).__init__(message)
        self.message = message

    def exit(self, config):
        if self.message:
            config.logger.error(self.message)
        raise click.Abort()


class ArgumentError(OscError):
    def __init__(self, args):
        super(ArgumentError, self).__init__(
            'No arguments are allowed, got: {}'.format(' '.join(args)))
        self.args_given = list(args)


class ConfigUnavailable(OscError):
    def __init__(self, path, reason=None):
        message = "No configuration found at {}. Run 'osc login' to create one.".format(path)
        if reason:
            message = 'Configuration at {} could not be read: {}'.format(path, reason)
        super(ConfigUnavailable, self).__init__(message)
        self.path = path


class NoActiveSession(OscError):
    def __init__(self):
        super(NoActiveSession, self).__init__(
            "No active session: the configuration has no current context or server. "
            "Run 'osc login' first.")


class NoCredential(OscError):
    def __init__(self):
        super(NoCredential, self).__init__(
            'You must have a token in order to logout.')


class RemoteRevokeFailed(OscError):
    def __init__(self, server, cause, action='revoke the token'):
        detail = getattr(cause, 'message', None) or str(cause) or cause.__class__.__name__
        detail = str(detail).rstrip('.')
        super(RemoteRevokeFailed, self).__init__(
            'Could not {} on {}: {}. Your local configuration was left '
            'unchanged.'.format(action, server, detail))
        self.server = server
        self.cause = cause


class PersistFailed(OscError):
    def __init__(self, path, cause):
        super(PersistFailed, self).__init__(
            'The token was revoked on the server, but {} could not be updated: {}. '
            'The revoked token is still present in that file; remove it manually or run '
            "'osc login' to replace it.".format(path, cause))
        self.path = path
        self.cause = cause
