from osc.internal.utils.errors import ArgumentError
from osc.internal.utils.errors import NoActiveSession
from osc.internal.utils.errors import NoCredential


def validate_no_arguments(args):
    if args:
        raise ArgumentError(args)


def validate_session(kubeconfig, session):
    if kubeconfig is None or session is None:
        raise NoActiveSession()
    if not session.token:
        raise NoCredential()
