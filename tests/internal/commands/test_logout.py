import os
import tempfile
import unittest

import click
from mock import MagicMock

from osc.internal.commands.logout import LogoutCommand
from osc.internal.models.kubeconfig import KubeConfig
from osc.internal.utils.errors import ArgumentError
from osc.internal.utils.errors import ConfigUnavailable
from osc.internal.utils.errors import NoActiveSession
from osc.internal.utils.errors import NoCredential
from osc.internal.utils.errors import PersistFailed
from osc.internal.utils.errors import RemoteRevokeFailed
from osc.internal.utils.remote import ApiError
from tests.common import Common
from tests.common import SERVER


class LogoutCommandTest(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.config = Common.create_mock_config()
        self.config.api.whoami = MagicMock(return_value=Common.create_user_info('alice'))
        self._use_kubeconfig(Common.write_kubeconfig(self.dir))

    def test__gather__loads_store_and_session(self):
        command = LogoutCommand(self.config)

        command.gather()

        self.assertIs(command.kubeconfig, self.kubeconfig)
        self.assertEqual(command.session.token, 'tok-1')
        self.assertEqual(command.session.server, SERVER)
        self.assertEqual(command.state, LogoutCommand.GATHERED)

    def test__gather__missing_config_is_unavailable(self):
        self._use_kubeconfig(KubeConfig.load(os.path.join(self.dir, 'missing.yml')))
        command = LogoutCommand(self.config)

        with self.assertRaises(ConfigUnavailable):
            command.gather()

        self.assertEqual(command.state, LogoutCommand.FAILED_VALIDATION)

    def test__gather__overrides_are_applied(self):
        self.config.overrides = {'token': 'tok-9'}
        command = LogoutCommand(self.config)

        command.gather()

        self.assertEqual(command.session.token, 'tok-9')

    def test__validate__arguments_are_rejected(self):
        command = LogoutCommand(self.config, ('alice',))
        command.gather()

        with self.assertRaises(ArgumentError):
            command.validate(command.args)

        self.assertEqual(command.state, LogoutCommand.FAILED_VALIDATION)

    def test__validate__without_gather_has_no_session(self):
        command = LogoutCommand(self.config)

        with self.assertRaises(NoActiveSession):
            command.validate(())

    def test__validate__empty_token_has_no_credential(self):
        self._use_kubeconfig(Common.write_kubeconfig(
            self.dir, Common.create_kubeconfig_data({'alice': ''})))
        command = LogoutCommand(self.config)
        command.gather()

        with self.assertRaises(NoCredential):
            command.validate(())

    def test__run__logs_out_and_scrubs_every_alias(self):
        self._use_kubeconfig(Common.write_kubeconfig(self.dir, Common.create_kubeconfig_data({
            'alice': 'tok-1',
            'alice-alias': 'tok-1',
            'bob': 'tok-2',
        })))
        self.config.api.whoami = MagicMock(return_value=Common.create_user_info('remote-alice'))
        command = LogoutCommand(self.config)

        command.run()

        self.assertEqual(command.state, LogoutCommand.LOCAL_SCRUBBED)
        self.config.api.delete_access_token.assert_called_once_with(command.session, 'tok-1')
        self.assertEqual(Common.read_tokens(self.kubeconfig.path), {
            'alice': '',
            'alice-alias': '',
            'bob': 'tok-2',
        })
        self.config.logger.info.assert_called_with(
            'User, remote-alice, logged out of {}'.format(SERVER))

    def test__run__identify_happens_before_revoke(self):
        calls = []
        self.config.api.whoami = MagicMock(
            side_effect=lambda session: calls.append('whoami') or Common.create_user_info())
        self.config.api.delete_access_token = MagicMock(
            side_effect=lambda session, token: calls.append('delete'))

        LogoutCommand(self.config).run()

        self.assertEqual(calls, ['whoami', 'delete'])

    def test__run__arguments_cause_no_side_effects(self):
        command = LogoutCommand(self.config, ('extra',))

        with self.assertRaises(click.Abort):
            command.run()

        self.config.api.whoami.assert_not_called()
        self.config.api.delete_access_token.assert_not_called()
        self.assertEqual(Common.read_tokens(self.kubeconfig.path), {'alice': 'tok-1'})

    def test__run__remote_failure_leaves_store_untouched(self):
        self.config.api.delete_access_token = MagicMock(
            side_effect=ApiError('Request failed with status code 500.', 500))
        mutator = MagicMock()
        command = LogoutCommand(self.config, mutator=mutator)

        with self.assertRaises(click.Abort):
            command.run()

        self.assertEqual(command.state, LogoutCommand.FAILED_REMOTE)
        mutator.scrub.assert_not_called()
        mutator.persist.assert_not_called()
        self.assertEqual(self.kubeconfig.get_identity('alice').token, 'tok-1')
        self.assertEqual(Common.read_tokens(self.kubeconfig.path), {'alice': 'tok-1'})

    def test__execute__remote_failure_is_distinct_error(self):
        self.config.api.delete_access_token = MagicMock(side_effect=ApiError('boom'))
        command = LogoutCommand(self.config)
        command.gather()
        command.validate(())

        with self.assertRaises(RemoteRevokeFailed):
            command.execute()

    def test__execute__persist_failure_is_distinct_error(self):
        self.kubeconfig.store.save = MagicMock(side_effect=OSError('read-only file system'))
        command = LogoutCommand(self.config)
        command.gather()
        command.validate(())

        with self.assertRaises(PersistFailed) as cm:
            command.execute()

        self.assertNotIsInstance(cm.exception, RemoteRevokeFailed)
        self.assertEqual(command.state, LogoutCommand.FAILED_PERSIST)
        self.config.api.delete_access_token.assert_called_once()
        self.config.logger.info.assert_not_called()

    def test__run__persist_failure_reports_error(self):
        self.kubeconfig.store.save = MagicMock(side_effect=OSError('read-only file system'))
        command = LogoutCommand(self.config)

        with self.assertRaises(click.Abort):
            command.run()

        message = self.config.logger.error.call_args[0][0]
        self.assertIn('revoked on the server', message)
        self.assertIn(self.kubeconfig.path, message)
        self.config.logger.info.assert_not_called()

    def test__run__second_logout_has_no_credential(self):
        LogoutCommand(self.config).run()
        self.config.api.reset_mock()
        self._use_kubeconfig(KubeConfig.load(self.kubeconfig.path))
        command = LogoutCommand(self.config)

        with self.assertRaises(click.Abort):
            command.run()

        self.assertEqual(command.state, LogoutCommand.FAILED_VALIDATION)
        self.assertEqual(self.config.logger.error.call_args[0][0],
                         NoCredential().message)
        self.config.api.whoami.assert_not_called()
        self.config.api.delete_access_token.assert_not_called()

    def _use_kubeconfig(self, kubeconfig):
        self.kubeconfig = kubeconfig
        self.config.load_kubeconfig = MagicMock(return_value=kubeconfig)
