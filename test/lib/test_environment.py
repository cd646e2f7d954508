from __future__ import annotations

import logging
import os

from unittest import mock

from b64d.lib.environment import B64dFormatter, EVBool, EVInt, EVLog, LogLevel

from .. import TestBase


class TestEnvironment(TestBase):

    def test_boolean_settings(self):
        for value, expected in [
            ('1', True),
            ('0', False),
            ('yes', True),
            ('OFF', False),
            ('false', False),
            ('', False),
        ]:
            with mock.patch.dict(os.environ, {'B64D_TEST': value}):
                self.assertEqual(EVBool('TEST').value, expected, msg=value)
        with mock.patch.dict(os.environ, clear=True):
            self.assertFalse(EVBool('TEST').value)

    def test_integer_settings(self):
        with mock.patch.dict(os.environ, {'B64D_TEST': '0x50'}):
            self.assertEqual(EVInt('TEST').value, 80)
        with mock.patch.dict(os.environ, {'B64D_TEST': 'wide'}):
            self.assertEqual(EVInt('TEST').value, 0)

    def test_log_level_settings(self):
        with mock.patch.dict(os.environ, {'B64D_VERBOSITY': '2'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DEBUG)
        with mock.patch.dict(os.environ, {'B64D_VERBOSITY': 'info'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.INFO)
        with mock.patch.dict(os.environ, {'B64D_VERBOSITY': 'chatty'}):
            self.assertIsNone(EVLog('VERBOSITY').value)
        with mock.patch.dict(os.environ, {'B64D_VERBOSITY': 'detached'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DETACHED)
        with mock.patch.dict(os.environ, {'B64D_VERBOSITY': 'none'}):
            self.assertIsNone(EVLog('VERBOSITY').value)

    def test_verbosity_mapping(self):
        self.assertEqual(LogLevel.FromVerbosity(-1), LogLevel.DETACHED)
        self.assertEqual(LogLevel.FromVerbosity(0), LogLevel.WARNING)
        self.assertEqual(LogLevel.FromVerbosity(1), LogLevel.INFO)
        self.assertEqual(LogLevel.FromVerbosity(5), LogLevel.DEBUG)

    def test_formatter_level_names(self):
        formatter = B64dFormatter('{custom_level_name}: {message}', style='{')
        record = logging.LogRecord('b64d', logging.INFO, __file__, 0, 'decode error', None, None)
        self.assertEqual(formatter.format(record), 'comment: decode error')
        record = logging.LogRecord('b64d', logging.CRITICAL, __file__, 0, 'too large', None, None)
        self.assertEqual(formatter.format(record), 'failure: too large')
