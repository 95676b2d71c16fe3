"""
Tests for the console logging setup.
"""

import logging
import unittest
from unittest.mock import patch

from netgear_console import logging_setup
from netgear_console.logging_setup import _setup_logging, log, mask


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        urllib3_log = logging.getLogger("urllib3")
        saved = (list(log.handlers), log.level, urllib3_log.level)

        def restore():
            log.handlers[:] = saved[0]
            log.setLevel(saved[1])
            urllib3_log.setLevel(saved[2])

        self.addCleanup(restore)

    def test_single_handler_and_level(self):
        _setup_logging()
        _setup_logging()
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.level, logging.INFO)

    @patch.object(logging_setup, "_COLORLOG_AVAILABLE", False)
    def test_debug_without_colorlog_mentions_it(self):
        with patch.object(log, "debug") as debug:
            _setup_logging(debug=True)

        self.assertEqual(log.level, logging.DEBUG)
        self.assertEqual(logging.getLogger("urllib3").level, logging.DEBUG)
        debug.assert_called_once()
        self.assertIn("colorlog", debug.call_args.args[0])
        self.assertIs(type(log.handlers[0].formatter), logging.Formatter)

    @patch.object(logging_setup, "_COLORLOG_AVAILABLE", False)
    def test_no_colorlog_note_outside_debug(self):
        with patch.object(log, "debug") as debug:
            _setup_logging(debug=False)
        debug.assert_not_called()


class TestMask(unittest.TestCase):
    def test_short_secret_fully_hidden(self):
        self.assertEqual(mask("abcd"), "****")

    def test_long_secret_keeps_prefix_and_length(self):
        self.assertEqual(mask("supersecret"), "su…(11 chars)")


if __name__ == "__main__":
    unittest.main()
