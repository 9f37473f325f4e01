#!/usr/bin/env python3
import logging
import sys
import unittest
from unittest.mock import Mock

from slackhook.config import HookConfig
from slackhook.handler import SlackHandler, extract_fields, record_to_entry
from slackhook.hook import SlackHook
from slackhook.services import DispatchError
from slackhook.severity import Level


def _make_hook(**config):
    hook = SlackHook(HookConfig(endpoint_url="http://example.invalid", **config))
    hook.fire = Mock()
    return hook


class TestSlackHandler(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("myapp.test_handler")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

    def tearDown(self):
        for h in list(self.logger.handlers):
            self.logger.removeHandler(h)

    def test_record_becomes_entry(self):
        hook = _make_hook()
        self.logger.addHandler(SlackHandler(hook))

        self.logger.warning("disk at %d%%", 91, extra={"host": "10.0.0.1", "mount": "/"})

        hook.fire.assert_called_once()
        entry = hook.fire.call_args[0][0]
        self.assertEqual(entry.level, Level.WARN)
        self.assertEqual(entry.message, "disk at 91%")
        self.assertEqual(dict(entry.data), {"host": "10.0.0.1", "mount": "/"})

    def test_levels_gate(self):
        hook = _make_hook(accepted_levels={Level.ERROR, Level.FATAL})
        self.logger.addHandler(SlackHandler(hook))

        self.logger.info("ignored")
        self.logger.error("sent")

        self.assertEqual(hook.fire.call_count, 1)
        self.assertEqual(hook.fire.call_args[0][0].message, "sent")

    def test_ignored_loggers_never_forwarded(self):
        hook = _make_hook()
        handler = SlackHandler(hook)
        for name in ("slackhook.services", "urllib3.connectionpool", "requests"):
            handler.handle(logging.LogRecord(name, logging.ERROR, __file__, 1, "loop", (), None))
        hook.fire.assert_not_called()

        # Prefixo parecido mas de outro pacote ainda passa
        handler.handle(logging.LogRecord("requests_extra", logging.ERROR, __file__, 1, "ok", (), None))
        hook.fire.assert_called_once()

    def test_dispatch_error_goes_to_handle_error(self):
        hook = _make_hook()
        hook.fire.side_effect = DispatchError("down")
        handler = SlackHandler(hook)
        handler.handleError = Mock()
        self.logger.addHandler(handler)

        self.logger.error("boom")

        handler.handleError.assert_called_once()

    def test_bad_format_args_do_not_reach_caller(self):
        hook = _make_hook()
        handler = SlackHandler(hook)
        handler.handleError = Mock()
        self.logger.addHandler(handler)

        # Não pode levantar TypeError para quem chamou o logger
        self.logger.error("value %d", "not-a-number")

        handler.handleError.assert_called_once()
        hook.fire.assert_not_called()

    def test_unexpected_hook_error_goes_to_handle_error(self):
        hook = _make_hook()
        hook.fire.side_effect = RuntimeError("bug")
        handler = SlackHandler(hook)
        handler.handleError = Mock()
        self.logger.addHandler(handler)

        self.logger.error("boom")

        handler.handleError.assert_called_once()


class TestRecordConversion(unittest.TestCase):
    def test_exception_text_added_as_error_field(self):
        try:
            raise RuntimeError("kaboom")
        except RuntimeError:
            record = logging.LogRecord("app", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        data = extract_fields(record)
        self.assertIn("RuntimeError: kaboom", data["error"])

    def test_standard_attributes_are_not_fields(self):
        record = logging.LogRecord("app", logging.INFO, __file__, 1, "plain", (), None)
        self.assertEqual(extract_fields(record), {})
        entry = record_to_entry(record)
        self.assertEqual(entry.level, Level.INFO)
        self.assertAlmostEqual(entry.timestamp.timestamp(), record.created, places=3)


if __name__ == '__main__':
    unittest.main()
