import logging
import os
import unittest
from unittest.mock import patch

from statuscheck.config import settings, setup_logging


class ConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger()
        self.saved_level = self.root.level
        self.saved_handlers = list(self.root.handlers)

    def tearDown(self) -> None:
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_fixed_target_and_timeout(self) -> None:
        self.assertEqual(settings.TARGET_URL, "https://charm.sh/")
        self.assertEqual(settings.CHECK_TIMEOUT_SECONDS, 10.0)

    def test_setup_logging_uses_warning(self) -> None:
        setup_logging()
        self.assertEqual(self.root.level, logging.WARNING)

    def test_environment_does_not_change_log_level(self) -> None:
        with patch.dict(
            os.environ,
            {"STATUSCHECK_LOG_LEVEL": "DEBUG", "LOG_LEVEL": "DEBUG"},
        ):
            setup_logging()

        self.assertEqual(self.root.level, logging.WARNING)
        self.assertFalse(self.root.isEnabledFor(logging.DEBUG))


if __name__ == "__main__":
    unittest.main()
