import unittest
import logging
import os
import shutil
import tempfile

from pysatlink import logger as logger_module
from pysatlink.logger import (
    ColoredFormatter, LogContext, LoggerConfig, get_logger, level_value, setup_logger,
    setup_logger_from_config
)


class TestSetupLogger(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.name = "pysatlink.test_logger"

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.test_dir)

    def test_console_handler(self):
        logger = setup_logger(self.name, "DEBUG")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_file_handler(self):
        log_file = os.path.join(self.test_dir, "satlink.log")
        logger = setup_logger(self.name, "INFO", log_file=log_file, console=False)
        logger.info("link evaluated")
        logger.handlers[0].flush()
        with open(log_file, encoding='utf-8') as f:
            content = f.read()
        self.assertIn("INFO", content)
        self.assertIn("link evaluated", content)
        self.assertNotIn("\033[", content)

    def test_repeated_setup_replaces_handlers(self):
        setup_logger(self.name, "INFO")
        logger = setup_logger(self.name, "INFO")
        self.assertEqual(len(logger.handlers), 1)

    def test_trace_level(self):
        logger = setup_logger(self.name, "TRACE", console=False)
        self.assertEqual(logger.level, 5)
        with self.assertLogs(self.name, level=5) as captured:
            logger.trace("sweep step")
        self.assertIn("TRACE", captured.output[0])

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            setup_logger(self.name, "VERBOSE")
        with self.assertRaises(ValueError):
            level_value("loud")

    def test_get_logger(self):
        self.assertIs(get_logger(self.name), logging.getLogger(self.name))


class TestLogContext(unittest.TestCase):

    def test_level_restored(self):
        logger = logging.getLogger("pysatlink.test_context")
        logger.setLevel(logging.WARNING)
        with LogContext(logger, "debug") as inner:
            self.assertIs(inner, logger)
            self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logger.level, logging.WARNING)


class TestLoggerConfig(unittest.TestCase):

    def test_configure_from_dict(self):
        config = LoggerConfig()
        config.configure_from_dict({
            'default_level': 'WARNING',
            'console': False,
            'module_levels': {'pysatlink.link.classifier': 'DEBUG'},
        })
        self.assertEqual(config.default_level, 'WARNING')
        self.assertFalse(config.console)
        self.assertEqual(config.get_level_for_module('pysatlink.link.classifier'), 'DEBUG')
        self.assertEqual(config.get_level_for_module('pysatlink.io'), 'WARNING')
        self.assertEqual(logging.getLogger('pysatlink.link.classifier').level, logging.DEBUG)
        logging.getLogger('pysatlink.link.classifier').setLevel(logging.NOTSET)

    def test_reconfigure_drops_stale_module_levels(self):
        root = logging.getLogger('pysatlink')
        old_level = root.level
        try:
            setup_logger_from_config({
                'console': False,
                'module_levels': {'pysatlink.link.heading': 'DEBUG'},
            })
            self.assertEqual(logging.getLogger('pysatlink.link.heading').level, logging.DEBUG)

            setup_logger_from_config({
                'console': False,
                'module_levels': {'pysatlink.io.zone_reader': 'ERROR'},
            })
            self.assertEqual(logging.getLogger('pysatlink.link.heading').level, logging.NOTSET)
            self.assertEqual(logging.getLogger('pysatlink.io.zone_reader').level, logging.ERROR)
            self.assertEqual(logger_module.logger_config.module_levels,
                             {'pysatlink.io.zone_reader': 'ERROR'})
        finally:
            setup_logger_from_config({'console': False})
            logging.getLogger('pysatlink.io.zone_reader').setLevel(logging.NOTSET)
            root.setLevel(old_level)

    def test_unknown_keys(self):
        with self.assertRaises(ValueError):
            LoggerConfig().configure_from_dict({'level': 'INFO'})

    def test_invalid_level(self):
        with self.assertRaises(ValueError):
            LoggerConfig().configure_from_dict({'default_level': 'CHATTY'})


if __name__ == '__main__':
    unittest.main()
