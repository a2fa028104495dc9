import io
import unittest
from contextlib import redirect_stdout

from connect_four_engine.logger import Logger, LogLevel


def captured(func, *args):
    out = io.StringIO()
    with redirect_stdout(out):
        func(*args)
    return out.getvalue()


class TestLogger(unittest.TestCase):
    def test_level_from_string(self):
        self.assertIs(Logger("debug").level, LogLevel.DEBUG)
        self.assertIs(Logger("VERBOSE").level, LogLevel.VERBOSE)
        self.assertIs(Logger().level, LogLevel.NONE)

    def test_levels_are_ordered(self):
        self.assertLess(LogLevel.NONE, LogLevel.INFO)
        self.assertLess(LogLevel.INFO, LogLevel.DEBUG)
        self.assertLess(LogLevel.DEBUG, LogLevel.VERBOSE)

    def test_info_level_gates_debug(self):
        log = Logger(LogLevel.INFO)
        self.assertEqual(captured(log.info, "hello"), "[INFO] hello\n")
        self.assertEqual(captured(log.debug, "hidden"), "")
        self.assertEqual(captured(log.verbose, "hidden"), "")

    def test_normal_always_prints(self):
        self.assertEqual(captured(Logger().normal, "a", "b"), "a b\n")

    def test_error_without_active_exception(self):
        self.assertEqual(captured(Logger().error, "oops"), "[ERROR] oops\n")

    def test_error_includes_active_traceback(self):
        log = Logger()
        try:
            raise ValueError("broken")
        except ValueError as e:
            output = captured(log.error, e)
        self.assertTrue(output.startswith("[ERROR] broken\n"))
        self.assertIn("Traceback", output)


if __name__ == "__main__":
    unittest.main()
