import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

import main


class MainEntrypointTests(unittest.TestCase):
    def test_missing_config_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertLogs("interval_timer", level="ERROR"):
                code = main.main([str(Path(temp_dir) / "missing.toml")])

        self.assertEqual(1, code)

    def test_runs_session_to_completion(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text(
                textwrap.dedent(
                    """
                    [workout]
                    mode = "tabata"
                    prep = 1
                    work = 2
                    rest = 1
                    rounds = 2

                    [runtime]
                    log_level = "WARNING"
                    session_cues = false
                    tick_interval_seconds = 0.01
                    """
                ).strip(),
                encoding="utf-8",
            )

            with patch("main.setup_signal_handlers"):
                code = main.main([str(config_path)])

        self.assertEqual(0, code)


if __name__ == "__main__":
    unittest.main()
