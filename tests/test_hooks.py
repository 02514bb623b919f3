import tempfile
import unittest
from unittest.mock import MagicMock, call, patch

from svgicons.errors import HookError
from svgicons.hooks import run_hooks


class TestRunHooks(unittest.TestCase):
    @patch("svgicons.hooks.subprocess.run")
    def test_runs_in_order(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        run_hooks(["echo one", "echo two"], "/project")
        self.assertEqual(
            mock_run.call_args_list,
            [
                call("echo one", shell=True, cwd="/project", check=False),
                call("echo two", shell=True, cwd="/project", check=False),
            ],
        )

    @patch("svgicons.hooks.subprocess.run")
    def test_failure_stops_sequence(self, mock_run):
        mock_run.return_value = MagicMock(returncode=2)
        with self.assertRaises(HookError) as ctx:
            run_hooks(["false", "echo never"], "/project")
        self.assertIn("exited with code 2", str(ctx.exception))
        self.assertEqual(mock_run.call_count, 1)

    @patch("svgicons.hooks.subprocess.run", side_effect=OSError("no shell"))
    def test_start_failure(self, mock_run):
        with self.assertRaises(HookError):
            run_hooks(["echo"], "/project")

    def test_no_hooks(self):
        run_hooks([], "/project")

    def test_real_shell(self):
        """Commands run through the shell in the given directory."""
        with tempfile.TemporaryDirectory() as tmp:
            run_hooks(["echo hi > out.txt"], tmp)
            with open(f"{tmp}/out.txt") as fh:
                self.assertEqual(fh.read().strip(), "hi")


if __name__ == '__main__':
    unittest.main()
