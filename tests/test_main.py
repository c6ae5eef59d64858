import unittest
import sys
import os
import io
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_forge import main as cli

class TestCLI(unittest.TestCase):
    def test_list(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(["list"])
        self.assertEqual(code, 0)
        self.assertIn("aldous-broder", out.getvalue())
        self.assertIn("Recursive Division", out.getvalue())

    def test_headless_generate(self):
        for algo in ("eller", "random"):
            with self.subTest(algo=algo):
                code = cli.main(["generate", "--algo", algo, "--width", "6", "--height", "4", "--seed", "3"])
                self.assertEqual(code, 0)

    def test_seeded_random_algo_is_repeatable(self):
        picked = set()
        for _ in range(5):
            with self.assertLogs("maze_forge", level="INFO") as logs:
                code = cli.main(["generate", "--algo", "random", "--width", "4", "--height", "4", "--seed", "3"])
            self.assertEqual(code, 0)
            picked.update(line for line in logs.output if "Randomly picked algorithm" in line)
        self.assertEqual(len(picked), 1)

    def test_bad_dimensions_exit_code(self):
        with self.assertLogs("maze_forge", level="ERROR"):
            code = cli.main(["generate", "--width", "0"])
        self.assertEqual(code, 2)

    def test_bad_probability_exit_code(self):
        with self.assertLogs("maze_forge", level="ERROR"):
            code = cli.main(["generate", "--eller-down", "2"])
        self.assertEqual(code, 2)

    def test_unknown_algo_rejected_by_parser(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()):
                cli.build_parser().parse_args(["generate", "--algo", "nope"])

if __name__ == '__main__':
    unittest.main()
