import hashlib
import os
import tempfile
import unittest

from typer.testing import CliRunner

from pysha.cli import app


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_text_default_sha256(self):
        result = self.runner.invoke(app, ["abc"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), hashlib.sha256(b"abc").hexdigest())

    def test_text_sha1(self):
        result = self.runner.invoke(app, ["abc", "--algorithm", "SHA-1"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), hashlib.sha1(b"abc").hexdigest())

    def test_file(self):
        data = os.urandom(500)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "data.bin")
            with open(path, "wb") as f:
                f.write(data)
            result = self.runner.invoke(app, ["--file", path, "-a", "sha1"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), hashlib.sha1(data).hexdigest())

    def test_stdin(self):
        result = self.runner.invoke(app, ["--file", "-"], input="piped data")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), hashlib.sha256(b"piped data").hexdigest())

    def test_unsupported_algorithm(self):
        result = self.runner.invoke(app, ["abc", "-a", "sha384"])
        self.assertEqual(result.exit_code, 1)
        self.assertNotIn(hashlib.sha384(b"abc").hexdigest(), result.output)

    def test_needs_exactly_one_input(self):
        self.assertEqual(self.runner.invoke(app, []).exit_code, 1)


if __name__ == "__main__":
    unittest.main()
