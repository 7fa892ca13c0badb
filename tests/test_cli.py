import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from monero_rpc import cli
from monero_rpc.http_client import HttpClient


class CliTests(unittest.TestCase):
    def test_build_facade_merges_config_and_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "monero.yaml"
            path.write_text(
                "wallet:\n  hostname: wallet.local\n  user: rpc\n  pass: hunter2\nclient:\n  timeout: 5\n",
                encoding="utf-8",
            )
            args = cli.build_parser().parse_args(["--config", str(path), "--port", "28082", "wallet", "get_balance"])
            settings = cli.load_config(args.config)

        facade = cli.build_facade(args, settings)

        self.assertEqual(facade.endpoint.hostname, "wallet.local")
        self.assertEqual(facade.endpoint.port, 28082)
        self.assertEqual(facade.endpoint.credentials, ("rpc", "hunter2"))
        self.assertEqual(facade.config.timeout, 5)

    def test_main_prints_result(self) -> None:
        out = io.StringIO()
        with mock.patch.object(HttpClient, "post_json", return_value={"result": {"count": 42}}) as post:
            with redirect_stdout(out):
                code = cli.main(["daemon", "get_block_count"])

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue()), {"count": 42})
        self.assertEqual(post.call_args[0][0], "http://127.0.0.1:18081/json_rpc")

    def test_main_extension_call(self) -> None:
        out = io.StringIO()
        with mock.patch.object(HttpClient, "post_json", return_value={"height": 7}) as post:
            with redirect_stdout(out):
                code = cli.main(["--extension", "daemon", "get_height"])

        self.assertEqual(code, 0)
        self.assertEqual(post.call_args[0][0], "http://127.0.0.1:18081/get_height")

    def test_missing_config_file_exits_with_error(self) -> None:
        err = io.StringIO()
        with tempfile.TemporaryDirectory() as tmp:
            with redirect_stderr(err):
                code = cli.main(["--config", str(Path(tmp) / "absent.yaml"), "daemon", "get_info"])
        self.assertEqual(code, 1)
        self.assertIn("error: cannot read", err.getvalue())

    def test_malformed_yaml_exits_with_error(self) -> None:
        err = io.StringIO()
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "monero.yaml"
            config.write_text("daemon: [unclosed\n", encoding="utf-8")
            nodes = Path(tmp) / "nodes.yaml"
            nodes.write_text("nodes:\n  - hostname: {bad\n", encoding="utf-8")
            with redirect_stderr(err):
                config_code = cli.main(["--config", str(config), "daemon", "get_info"])
                nodes_code = cli.main(["--autoconnect", "--nodes", str(nodes), "daemon", "get_info"])
        self.assertEqual((config_code, nodes_code), (1, 1))
        self.assertEqual(err.getvalue().count("is not valid YAML"), 2)

    def test_invalid_params_exit_with_error(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            code = cli.main(["daemon", "get_info", "--params", "{not json"])
        self.assertEqual(code, 1)
        self.assertIn("--params", err.getvalue())


if __name__ == "__main__":
    unittest.main()
