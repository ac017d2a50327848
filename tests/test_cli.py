import pytest

from intsort import cli
from intsort.sorter import cli as run_cli


class TestMain:

    def test_fixed_file_names(self, tmp_path, monkeypatch, sample_input):
        monkeypatch.chdir(tmp_path)
        assert cli.main() == 0
        assert (tmp_path / "output.txt").read_text(encoding="utf-8").splitlines() == [
            "[1, 2, 3, 4, 5]",
            "[1, 2, 2]",
        ]

    def test_missing_input_exits_normally(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main() == 0
        assert (tmp_path / "output.txt").read_text(encoding="utf-8") == ""
        assert "Error occurred while reading input file" in capsys.readouterr().out

    def test_ignores_command_line(self, tmp_path, monkeypatch, sample_input):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.argv", ["intsort", "-i", "other.txt"])
        assert cli.main() == 0
        assert (tmp_path / "output.txt").exists()


class TestRunCli:

    def test_paths_from_arguments(self, tmp_path):
        src = tmp_path / "lists.txt"
        dst = tmp_path / "sorted.txt"
        src.write_text("9 -1 4\n", encoding="utf-8")
        assert run_cli.run(["-i", str(src), "-o", str(dst), "--quiet"]) == 0
        assert dst.read_text(encoding="utf-8") == "[-1, 4, 9]\n"

    def test_config_file_with_cli_override(self, tmp_path):
        src = tmp_path / "lists.txt"
        src.write_text("3 2 1\n", encoding="utf-8")
        conf = tmp_path / "intsort.yaml"
        conf.write_text(
            f"paths:\n  input: {src}\n  output: {tmp_path / 'from_config.txt'}\n",
            encoding="utf-8",
        )
        dst = tmp_path / "from_cli.txt"
        assert run_cli.run(["--config", str(conf), "-o", str(dst), "--quiet"]) == 0
        assert dst.read_text(encoding="utf-8") == "[1, 2, 3]\n"
        assert not (tmp_path / "from_config.txt").exists()

    def test_missing_config(self, tmp_path, capsys):
        assert run_cli.run(["--config", str(tmp_path / "nope.yaml")]) == 2
        assert "Config error" in capsys.readouterr().out

    def test_bad_config(self, tmp_path):
        conf = tmp_path / "intsort.yaml"
        conf.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        assert run_cli.run(["--config", str(conf)]) == 2

    def test_bad_log_level_rejected_by_argparse(self):
        with pytest.raises(SystemExit) as exc:
            run_cli.run(["--log-level", "LOUD"])
        assert exc.value.code == 2

    def test_main_exits_with_run_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.argv", ["intsort-run", "--quiet"])
        with pytest.raises(SystemExit) as exc:
            run_cli.main()
        assert exc.value.code == 0

    def test_version_names_release_and_author(self, capsys):
        from intsort.__about__ import __author__, __version__

        with pytest.raises(SystemExit) as exc:
            run_cli.run(["--version"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert __version__ in out
        assert __author__ in out
