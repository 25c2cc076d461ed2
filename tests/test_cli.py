"""End-to-end tests for the command line."""

import pytest
import yaml

from asaxref.cli import build_parser, main


class TestArguments:
    def test_defaults_left_unset(self):
        args = build_parser().parse_args(["cfg.txt"])
        assert args.report is None
        assert args.format is None
        assert not args.verbose

    def test_rejects_unknown_report(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["cfg.txt", "-r", "everything"])


class TestMain:
    def test_summary_table(self, sample_file, capsys):
        main([str(sample_file)])
        out = capsys.readouterr().out
        assert "summary" in out
        assert "edge-fw01" in out

    def test_reachability_csv_to_file(self, sample_file, tmp_path):
        out_file = tmp_path / "reports" / "reach.csv"
        main([str(sample_file), "-r", "reachability", "-f", "csv", "-o", str(out_file)])
        lines = out_file.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("name,real_address,public_address")
        assert len(lines) == 4

    def test_filters_applied(self, sample_file, capsys):
        main([str(sample_file), "-r", "reachability", "-f", "yaml", "--category", "direct-ip"])
        data = yaml.safe_load(capsys.readouterr().out)
        assert [r["name"] for r in data["rows"]] == ["Mail02"]

    def test_explicit_acl(self, sample_file, capsys):
        main([str(sample_file), "-r", "reachability", "-f", "yaml", "--acl", "no_such_acl"])
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["rows"] == []

    def test_options_file(self, sample_file, tmp_path, capsys):
        options = tmp_path / "options.yaml"
        options.write_text("report: vpn\nformat: yaml\n", encoding="utf-8")
        main([str(sample_file), "--options", str(options)])
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["report"] == "vpn"
        assert len(data["rows"]) == 2

    def test_flags_override_options_file(self, sample_file, tmp_path, capsys):
        options = tmp_path / "options.yaml"
        options.write_text("report: vpn\nformat: yaml\n", encoding="utf-8")
        main([str(sample_file), "--options", str(options), "-r", "nat"])
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["report"] == "nat"

    def test_write_options_without_input(self, tmp_path, capsys):
        target = tmp_path / "opts.yaml"
        main(["--write-options", str(target), "-r", "selectors"])
        assert yaml.safe_load(target.read_text(encoding="utf-8"))["report"] == "selectors"
        assert capsys.readouterr().out == ""

    def test_bad_options_file(self, sample_file, tmp_path):
        options = tmp_path / "options.yaml"
        options.write_text("colour: blue\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(sample_file), "--options", str(options)])
        assert exc.value.code == 1

    def test_missing_options_file(self, sample_file, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(sample_file), "--options", str(tmp_path / "nope.yaml")])
        assert exc.value.code == 1

    def test_missing_input(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.txt")])
        assert exc.value.code == 1

    def test_no_input_at_all(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2
