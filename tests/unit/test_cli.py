"""Unit tests for the command-line entry point."""

import logging

import pytest

from moversim import cli


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        config = cli.config_from_args(args)
        assert config.width == 600.0
        assert config.n_ticks == 10000
        output = cli.output_from_args(args)
        assert output.output_every == 1
        assert output.draw is False
        assert args.seed is None
        assert args.cpuprofile is None

    def test_overrides(self):
        args = cli.build_parser().parse_args(
            ["--width", "300", "--n-ticks", "5", "--seed", "3", "--draw", "--mutation-angle", "0.2"]
        )
        config = cli.config_from_args(args)
        assert config.width == 300.0
        assert config.n_ticks == 5
        assert config.mutation_angle == 0.2
        assert args.seed == 3
        assert cli.output_from_args(args).draw is True

    def test_invalid_config_raises(self):
        args = cli.build_parser().parse_args(["--core-radius", "0"])
        with pytest.raises(ValueError):
            cli.config_from_args(args)

    def test_invalid_output_raises(self):
        args = cli.build_parser().parse_args(["--output-every", "0"])
        with pytest.raises(ValueError):
            cli.output_from_args(args)


class TestMain:
    """Tests for full CLI runs."""

    def test_normal_run_exits_zero(self, tmp_path):
        code = cli.main(["--n-ticks", "3", "--seed", "1", "--snapshot", "--out-dir", str(tmp_path)])
        assert code == 0
        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == ["snapshot_00000.tsv", "snapshot_00001.tsv", "snapshot_00002.tsv"]

    def test_output_cadence(self, tmp_path):
        code = cli.main([
            "--n-ticks", "5", "--seed", "1", "--snapshot", "--draw",
            "--output-every", "2", "--out-dir", str(tmp_path),
        ])
        assert code == 0
        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == [
            "out_00000.png", "out_00002.png", "out_00004.png",
            "snapshot_00000.tsv", "snapshot_00002.tsv", "snapshot_00004.tsv",
        ]

    def test_cpuprofile_written(self, tmp_path):
        profile = tmp_path / "cpu.prof"
        code = cli.main(["--n-ticks", "2", "--seed", "1", "--cpuprofile", str(profile),
                         "--out-dir", str(tmp_path)])
        assert code == 0
        assert profile.exists()
        assert profile.stat().st_size > 0

    def test_invalid_config_exits_two(self, tmp_path):
        assert cli.main(["--width", "-1", "--out-dir", str(tmp_path)]) == 2

    def test_invalid_output_exits_two(self, tmp_path):
        assert cli.main(["--output-every", "0", "--out-dir", str(tmp_path)]) == 2

    def test_ambiguous_collision_exits_one(self, tmp_path, caplog):
        # In a 100x100 world with r=25 the two founders share a limb site.
        # With zero initial speed both close in at 0, an exact tie.
        argv = [
            "--width", "100", "--height", "100", "--core-radius", "25",
            "--initial-speed", "0", "--n-ticks", "1", "--seed", "1",
            "--out-dir", str(tmp_path),
        ]
        with caplog.at_level(logging.CRITICAL, logger="moversim"):
            code = cli.main(argv)

        assert code == 1
        assert any("equal parallel speeds" in r.getMessage() for r in caplog.records)
