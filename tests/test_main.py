"""Tests for the subcommand dispatcher and the merge/scan CLIs."""

import subprocess
from unittest.mock import patch

import pytest


class TestMainDispatcher:
    def test_no_subcommand_shows_help(self, capsys):
        from vidmerge.main import main

        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code != 0

    def test_scan_subcommand_exists(self):
        from vidmerge.main import main

        with pytest.raises(SystemExit):
            main(["scan"])  # missing source_dir, but subcommand recognized

    def test_invalid_subcommand_errors(self):
        from vidmerge.main import main

        with pytest.raises(SystemExit) as exc_info:
            main(["nonexistent"])
        assert exc_info.value.code != 0

    def test_merge_dispatches(self, tmp_path):
        from vidmerge.main import main

        with patch("vidmerge.merge_cli.main") as merge_main:
            main(["merge", "--config", str(tmp_path / "c.json")])
        merge_main.assert_called_once_with(["--config", str(tmp_path / "c.json")])


class TestScanCli:
    def test_lists_videos_in_order(self, tmp_path, capsys):
        from vidmerge.scan_cli import main

        for name in ("b.mp4", "a.mov", "readme.txt"):
            (tmp_path / name).write_bytes(b"")
        main([str(tmp_path)])
        out = capsys.readouterr().out
        assert "Found 2 video files" in out
        assert out.index("a.mov") < out.index("b.mp4")
        assert "readme.txt" not in out

    def test_empty_directory(self, tmp_path, capsys):
        from vidmerge.scan_cli import main

        main([str(tmp_path)])
        assert "No video files found" in capsys.readouterr().out

    def test_missing_directory_exits(self, tmp_path, capsys):
        from vidmerge.scan_cli import main

        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestMergeCli:
    def test_missing_config_exits_with_error(self, tmp_path, capsys):
        from vidmerge.merge_cli import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_sources_exit_before_merge(self, write_config, tmp_path, capsys):
        from vidmerge.merge_cli import main

        path = write_config({"source": [str(tmp_path / "gone.mp4")]})
        with patch("vidmerge.merge_cli.merge") as merge:
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", str(path)])
        assert exc_info.value.code == 1
        merge.assert_not_called()
        assert "gone.mp4" in capsys.readouterr().err

    def test_output_override_and_gpu(self, write_config, base_config, tmp_path):
        from vidmerge.merge_cli import main

        path = write_config(base_config)
        with patch("vidmerge.merge_cli.merge") as merge:
            main(["--config", str(path), "--output", str(tmp_path / "x.mp4"), "--gpu"])

        config = merge.call_args.args[0]
        assert config["dest"]["output"] == str(tmp_path / "x.mp4")
        assert merge.call_args.kwargs["codec"] == "h264_nvenc"

    def test_ffmpeg_failure_prints_stderr_tail(self, write_config, base_config, capsys):
        from vidmerge.merge_cli import main

        err = subprocess.CalledProcessError(
            1, ["ffmpeg"], stderr=b"line one\nUnknown encoder 'h264_nvenc'\n",
        )
        path = write_config(base_config)
        with patch("vidmerge.merge_cli.merge", side_effect=err):
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", str(path)])
        assert exc_info.value.code == 1
        stderr = capsys.readouterr().err
        assert "exit code 1" in stderr
        assert "Unknown encoder" in stderr

    def test_validate_lists_inputs(self, make_video, write_config, base_config, capsys):
        from vidmerge.merge_cli import main

        make_video("a.mp4")
        make_video("b.mp4")
        path = write_config(base_config)
        with patch("vidmerge.merge_cli.merge") as merge:
            main(["--config", str(path), "--validate"])

        merge.assert_not_called()
        out = capsys.readouterr().out
        assert "Config valid: 2 videos" in out
        assert "All paths verified." in out
