"""Tests for the botcommander command-line entry point."""

import json

from botcommander.cli import main


def _final_state(out):
    return json.loads(out[out.index("{") :])


class TestCli:
    def test_grid_only(self, capsys):
        assert main(["--grid-only", "-l", "1"]) == 0
        out = capsys.readouterr().out
        assert "> . . . G" in out

    def test_runs_reference_solution_by_default(self, capsys):
        assert main(["-l", "3"]) == 0
        result = _final_state(capsys.readouterr().out)
        assert result["won"] is True
        assert result["outcome"] == "won"
        assert result["rating"] == "perfect"

    def test_trace_only(self, capsys):
        assert main(["--trace-only", "-l", "3"]) == 0
        out = capsys.readouterr().out
        assert "Trace" in out
        assert "turn_right" in out

    def test_program_file_that_crashes(self, tmp_path, capsys):
        program = tmp_path / "program.json"
        program.write_text('[{"type": "MOVE_BACK"}]')
        assert main([str(program), "-l", "1"]) == 2
        result = _final_state(capsys.readouterr().out)
        assert result["crashed"] is True
        assert result["rating"] == "failed"

    def test_unknown_level_is_an_error(self, capsys):
        assert main(["-l", "99"]) == 1
        assert "No level with id 99" in capsys.readouterr().err

    def test_strict_rejects_unavailable_block(self, tmp_path, capsys):
        program = tmp_path / "program.json"
        program.write_text('[{"type": "TURN_LEFT"}]')
        assert main([str(program), "-l", "1", "--strict"]) == 1
        assert "not available" in capsys.readouterr().err

    def test_malformed_program_is_an_error(self, tmp_path, capsys):
        program = tmp_path / "program.json"
        program.write_text('[{"type": "WARP"}]')
        assert main([str(program)]) == 1
        assert "error:" in capsys.readouterr().err

    def test_level_file(self, tmp_path, capsys):
        level = tmp_path / "level.json"
        level.write_text(
            '{"grid_size": 3, "start_pos": {"x": 0, "y": 0}, "start_dir": 2,'
            ' "entities": [{"id": "e1", "type": "end", "x": 0, "y": 2}]}'
        )
        program = tmp_path / "program.json"
        program.write_text(
            '[{"type": "REPEAT", "count": 2, "body": [{"type": "MOVE"}]}]'
        )
        assert main([str(program), "--level-file", str(level)]) == 0
        assert _final_state(capsys.readouterr().out)["y"] == 2
