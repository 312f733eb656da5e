import io

import pytest

from lidcavity.cli import main, run
from lidcavity.config import Config


def _small(tmp_path, **kwargs):
    base = dict(nx=5, ny=5, n_iters=3, nit=2, output_freq=1,
                basename=str(tmp_path / "cav"))
    base.update(kwargs)
    return Config(**base)


def _step_lines(text):
    return [line for line in text.splitlines() if line.startswith("Step ")]


def test_run_reports_problem_size_and_completion(tmp_path):
    out = io.StringIO()
    run(_small(tmp_path, no_output=True), out)
    text = out.getvalue()
    assert text.splitlines()[0] == "Running problem size 2.000000 x 2.000000 on a 5 x 5 grid."
    assert "Simulation complete.\n" in text
    assert "Execution Summary:" in text
    assert "Total Time in solve_poissons:" in text


def test_run_step_lines_follow_frequency(tmp_path):
    out = io.StringIO()
    run(_small(tmp_path, no_output=True, n_iters=5, output_freq=2), out)
    steps = _step_lines(out.getvalue())
    # iterations 0, 2, 4 plus the closing line
    assert len(steps) == 4
    assert steps[0].startswith("Step        0, Time: ")
    assert steps[-1].startswith("Step        5, Time: ")


def test_run_time_advances_by_dt(tmp_path):
    config = _small(tmp_path, no_output=True, n_iters=2)
    out = io.StringIO()
    run(config, out)
    last = _step_lines(out.getvalue())[-1]
    assert f"Time: {2 * config.dt:14.8e}" in last
    assert f"(dt: {config.dt:14.8e})" in last


def test_run_returns_cavity_with_lid_applied(tmp_path):
    cavity = run(_small(tmp_path, no_output=True), io.StringIO())
    assert cavity.u[-1, :].tolist() == [1.0] * 5
    assert cavity.u[0, :].tolist() == [0.0] * 5
    assert cavity.timers.build_rhs >= 0.0


def test_run_writes_result_file(tmp_path):
    run(_small(tmp_path), io.StringIO())
    result = tmp_path / "cav.vtr"
    assert result.exists()
    assert result.read_text().startswith('<?xml version="1.0"?>\n')
    assert not (tmp_path / "cav-0.vtr").exists()


def test_run_writes_checkpoints_when_enabled(tmp_path):
    run(_small(tmp_path, enable_checkpoints=True), io.StringIO())
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["cav-0.vtr", "cav-1.vtr", "cav-2.vtr", "cav.vtr"]


def test_run_no_output_writes_nothing(tmp_path):
    run(_small(tmp_path, no_output=True, enable_checkpoints=True), io.StringIO())
    assert list(tmp_path.iterdir()) == []


def test_run_verbose_prints_options(tmp_path):
    out = io.StringIO()
    run(_small(tmp_path, no_output=True, verbose=True), out)
    assert "Started with the following options" in out.getvalue()


def test_run_survives_unwritable_output(tmp_path, capsys):
    config = _small(tmp_path, basename=str(tmp_path / "missing" / "cav"))
    out = io.StringIO()
    run(config, out)
    assert "Simulation complete." in out.getvalue()
    assert capsys.readouterr().err.startswith("Error:")


def test_main_help_returns_one(capsys):
    assert main(["-h"]) == 1
    assert "Options and arguments:" in capsys.readouterr().out


def test_main_bad_option_returns_one(capsys):
    assert main(["--bogus"]) == 1
    captured = capsys.readouterr()
    assert "Usage:" in captured.out


def test_main_runs_simulation(capsys):
    assert main(["-x", "5", "-n", "2", "-d"]) == 0
    text = capsys.readouterr().out
    assert "on a 5 x 5 grid." in text
    assert len(_step_lines(text)) == 2


def test_main_zero_frequency_fails():
    with pytest.raises(ZeroDivisionError):
        main(["-x", "5", "-n", "1", "-f", "0", "-d"])