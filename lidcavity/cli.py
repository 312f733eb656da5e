"""Command-line entry point that drives a lid-driven cavity simulation."""

from __future__ import annotations

import os
import sys
import time
from typing import Optional, Sequence, TextIO

from .config import Config, HelpRequested, UsageError, format_help, format_options, parse_args
from .solver import Cavity
from .vtk import write_checkpoint, write_result


def _report_write_error(exc: OSError) -> None:
    reason = exc.strerror or str(exc)
    print(f"Error: {reason}", file=sys.stderr)


def _step_line(iters: int, t: float, dt: float) -> str:
    return f"Step {iters:8d}, Time: {t:14.8e} (dt: {dt:14.8e})\n"


def run(config: Config, out: TextIO) -> Cavity:
    """Run the full simulation described by ``config``, reporting progress to ``out``.

    Returns the cavity in its final state.
    """
    program_start = time.perf_counter()

    out.write(
        f"Running problem size {config.X:f} x {config.Y:f} "
        f"on a {config.nx:d} x {config.ny:d} grid.\n"
    )
    if config.verbose:
        out.write(format_options(config))

    cavity = Cavity(config)
    dt = cavity.dt
    t = 0.0

    for iters in range(config.n_iters):
        cavity.step()
        if iters % config.output_freq == 0:
            out.write(_step_line(iters, t, dt))
            if not config.no_output and config.enable_checkpoints:
                try:
                    write_checkpoint(cavity, iters)
                except OSError as exc:
                    _report_write_error(exc)
        t += dt

    out.write(_step_line(max(config.n_iters, 0), t, dt))
    out.write("Simulation complete.\n")

    if not config.no_output:
        try:
            write_result(cavity)
        except OSError as exc:
            _report_write_error(exc)

    elapsed = time.perf_counter() - program_start
    timers = cavity.timers
    out.write("\nExecution Summary:\n")
    out.write(f"Total Program Time: {elapsed:f} seconds\n")
    out.write(f"Total Time in build_rhs: {timers.build_rhs:f} seconds\n")
    out.write(f"Total Time in solve_poissons: {timers.solve_poissons:f} seconds\n")
    out.write(f"Total Time in update_velocities: {timers.update_velocities:f} seconds\n")
    out.write(f"Total Time in apply_boundary: {timers.apply_boundary:f} seconds\n")
    return cavity


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, run the simulation and return the exit status."""
    progname = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "lid-cavity"
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_args(argv)
    except HelpRequested:
        sys.stdout.write(format_help(progname))
        return 1
    except UsageError as exc:
        print(f"{progname}: {exc}", file=sys.stderr)
        sys.stdout.write(format_help(progname))
        return 1

    run(config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())