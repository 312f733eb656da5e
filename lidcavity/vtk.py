"""Output of the cavity state as VTK XML rectilinear-grid (.vtr) files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Union

from .solver import Cavity

PathLike = Union[str, "os.PathLike[str]"]


def checkpoint_filename(basename: str, iteration: int) -> str:
    """Return the checkpoint file name for an iteration."""
    return f"{basename}-{iteration}.vtr"


def result_filename(basename: str) -> str:
    """Return the final result file name."""
    return f"{basename}.vtr"


def _lines(cavity: Cavity, iters: int, t: float) -> Iterator[str]:
    config = cavity.config
    nx, ny = config.nx, config.ny
    extent = f"0 {nx - 1} 0 {ny - 1} 0 0"

    yield '<?xml version="1.0"?>\n'
    yield (
        '<VTKFile type="RectilinearGrid" version="0.1" '
        'byte_order="LittleEndian">\n'
    )
    yield f'<RectilinearGrid WholeExtent="{extent}">\n'
    yield "<FieldData>\n"
    yield (
        '<DataArray type="Float64" Name="TIME" NumberOfTuples="1" '
        'format="ascii">\n'
    )
    yield f"{t:.12e}\n"
    yield "</DataArray>\n"
    yield (
        '<DataArray type="Int32" Name="CYCLE" NumberOfTuples="1" '
        'format="ascii">\n'
    )
    yield f"{iters:d}\n"
    yield "</DataArray>\n"
    yield "</FieldData>\n"
    yield f'<Piece Extent="{extent}">\n'

    yield "<Coordinates>\n"
    yield (
        '<DataArray type="Float64" Name="X" format="ascii" '
        f'RangeMin="0" RangeMax="{config.X:f}">\n'
    )
    yield "".join(f"{value:f} " for value in cavity.x)
    yield "\n</DataArray>\n"
    yield (
        '<DataArray type="Float64" Name="Y" format="ascii" '
        f'RangeMin="0" RangeMax="{config.Y:f}">\n'
    )
    yield "".join(f"{value:f} " for value in cavity.y)
    yield "\n</DataArray>\n"
    yield '<DataArray type="Float64" Name="Z" format="ascii">\n'
    yield "0.0\n"
    yield "</DataArray>\n"
    yield "</Coordinates>\n"

    yield '<PointData Vectors="uv">\n'
    yield (
        '<DataArray type="Float64" Name="uv" NumberOfComponents="3" '
        'format="ascii">\n'
    )
    for u_row, v_row in zip(cavity.u, cavity.v):
        for u_val, v_val in zip(u_row, v_row):
            yield f"{u_val:.12e} {v_val:.12e} 0\n"
    yield "</DataArray>\n"
    yield "</PointData>\n"

    yield '<CellData Scalars="p">\n'
    yield '<DataArray type="Float64" Name="p" format="ascii">\n'
    for row in cavity.p[:-1, :-1]:
        yield "".join(f"{value:.12e} " for value in row) + "\n"
    yield "</DataArray>\n"
    yield "</CellData>\n"

    yield "</Piece>\n"
    yield "</RectilinearGrid>\n"
    yield "</VTKFile>\n"


def render_vtk(cavity: Cavity, iters: int, t: float) -> str:
    """Return the VTK document describing the cavity's current state."""
    return "".join(_lines(cavity, iters, t))


def write_vtk(path: PathLike, cavity: Cavity, iters: int, t: float) -> Path:
    """Write the cavity state to ``path``; raises OSError if it cannot be opened."""
    target = Path(path)
    with target.open("w", encoding="ascii") as handle:
        handle.writelines(_lines(cavity, iters, t))
    return target


def write_checkpoint(cavity: Cavity, iteration: int) -> Path:
    """Write a checkpoint file named after the iteration number."""
    path = checkpoint_filename(cavity.config.basename, iteration)
    return write_vtk(path, cavity, iteration, 0.0)


def write_result(cavity: Cavity) -> Path:
    """Write the final result file."""
    return write_vtk(result_filename(cavity.config.basename), cavity, 0, 0.0)