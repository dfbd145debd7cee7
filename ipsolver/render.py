"""Plain-text rendering of interior-point iteration snapshots."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ipsolver.interior import InteriorPointIteration

NOT_AVAILABLE = "(Not available)"

_SECTIONS = (
    ("D = diag(x)", "d_matrix", True),
    ("A~ = A * D", "a_tilde_matrix", True),
    ("c~ = D * c", "c_tilde_vector", False),
    ("P = I - A~^T (A~ A~^T)^{-1} A~", "p_matrix", True),
    ("P c~", "cp_vector", False),
    ("Current x", "current_x", False),
)


def _format_cells(rows: Iterable[Iterable[float]]) -> list[list[str]]:
    return [[f"{value:.4f}" for value in row] for row in rows]


def _align(cells: list[list[str]]) -> str:
    width = max((len(cell) for row in cells for cell in row), default=0)
    return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)


def format_matrix(matrix) -> str:
    """Return the matrix as aligned rows of values with four decimals."""
    if matrix is None:
        return NOT_AVAILABLE
    values = np.atleast_2d(np.asarray(matrix, dtype=float))
    return _align(_format_cells(values))


def format_vector(vector) -> str:
    """Return the vector as a column, one value with four decimals per line."""
    if vector is None:
        return NOT_AVAILABLE
    values = np.ravel(np.asarray(vector, dtype=float))
    return _align(_format_cells([value] for value in values))


def render_iteration(index: int, iteration: InteriorPointIteration | None) -> str:
    """Return a titled text view of every quantity of one iteration."""
    blocks = [f"Iteration {index}"]
    for title, attribute, is_matrix in _SECTIONS:
        value = getattr(iteration, attribute) if iteration is not None else None
        body = format_matrix(value) if is_matrix else format_vector(value)
        blocks.append(f"{title}\n{body}")
    return "\n\n".join(blocks)