"""Affine-scaling interior-point iteration for problems of the form A x = b, x > 0."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)

_MIN_DIAGONAL = 1e-8
_REGULARIZATION = 1e-8
_MIN_STEP = 1e-8
_MAX_FACTOR = 0.5
_MIN_FACTOR = 1e-3


class InteriorPointError(Exception):
    """Base class for failures of an interior-point step."""


class NoImprovementError(InteriorPointError):
    """The projected gradient offers no direction of improvement."""

    def __init__(self, message: str = "no improving direction") -> None:
        super().__init__(message)


class NotFeasibleError(InteriorPointError):
    """The current point is not feasible."""

    def __init__(self, message: str = "point is not feasible") -> None:
        super().__init__(message)


class SingularMatrixError(InteriorPointError):
    """A matrix that must be inverted is singular."""


@dataclass(eq=False)
class InteriorPointIteration:
    """Snapshot of the quantities computed during one iteration."""

    d_matrix: np.ndarray
    a_tilde_matrix: np.ndarray
    c_tilde_vector: np.ndarray
    p_matrix: np.ndarray
    cp_vector: np.ndarray
    current_x: np.ndarray

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InteriorPointIteration):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, name), getattr(other, name))
            for name in (
                "d_matrix",
                "a_tilde_matrix",
                "c_tilde_vector",
                "p_matrix",
                "cp_vector",
                "current_x",
            )
        )


@dataclass
class InteriorPointProblem:
    """A problem in standard form together with the current interior point."""

    a_matrix: np.ndarray
    b_vector: np.ndarray
    c_vector: np.ndarray
    x_vector: np.ndarray
    alpha: float
    constraint_types: list[str] = field(default_factory=list)
    is_augmented: bool = False

    def __post_init__(self) -> None:
        self.a_matrix = np.asarray(self.a_matrix, dtype=float)
        self.b_vector = np.asarray(self.b_vector, dtype=float)
        self.c_vector = np.asarray(self.c_vector, dtype=float)
        self.x_vector = np.asarray(self.x_vector, dtype=float)


def create_d_matrix(x) -> np.ndarray:
    """Return diag(x), with each entry raised to at least 1e-8."""
    values = np.asarray(x, dtype=float)
    return np.diag(np.fmax(values, _MIN_DIAGONAL))


def calculate_a_tilde(a, d) -> np.ndarray:
    """Return A D."""
    return np.asarray(a, dtype=float) @ np.asarray(d, dtype=float)


def calculate_c_tilde(c, d) -> np.ndarray:
    """Return D c."""
    return np.asarray(d, dtype=float) @ np.asarray(c, dtype=float)


def calculate_p_matrix(a_tilde) -> np.ndarray:
    """Return the projection I - A~^T (A~ A~^T)^-1 A~ onto the null space of A~."""
    a_tilde = np.asarray(a_tilde, dtype=float)
    rows, cols = a_tilde.shape
    gram = a_tilde @ a_tilde.T + np.eye(rows) * _REGULARIZATION
    try:
        gram_inv = np.linalg.inv(gram)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("Cannot invert (A_tilde * A_tilde^T)") from exc
    return np.eye(cols) - a_tilde.T @ gram_inv @ a_tilde


def calculate_cp_vector(p, c_tilde) -> np.ndarray:
    """Return P c~."""
    return np.asarray(p, dtype=float) @ np.asarray(c_tilde, dtype=float)


def perform_interior_point_iteration(problem: InteriorPointProblem) -> InteriorPointIteration:
    """Advance the problem's point by one step and return the iteration snapshot.

    Raises NoImprovementError when the projected direction has no negative
    component large enough to bound the step.
    """
    logger.info("Iteration start: x = %s", problem.x_vector)

    d = create_d_matrix(problem.x_vector)
    a_tilde = calculate_a_tilde(problem.a_matrix, d)
    c_tilde = calculate_c_tilde(problem.c_vector, d)
    p = calculate_p_matrix(a_tilde)
    cp = calculate_cp_vector(p, c_tilde)

    negatives = -cp[cp < 0.0]
    v = float(negatives.max()) if negatives.size else 0.0
    if v < _MIN_STEP:
        logger.warning("Step size too small or no negative direction: v = %s", v)
        raise NoImprovementError()

    factor = max(min(problem.alpha / v, _MAX_FACTOR), _MIN_FACTOR)
    new_x_tilde = np.ones(problem.x_vector.shape[0]) + factor * cp
    new_x = d @ new_x_tilde

    problem.x_vector = new_x.copy()
    logger.info("Updated x: %s", new_x)

    return InteriorPointIteration(
        d_matrix=d,
        a_tilde_matrix=a_tilde,
        c_tilde_vector=c_tilde,
        p_matrix=p,
        cp_vector=cp,
        current_x=new_x,
    )