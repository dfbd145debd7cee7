"""Editable description of a linear program and its conversion to standard form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np


class ConstraintSign(str, Enum):
    """Relation between a constraint's left-hand side and its right-hand side."""

    LE = "<="
    EQ = "="
    GE = ">="

    @property
    def needs_slack(self) -> bool:
        return self is not ConstraintSign.EQ


@dataclass
class ProblemInput:
    """Everything needed to start the solver, as submitted from the form."""

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    alpha: float
    initial: list[float]
    maximize: bool
    augmented: bool


def _resize(values: list, size: int, fill) -> None:
    if size < len(values):
        del values[size:]
    else:
        values.extend(fill() if callable(fill) else fill for _ in range(size - len(values)))


class InputForm:
    """State of the problem entry form: sizes, coefficients and solver settings."""

    def __init__(self, max_variables: int = 10) -> None:
        self.max_variables = max_variables
        self.variables = 2
        self.constraints = 2
        self.objective_coeffs: list[float] = [0.0] * self.variables
        self.constraint_coeffs: list[list[float]] = [
            [0.0] * self.variables for _ in range(self.constraints)
        ]
        self.constraint_signs: list[ConstraintSign] = [ConstraintSign.LE] * self.constraints
        self.rhs_values: list[float] = [0.0] * self.constraints
        self.maximization = True
        self.alpha = 0.5
        self.initial_feasible: list[float] = [1.0] * self.variables
        self.augmented_model = False

    @property
    def size(self) -> tuple[int, int]:
        return self.variables, self.constraints

    def _resize(self) -> None:
        _resize(self.objective_coeffs, self.variables, 0.0)
        _resize(self.constraint_coeffs, self.constraints, lambda: [0.0] * self.variables)
        for row in self.constraint_coeffs:
            _resize(row, self.variables, 0.0)
        _resize(self.constraint_signs, self.constraints, ConstraintSign.LE)
        _resize(self.rhs_values, self.constraints, 0.0)
        _resize(self.initial_feasible, self.variables, 1.0)

    def set_variables(self, count: int) -> tuple[int, int]:
        """Set the number of variables (capped at max_variables); return the new size."""
        self.variables = min(count, self.max_variables)
        self._resize()
        return self.size

    def set_constraints(self, count: int) -> tuple[int, int]:
        """Set the number of constraints; return the new size."""
        self.constraints = count
        self._resize()
        return self.size

    def set_objective_coeff(self, j: int, value: float) -> bool:
        if 0 <= j < len(self.objective_coeffs):
            self.objective_coeffs[j] = value
            return True
        return False

    def set_constraint_coeff(self, i: int, j: int, value: float) -> bool:
        if 0 <= i < len(self.constraint_coeffs) and 0 <= j < len(self.constraint_coeffs[i]):
            self.constraint_coeffs[i][j] = value
            return True
        return False

    def set_rhs(self, i: int, value: float) -> bool:
        if 0 <= i < len(self.rhs_values):
            self.rhs_values[i] = value
            return True
        return False

    def set_constraint_sign(self, i: int, sign) -> bool:
        """Set a constraint's sign; an unknown sign raises ValueError."""
        parsed = ConstraintSign(sign)
        if 0 <= i < len(self.constraint_signs):
            self.constraint_signs[i] = parsed
            return True
        return False

    def toggle_optimization(self) -> bool:
        """Switch between maximisation and minimisation; return the new setting."""
        self.maximization = not self.maximization
        return self.maximization

    def set_alpha(self, value: float) -> float:
        """Set the step size, clamped to [0, 1]; return the stored value."""
        self.alpha = 0.0 if math.isnan(value) else min(max(value, 0.0), 1.0)
        return self.alpha

    def set_initial_point(self, index: int, value: float) -> bool:
        if 0 <= index < len(self.initial_feasible):
            self.initial_feasible[index] = value
            return True
        return False

    def set_augmented(self, value: bool) -> None:
        self.augmented_model = bool(value)

    def matrix_form(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (A, b, c) of the standard form A x = b.

        In auto-augment mode every inequality gets a slack column; ">=" rows are
        negated first so that their slack enters with coefficient +1.
        """
        m, n = self.constraints, self.variables
        if self.augmented_model:
            a = np.array(
                [row[:n] for row in self.constraint_coeffs[:m]], dtype=float
            ).reshape(m, n)
            b = np.array(self.rhs_values[:m], dtype=float)
            c = np.array(self.objective_coeffs, dtype=float)
            return a, b, c

        signs = self.constraint_signs[:m]
        slack_total = sum(sign.needs_slack for sign in signs)
        width = n + slack_total
        a = np.zeros((m, width))
        b = np.zeros(m)
        slack_column = n
        for i, (sign, row, rhs) in enumerate(zip(signs, self.constraint_coeffs, self.rhs_values)):
            multiplier = -1.0 if sign is ConstraintSign.GE else 1.0
            a[i, :n] = [multiplier * value for value in row[:n]]
            if sign.needs_slack:
                a[i, slack_column] = 1.0
                slack_column += 1
            b[i] = multiplier * rhs

        c = np.zeros(width)
        c[: len(self.objective_coeffs)] = self.objective_coeffs[:width]
        return a, b, c

    def submit(self) -> ProblemInput:
        """Build the solver input from the current form state."""
        a, b, c = self.matrix_form()
        return ProblemInput(
            a=a,
            b=b,
            c=c,
            alpha=self.alpha,
            initial=list(self.initial_feasible),
            maximize=self.maximization,
            augmented=self.augmented_model,
        )