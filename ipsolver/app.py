"""Solver session and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import re
import sys

import numpy as np

from ipsolver.interior import (
    InteriorPointError,
    InteriorPointIteration,
    InteriorPointProblem,
    NoImprovementError,
    perform_interior_point_iteration,
)
from ipsolver.model import InputForm, ProblemInput
from ipsolver.render import format_vector, render_iteration

logger = logging.getLogger(__name__)

_MIN_INITIAL = 1e-4


class Session:
    """A running interior-point solve that is advanced one step at a time."""

    def __init__(self) -> None:
        self.problem_size: tuple[int, int] | None = None
        self.current_problem: InteriorPointProblem | None = None
        self.iterations: list[InteriorPointIteration] = []
        self.maximize = True
        self.done = False
        self.last_error: InteriorPointError | None = None

    def set_problem_size(self, variables: int, constraints: int) -> None:
        logger.info(
            "Problem size changed: %d variables, %d constraints", variables, constraints
        )
        self.problem_size = (variables, constraints)

    def start(self, problem_input: ProblemInput) -> InteriorPointProblem:
        """Begin a new solve from submitted input and return the problem."""
        a = np.asarray(problem_input.a, dtype=float)
        width = a.shape[1]
        initial = list(problem_input.initial)
        if len(initial) == width:
            x = np.array(initial, dtype=float)
        else:
            x = np.ones(width)
            given = np.array(initial[:width], dtype=float)
            x[: given.size] = np.fmax(given, _MIN_INITIAL)

        sign = 1.0 if problem_input.maximize else -1.0
        self.current_problem = InteriorPointProblem(
            a_matrix=a,
            b_vector=problem_input.b,
            c_vector=np.asarray(problem_input.c, dtype=float) * sign,
            x_vector=x,
            alpha=problem_input.alpha,
        )
        self.iterations.clear()
        self.done = False
        self.last_error = None
        self.maximize = problem_input.maximize
        return self.current_problem

    def next_step(self) -> InteriorPointIteration | None:
        """Perform one iteration; return it, or None if no step was taken."""
        problem = self.current_problem
        if problem is None:
            return None
        if self.done:
            logger.info("Solver is done; no further steps.")
            return None

        logger.info("Performing next step with current x = %s", problem.x_vector)
        try:
            iteration = perform_interior_point_iteration(problem)
        except NoImprovementError as exc:
            logger.info("No improvement; probably at optimum.")
            self.done = True
            self.last_error = exc
            return None
        except InteriorPointError as exc:
            logger.error("Interior point iteration error: %s", exc)
            self.done = True
            self.last_error = exc
            return None

        self.iterations.append(iteration)
        return iteration

    def reset(self) -> None:
        logger.info("Session reset.")
        self.problem_size = None
        self.current_problem = None
        self.iterations.clear()
        self.done = False
        self.last_error = None

    def set_initial_point(self, x) -> None:
        """Replace the current point of a running problem."""
        logger.info("Initial point set to %s", x)
        if self.current_problem is not None:
            self.current_problem.x_vector = np.asarray(x, dtype=float)


_CONSTRAINT = re.compile(r"\s*(.+?)\s*(<=|>=|=)\s*(\S+)\s*")


def _floats(text: str) -> list[float]:
    return [float(part) for part in text.split(",")]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipsolver",
        description="Step through the affine-scaling interior-point method.",
    )
    parser.add_argument(
        "-c", "--objective", required=True, help="objective coefficients, e.g. 3,2"
    )
    parser.add_argument(
        "-a",
        "--constraint",
        action="append",
        default=[],
        help="constraint such as '1,1<=4' (repeatable)",
    )
    parser.add_argument("--minimize", action="store_true", help="minimise instead of maximise")
    parser.add_argument(
        "--augmented",
        action="store_true",
        help="constraints are already in the form A x = b",
    )
    parser.add_argument("--alpha", type=float, default=0.5, help="step size in [0, 1]")
    parser.add_argument("--initial", help="initial interior point, e.g. 1,1")
    parser.add_argument("--steps", type=int, default=10, help="maximum number of steps")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each step")
    return parser


def _form_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> InputForm:
    try:
        objective = _floats(args.objective)
    except ValueError:
        parser.error(f"invalid objective: {args.objective!r}")
    form = InputForm()
    n = len(objective)
    if form.set_variables(n)[0] != n:
        parser.error(f"at most {form.max_variables} variables are supported")
    if not args.constraint:
        parser.error("at least one constraint is required")
    form.set_constraints(len(args.constraint))

    for j, value in enumerate(objective):
        form.set_objective_coeff(j, value)

    for i, text in enumerate(args.constraint):
        match = _CONSTRAINT.fullmatch(text)
        if match is None:
            parser.error(f"invalid constraint: {text!r}")
        coeffs_text, sign, rhs_text = match.groups()
        try:
            coeffs = _floats(coeffs_text)
            rhs = float(rhs_text)
        except ValueError:
            parser.error(f"invalid constraint: {text!r}")
        if len(coeffs) != n:
            parser.error(f"constraint {text!r} needs {n} coefficients")
        for j, value in enumerate(coeffs):
            form.set_constraint_coeff(i, j, value)
        form.set_constraint_sign(i, sign)
        form.set_rhs(i, rhs)

    if args.initial is not None:
        try:
            initial = _floats(args.initial)
        except ValueError:
            parser.error(f"invalid initial point: {args.initial!r}")
        if len(initial) != n:
            parser.error(f"initial point needs {n} values")
        for index, value in enumerate(initial):
            form.set_initial_point(index, value)

    if args.minimize:
        form.toggle_optimization()
    form.set_alpha(args.alpha)
    form.set_augmented(args.augmented)
    return form


def main(argv=None) -> int:
    """Run the solver from the command line and print each iteration."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)

    form = _form_from_args(parser, args)
    session = Session()
    session.set_problem_size(*form.size)
    session.start(form.submit())

    for _ in range(max(args.steps, 0)):
        iteration = session.next_step()
        if iteration is None:
            break
        print(render_iteration(len(session.iterations) - 1, iteration))
        print()

    if session.done:
        print(f"Stopped: {session.last_error}")
    print("Final x:")
    print(format_vector(session.current_problem.x_vector))
    return 0


if __name__ == "__main__":
    sys.exit(main())