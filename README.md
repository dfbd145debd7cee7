# ipsolver

A solver for linear programs that uses the affine-scaling interior-point method. You can inspect each
iteration on its own. Every step keeps these intermediate quantities:

- `D = diag(x)`, where each entry is raised to at least `1e-8`
- `Ã = A·D`
- `c̃ = D·c`
- the projection `P = I − Ãᵀ(ÃÃᵀ)⁻¹Ã`. A `1e-8` regularisation is added to `ÃÃᵀ` before it is inverted.
- the projected gradient `P·c̃`
- the updated point `x = D·(1 + t·P·c̃)`. The step factor is `t = α / v`, clamped to `[1e-3, 0.5]`. `v` is the largest magnitude among the negative entries of `P·c̃`.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Command line

```
ipsolver -c 3,2 -a "1,1<=4" -a "1,0<=3" --initial 1,1 --steps 5
```

Options:

- `-c`, `--objective`: objective coefficients, comma separated. Required. At most 10 variables are accepted.
- `-a`, `--constraint`: one constraint such as `"1,1<=4"`. The relation is one of `<=`, `>=` or `=`. Repeat the option for each constraint. At least one constraint is required. Each constraint needs exactly one coefficient per variable.
- `--minimize`: minimise rather than maximise.
- `--augmented`: treat the constraints as already in the form `A x = b`. No slack columns are added, and the relations are ignored.
- `--alpha`: step size, clamped to `[0, 1]`. Default `0.5`.
- `--initial`: initial point, one value per variable. Each value defaults to `1`.
- `--steps`: maximum number of iterations. Default `10`.
- `-v`, `--verbose`: log each step.

Each iteration is printed with its matrices and vectors, to four decimals. If the solver stops because no improving direction remains, or because `ÃÃᵀ` is singular, a `Stopped:` line gives the reason. The final point is printed last.

Put quotes around constraints so the shell does not read `<` or `>` as redirection.

## Library use

`ipsolver.model.InputForm` holds a problem. It defaults to 2 variables and 2 constraints, maximisation, `α = 0.5`, and an initial point of all ones. In auto-augment mode (the default), each `<=` or `>=` constraint gets a slack column. `>=` rows are negated first. Call `set_augmented(True)` if the model is already in `A x = b` form.

```python
from ipsolver.app import Session
from ipsolver.model import InputForm
from ipsolver.render import render_iteration

form = InputForm(max_variables=10)
form.set_objective_coeff(0, 3.0)
form.set_objective_coeff(1, 2.0)
form.set_constraint_coeff(0, 0, 1.0)
form.set_constraint_coeff(0, 1, 1.0)
form.set_rhs(0, 4.0)
form.set_constraint_coeff(1, 0, 1.0)
form.set_rhs(1, 3.0)

session = Session()
session.start(form.submit())
for _ in range(20):
    if session.next_step() is None:
        break

for index, iteration in enumerate(session.iterations):
    print(render_iteration(index, iteration))
```

`Session.start` takes the `ProblemInput` returned by `InputForm.submit()`. If the initial point is shorter than the number of columns, it is padded with ones, and the given values are raised to at least `1e-4`. For minimisation the objective is negated.

`Session.next_step` returns the new `InteriorPointIteration`. It returns `None` when no step was taken. Once the method has stopped, `session.done` is set and `session.last_error` holds the reason.

`ipsolver.render` has `format_matrix`, `format_vector` and `render_iteration`, which produce the plain-text views.

`ipsolver.interior.perform_interior_point_iteration` is the low-level step. It takes an `InteriorPointProblem`, updates that problem's `x_vector` in place, and returns an `InteriorPointIteration`.

It raises:

- `NoImprovementError` when the projected gradient has no negative component of magnitude at least `1e-8`.
- `SingularMatrixError` when `ÃÃᵀ` cannot be inverted.

Both are subclasses of `InteriorPointError`.

## What it does not do

- It has no interactive or graphical entry form. Problems come from command-line options or from `InputForm` in code.
- It does not check that the initial point is feasible (`A x = b`, `x > 0`).
- The only stopping test is the lack of an improving direction. It does not detect optimality by duality gap.