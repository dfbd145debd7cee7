import numpy as np
import pytest

from ipsolver.model import ConstraintSign, InputForm, ProblemInput


def test_defaults():
    form = InputForm()
    assert form.size == (2, 2)
    assert form.alpha == 0.5
    assert form.initial_feasible == [1.0, 1.0]
    assert form.maximization is True
    assert form.augmented_model is False
    assert form.constraint_signs == [ConstraintSign.LE, ConstraintSign.LE]


def test_set_variables_caps_and_resizes():
    form = InputForm(max_variables=4)
    assert form.set_variables(7) == (4, 2)
    assert len(form.objective_coeffs) == 4
    assert all(len(row) == 4 for row in form.constraint_coeffs)
    assert form.initial_feasible == [1.0] * 4


def test_set_constraints_resizes_rows():
    form = InputForm()
    form.set_constraint_coeff(0, 0, 3.0)
    assert form.set_constraints(3) == (2, 3)
    assert len(form.constraint_coeffs) == 3
    assert form.constraint_coeffs[0][0] == 3.0
    assert form.constraint_coeffs[2] == [0.0, 0.0]
    assert form.constraint_signs[2] is ConstraintSign.LE
    form.set_constraints(1)
    assert len(form.rhs_values) == 1


def test_out_of_range_updates_are_ignored():
    form = InputForm()
    assert form.set_objective_coeff(5, 1.0) is False
    assert form.set_constraint_coeff(0, 9, 1.0) is False
    assert form.set_rhs(9, 1.0) is False
    assert form.set_initial_point(9, 1.0) is False
    assert form.set_constraint_sign(9, ">=") is False
    assert form.objective_coeffs == [0.0, 0.0]


def test_unknown_sign_rejected():
    form = InputForm()
    with pytest.raises(ValueError):
        form.set_constraint_sign(0, "<")


def test_alpha_is_clamped():
    form = InputForm()
    assert form.set_alpha(2.0) == 1.0
    assert form.set_alpha(-1.0) == 0.0
    assert form.set_alpha(0.3) == 0.3


def test_toggle_optimization():
    form = InputForm()
    assert form.toggle_optimization() is False
    assert form.toggle_optimization() is True


def _filled_form():
    form = InputForm()
    form.set_objective_coeff(0, 3.0)
    form.set_objective_coeff(1, 4.0)
    form.set_constraint_coeff(0, 0, 1.0)
    form.set_constraint_coeff(0, 1, 2.0)
    form.set_constraint_coeff(1, 0, 3.0)
    form.set_constraint_coeff(1, 1, 4.0)
    form.set_rhs(0, 5.0)
    form.set_rhs(1, 6.0)
    return form


def test_auto_augment_adds_slacks_and_negates_ge_rows():
    form = _filled_form()
    form.set_constraint_sign(1, ">=")
    a, b, c = form.matrix_form()
    assert np.array_equal(a, [[1.0, 2.0, 1.0, 0.0], [-3.0, -4.0, 0.0, 1.0]])
    assert np.array_equal(b, [5.0, -6.0])
    assert np.array_equal(c, [3.0, 4.0, 0.0, 0.0])


def test_equality_rows_get_no_slack():
    form = _filled_form()
    form.set_constraint_sign(0, "=")
    a, b, c = form.matrix_form()
    assert a.shape == (2, 3)
    assert np.array_equal(a[0], [1.0, 2.0, 0.0])
    assert np.array_equal(a[1, 2:], [1.0])
    assert np.array_equal(b, [5.0, 6.0])
    assert c.shape == (3,)


def test_augmented_mode_uses_coefficients_directly():
    form = _filled_form()
    form.set_augmented(True)
    form.set_constraint_sign(1, ">=")
    a, b, c = form.matrix_form()
    assert np.array_equal(a, form.constraint_coeffs)
    assert np.array_equal(b, form.rhs_values)
    assert np.array_equal(c, form.objective_coeffs)


def test_submit_carries_settings():
    form = _filled_form()
    form.set_alpha(0.7)
    form.toggle_optimization()
    form.set_initial_point(1, 2.5)
    result = form.submit()
    assert isinstance(result, ProblemInput)
    assert result.alpha == 0.7
    assert result.maximize is False
    assert result.augmented is False
    assert result.initial == [1.0, 2.5]
    a, b, c = form.matrix_form()
    assert np.array_equal(result.a, a)
    assert np.array_equal(result.b, b)
    assert np.array_equal(result.c, c)