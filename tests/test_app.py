import numpy as np
import pytest

from ipsolver.app import Session, main
from ipsolver.interior import NoImprovementError
from ipsolver.model import ProblemInput


def _input(c=(1.0, 0.0), maximize=True, initial=(1.0, 1.0)):
    return ProblemInput(
        a=np.array([[1.0, 1.0]]),
        b=np.array([2.0]),
        c=np.array(c),
        alpha=0.5,
        initial=list(initial),
        maximize=maximize,
        augmented=True,
    )


def test_new_session_is_empty():
    session = Session()
    assert session.current_problem is None
    assert session.iterations == []
    assert session.done is False
    assert session.next_step() is None


def test_set_problem_size():
    session = Session()
    session.set_problem_size(3, 2)
    assert session.problem_size == (3, 2)


def test_minimize_negates_objective():
    session = Session()
    problem = session.start(_input(c=(1.0, -2.0), maximize=False))
    assert np.allclose(problem.c_vector, [-1.0, 2.0])
    assert session.maximize is False


def test_initial_point_padded_to_width():
    session = Session()
    problem = session.start(
        ProblemInput(
            a=np.array([[1.0, 1.0, 1.0]]),
            b=np.array([3.0]),
            c=np.array([1.0, 0.0, 0.0]),
            alpha=0.5,
            initial=[0.0, 2.0],
            maximize=True,
            augmented=False,
        )
    )
    assert np.allclose(problem.x_vector, [1e-4, 2.0, 1.0])


def test_step_keeps_feasibility_and_improves():
    session = Session()
    session.start(_input())
    iteration = session.next_step()
    assert iteration is not None
    assert len(session.iterations) == 1
    x = session.current_problem.x_vector
    assert np.allclose(x, iteration.current_x)
    assert np.isclose(x.sum(), 2.0, atol=1e-6)
    assert x[0] > 1.0


def test_zero_objective_marks_done():
    session = Session()
    session.start(_input(c=(0.0, 0.0)))
    assert session.next_step() is None
    assert session.done is True
    assert isinstance(session.last_error, NoImprovementError)
    assert session.next_step() is None
    assert session.iterations == []


def test_start_clears_previous_state():
    session = Session()
    session.start(_input(c=(0.0, 0.0)))
    session.next_step()
    session.start(_input())
    assert session.done is False
    assert session.iterations == []


def test_reset():
    session = Session()
    session.set_problem_size(2, 1)
    session.start(_input())
    session.next_step()
    session.reset()
    assert session.problem_size is None
    assert session.current_problem is None
    assert session.iterations == []


def test_set_initial_point():
    session = Session()
    session.start(_input())
    session.set_initial_point([1.5, 0.5])
    assert np.allclose(session.current_problem.x_vector, [1.5, 0.5])


def test_main_prints_iterations(capsys):
    code = main(["-c", "1,0", "-a", "1,1=2", "--augmented", "--steps", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Iteration 0" in out
    assert "Iteration 1" in out
    assert "Iteration 2" not in out
    assert "Final x:" in out


def test_main_auto_augment(capsys):
    code = main(["-c", "3,2", "-a", "1,1<=4", "-a", "1,0>=1", "--steps", "1"])
    out = capsys.readouterr().out
    assert code == 0
    final = out.split("Final x:")[1].split()
    assert len(final) == 4


def test_main_rejects_bad_constraint():
    with pytest.raises(SystemExit):
        main(["-c", "1,0", "-a", "1,1 ? 2"])


def test_main_rejects_wrong_coefficient_count():
    with pytest.raises(SystemExit):
        main(["-c", "1,0", "-a", "1,1,1<=2"])