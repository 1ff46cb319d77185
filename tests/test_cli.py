from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.cli import main, run
from pushswap.stacks import Stacks


def _apply(values, output):
    stacks = Stacks(reversed(values))
    for move in output.splitlines():
        getattr(stacks, move)()
    return stacks


def _check_sorts(values):
    output = run([str(v) for v in values])
    stacks = _apply(values, output)
    assert stacks.a == sorted(values, reverse=True)
    assert stacks.b == []


def test_sorted_input_gives_nothing():
    assert run(["1", "2", "3"]) == ""


def test_single_value_gives_nothing():
    assert run(["42"]) == ""


def test_small_inputs_are_sorted():
    _check_sorts([2, 1])
    _check_sorts([3, 1, 2])
    _check_sorts([5, 4, 3, 2, 1])


def test_larger_input_is_sorted():
    _check_sorts([(i * 7) % 31 - 15 for i in range(31)])


@settings(max_examples=50, deadline=None)
@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=12, unique=True))
def test_any_distinct_input_is_sorted(values):
    _check_sorts(values)


def test_main_prints_error_for_duplicates(capsys):
    assert main(["1", "1"]) == 0
    assert capsys.readouterr().out == "Error"


def test_main_prints_error_for_non_integer(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "Error"


def test_main_prints_nothing_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_moves(capsys):
    assert main(["3", "2", "1"]) == 0
    out = capsys.readouterr().out
    assert out == run(["3", "2", "1"])
    assert out.endswith("\n")