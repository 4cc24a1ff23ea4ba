import pytest

from unrecurse import Runner
from unrecurse.samples.parity import Parity, ParityKind, ParityQuery, ParityState, check_even, check_odd


def is_even_reference(value: int) -> bool:
    return value % 2 == 0


@pytest.fixture(scope="module")
def parity() -> Parity:
    return Parity()


def test_even_matches_reference(parity):
    for value in range(1000):
        assert parity.run(check_even(value)) == is_even_reference(value)


def test_odd_matches_reference(parity):
    for value in range(1000):
        assert parity.run(check_odd(value)) == (value % 2 == 1)


def test_never_grows_past_root_frame(parity):
    runner = Runner(parity)
    for value in (0, 1, 999, 50_000):
        report = runner.run_with_report(check_even(value))
        assert report.stats.max_stack_depth == 1
        assert report.stats.calls == 0
        assert report.stats.continues == value


def test_initialize_builds_mutable_copy(parity):
    query = check_odd(5)
    state, context = parity.initialize(query)
    assert state == ParityState(ParityKind.ODD, 5)
    assert context is None


def test_kind_flips():
    assert ParityKind.EVEN.flipped is ParityKind.ODD
    assert ParityKind.ODD.flipped is ParityKind.EVEN


def test_negative_query_rejected():
    with pytest.raises(ValueError):
        ParityQuery(ParityKind.EVEN, -1)


@pytest.mark.parametrize("kind", list(ParityKind))
def test_tuple_input_matches_query_input(parity, kind):
    for value in range(1000):
        assert parity.run((kind, value)) == parity.run(ParityQuery(kind, value))


def test_tuple_input_matches_reference(parity):
    for value in range(1000):
        assert parity.run((ParityKind.EVEN, value)) == is_even_reference(value)
        assert parity.run((ParityKind.ODD, value)) == (value % 2 == 1)


def test_negative_tuple_input_rejected(parity):
    with pytest.raises(ValueError):
        parity.initialize((ParityKind.ODD, -3))
