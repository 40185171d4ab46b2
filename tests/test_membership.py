import pytest

from extset import InvalidArgument
from extset import extended_set as xs


def test_contains():
    weekend = xs.of('Sat', 'Sun')
    assert weekend.contains('Sat')
    assert not weekend.contains('Mon')
    assert 'Sun' in weekend
    assert 'Mon' not in weekend

    workdays = xs.complement_of('Sat', 'Sun')
    assert not workdays.contains('Sat')
    assert workdays.contains('Mon')
    assert 'Mon' in workdays
    assert 'Sun' not in workdays


def test_contains_trivial():
    assert 'Mon' not in xs.empty()
    assert 'Mon' in xs.full()


def test_contains_all():
    weekend = xs.of('Sat', 'Sun')
    assert weekend.contains_all(['Sat'])
    assert weekend.contains_all(['Sat', 'Sun'])
    assert not weekend.contains_all(['Sat', 'Mon'])

    not_monday = xs.complement_of('Mon')
    assert not_monday.contains_all(['Tue', 'Wed'])
    assert not not_monday.contains_all(['Mon', 'Tue'])

    assert xs.full().contains_all(['Mon', 'Tue'])
    assert not xs.empty().contains_all(['Mon'])


def test_contains_any():
    weekend = xs.of('Sat', 'Sun')
    assert weekend.contains_any(['Sat', 'Mon'])
    assert not weekend.contains_any(['Mon', 'Tue'])

    not_monday = xs.complement_of('Mon')
    assert not not_monday.contains_any(['Mon'])
    assert not_monday.contains_any(['Mon', 'Tue'])

    assert xs.full().contains_any(['Mon'])
    assert not xs.empty().contains_any(['Mon'])


@pytest.mark.parametrize('tested', [
    xs.empty(), xs.full(), xs.of('Mon'), xs.complement_of('Mon'),
])
def test_empty_input_is_vacuously_true(tested):
    assert tested.contains_all([])
    assert tested.contains_any([])


def test_reject_none():
    weekend = xs.of('Sat', 'Sun')
    with pytest.raises(InvalidArgument):
        weekend.contains(None)
    with pytest.raises(InvalidArgument):
        None in weekend
    with pytest.raises(InvalidArgument):
        weekend.contains_all(None)
    with pytest.raises(InvalidArgument):
        weekend.contains_all(['Sat', None])
    with pytest.raises(InvalidArgument):
        weekend.contains_any(None)
    with pytest.raises(InvalidArgument):
        xs.complement_of('Mon').contains_any([None])
