import pytest

from sage.all import CartanType

from basis_lie_highest_weight.birational_sequence import (BirationalSequence,
                                                          operators_asc_height,
                                                          operators_lusztig)
from basis_lie_highest_weight.monomial_ordering import (MonomialOrdering,
                                                        MONOMIAL_ORDERINGS,
                                                        WEIGHTED_ORDERINGS)


@pytest.fixture
def seq():
    return BirationalSequence(operators_asc_height(CartanType(['A', 2])))


@pytest.mark.parametrize("name", MONOMIAL_ORDERINGS)
def test_all_orderings_are_total(seq, name):
    ordering = MonomialOrdering(name, seq)
    x1, x2, x3 = ordering.ring().gens()
    monomials = [x1 * x2, x3, x1, x2**2, x3**2]
    ordered = ordering.sorted(monomials)
    assert sorted(ordered, key=str) == sorted(monomials, key=str)
    for m1, m2 in zip(ordered, ordered[1:]):
        assert ordering.compare(m1, m2) == -1
        assert ordering.compare(m2, m1) == 1
    assert ordering.compare(x1, x1) == 0
    assert ordering.name() == name
    assert (ordering.weights() is None) == (name not in WEIGHTED_ORDERINGS)


def test_degrevlex(seq):
    ordering = MonomialOrdering('degrevlex', seq)
    x1, x2, x3 = ordering.ring().gens()
    one = ordering.ring().one()
    assert ordering.sorted([x1 * x2, x3**2, x1, x3, one]) == [one, x3, x1, x3**2, x1 * x2]


def test_lex_and_invlex(seq):
    lex = MonomialOrdering('lex', seq)
    x1, x2, x3 = lex.ring().gens()
    assert lex.sorted([x1, x2**5, x3]) == [x3, x2**5, x1]
    invlex = MonomialOrdering('invlex', seq)
    y1, y2, y3 = invlex.ring().gens()
    assert invlex.sorted([y1**5, y2, y3]) == [y1**5, y2, y3]


def test_neglex(seq):
    ordering = MonomialOrdering('neglex', seq)
    x1, x2, x3 = ordering.ring().gens()
    one = ordering.ring().one()
    assert ordering.sorted([one, x1, x3]) == [x1, x3, one]


def test_weighted_ordering_uses_heights():
    seq = BirationalSequence(operators_lusztig(CartanType(['A', 2]), [1, 2, 1]))
    ordering = MonomialOrdering('wdegrevlex', seq)
    assert ordering.weights() == (1, 2, 1)
    x1, x2, x3 = ordering.ring().gens()
    assert ordering.sorted([x2, x1 * x3, x1]) == [x1, x1 * x3, x2]
    assert repr(ordering) == 'wdegrevlex([x1, x2, x3], [1, 2, 1])'


def test_unknown_ordering(seq):
    with pytest.raises(ValueError, match="unknown monomial ordering"):
        MonomialOrdering('revlex', seq)


def test_monomial_from_exponents(seq):
    ordering = MonomialOrdering('lex', seq)
    x1, x2, x3 = ordering.ring().gens()
    assert ordering.monomial((2, 0, 1)) == x1**2 * x3
    assert repr(ordering) == 'lex([x1, x2, x3])'
