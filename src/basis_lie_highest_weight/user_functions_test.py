import pytest

from basis_lie_highest_weight import (MonomialBasis,
                                      basis_lie_highest_weight,
                                      basis_lie_highest_weight_operators,
                                      basis_lie_highest_weight_lusztig,
                                      basis_lie_highest_weight_string,
                                      basis_lie_highest_weight_ffl,
                                      basis_lie_highest_weight_nz,
                                      basis_lie_highest_weight_demazure,
                                      basis_coordinate_ring_kodaira,
                                      basis_coordinate_ring_kodaira_ffl)


@pytest.fixture
def reset_options():
    yield MonomialBasis.options
    MonomialBasis.options._reset()


def test_operators():
    assert basis_lie_highest_weight_operators('B', 2) == [
        (1, [1, 0]), (2, [0, 1]), (3, [1, 1]), (4, [1, 2])]
    assert basis_lie_highest_weight_operators('C', 3) == [
        (1, [1, 0, 0]), (2, [0, 1, 0]), (3, [0, 0, 1]), (4, [1, 1, 0]), (5, [0, 1, 1]),
        (6, [0, 2, 1]), (7, [1, 1, 1]), (8, [1, 2, 1]), (9, [2, 2, 1])]
    assert [coeffs for i, coeffs in basis_lie_highest_weight_operators('G', 2)] == [
        [1, 0], [0, 1], [1, 1], [2, 1], [3, 1], [3, 2]]


def test_default_birational_sequence():
    mb = basis_lie_highest_weight('A', 2, [1, 1])
    assert mb.dimension() == 8
    assert mb.monomial_ordering().name() == 'degrevlex'
    assert [list(c) for c in mb.birational_sequence().root_coefficients()] == [
        [1, 0], [0, 1], [1, 1]]
    assert mb.algorithm().__name__ == 'basis_lie_highest_weight_compute'
    assert mb.new_monomials() is None


def test_sequence_by_index_and_by_simple_roots():
    mb1 = basis_lie_highest_weight('A', 2, [1, 0], [1, 2, 1])
    mb2 = basis_lie_highest_weight('A', 2, [1, 0], [[1, 0], [0, 1], [1, 0]])
    assert mb1.monomials() == mb2.monomials()
    x1, x2, x3 = mb1.monomial_ordering().ring().gens()
    assert list(mb1) == [mb1.monomial_ordering().ring().one(), x3, x2 * x3]


def test_repr():
    mb = basis_lie_highest_weight('A', 2, [1, 1])
    assert repr(mb) == '\n'.join([
        'Monomial basis of a highest weight module',
        '  of highest weight [1, 1]',
        '  of dimension 8',
        '  with monomial ordering degrevlex([x1, x2, x3])',
        'over Lie algebra of type A2',
        '  where the used birational sequence consists of the following roots'
        ' (given as coefficients w.r.t. alpha_i):',
        '    [1, 0]',
        '    [0, 1]',
        '    [1, 1]',
        '  and the basis was generated by Minkowski sums of the bases'
        ' of the following highest weight modules:',
        '    [1, 0]',
        '    [0, 1]'])


def test_short_repr(reset_options):
    reset_options.display = 'SHORT'
    mb = basis_lie_highest_weight('A', 2, [1, 0])
    assert repr(mb) == ('Monomial basis of a highest weight module with highest weight [1, 0]'
                        ' over Lie algebra of type A2')
    mb = basis_lie_highest_weight_demazure('A', 2, [1, 0], [1])
    assert repr(mb) == ('Monomial basis of a Demazure module with highest weight [1, 0]'
                        ' and Weyl group element s1 over Lie algebra of type A2')


def test_trivial_module_has_no_minkowski_section():
    mb = basis_lie_highest_weight('A', 2, [0, 0])
    assert mb.minkowski_gens() == []
    assert 'Minkowski' not in repr(mb)


def test_default_monomial_ordering(reset_options):
    reset_options.monomial_ordering = 'lex'
    mb = basis_lie_highest_weight('A', 2, [1, 0])
    assert mb.monomial_ordering().name() == 'lex'
    mb = basis_lie_highest_weight('A', 2, [1, 0], monomial_ordering='invlex')
    assert mb.monomial_ordering().name() == 'invlex'


def test_invalid_default_monomial_ordering(reset_options):
    with pytest.raises(ValueError):
        reset_options.monomial_ordering = 'revlex'


def test_invalid_input():
    with pytest.raises(ValueError, match="unknown monomial ordering"):
        basis_lie_highest_weight('A', 2, [1, 0], monomial_ordering='revlex')
    with pytest.raises(ValueError, match="only positive roots are allowed as input"):
        basis_lie_highest_weight('A', 2, [1, 0], [[1, -1]])
    with pytest.raises(ValueError, match="must not be empty"):
        basis_lie_highest_weight('A', 2, [1, 0], [])
    with pytest.raises(ValueError, match="dominant"):
        basis_lie_highest_weight('A', 2, [-1, 0])


@pytest.mark.parametrize("type, rank, highest_weight, dim", [
    ('A', 1, [3], 4),
    ('B', 2, [1, 1], 16),
    ('C', 2, [1, 1], 16),
    ('D', 4, [1, 0, 0, 0], 8),
    ('G', 2, [0, 1], 14),
    ('F', 4, [0, 0, 0, 1], 26),
])
def test_dimensions(type, rank, highest_weight, dim):
    assert basis_lie_highest_weight(type, rank, highest_weight).dimension() == dim


@pytest.mark.slow
@pytest.mark.parametrize("type, rank, highest_weight, dim", [
    ('A', 3, [2, 2, 3], 1260),
    ('C', 3, [1, 1, 1], 512),
])
def test_large_dimensions(type, rank, highest_weight, dim):
    assert basis_lie_highest_weight(type, rank, highest_weight,
                                    monomial_ordering='lex').dimension() == dim


def test_lusztig():
    mb = basis_lie_highest_weight_lusztig('A', 2, [1, 1], [1, 2, 1])
    assert mb.dimension() == 8
    assert mb.monomial_ordering().name() == 'wdegrevlex'
    assert mb.monomial_ordering().weights() == (1, 2, 1)
    assert [list(c) for c in mb.birational_sequence().root_coefficients()] == [
        [1, 0], [1, 1], [0, 1]]


def test_string_and_nz():
    mb = basis_lie_highest_weight_string('B', 2, [1, 1], [1, 2, 1, 2])
    assert mb.dimension() == 16
    assert mb.monomial_ordering().name() == 'neglex'
    mb = basis_lie_highest_weight_nz('B', 2, [1, 1], [1, 2, 1, 2])
    assert mb.dimension() == 16
    assert mb.monomial_ordering().name() == 'degrevlex'
    assert [list(c) for c in mb.birational_sequence().root_coefficients()] == [
        [1, 0], [0, 1], [1, 0], [0, 1]]


def test_ffl():
    mb = basis_lie_highest_weight_ffl('B', 2, [1, 1])
    assert mb.dimension() == 16
    assert [list(c) for c in mb.birational_sequence().root_coefficients()] == [
        [1, 2], [1, 1], [0, 1], [1, 0]]


@pytest.mark.parametrize("word, dim", [([], 1), ([1], 2), ([2], 1), ([2, 1], 3), ([1, 2, 1], 3)])
def test_demazure(word, dim):
    mb = basis_lie_highest_weight_demazure('A', 2, [1, 0], word)
    assert mb.dimension() == dim
    assert mb.module_data().dim() == dim


def test_demazure_longest_element_gives_simple_module():
    mb = basis_lie_highest_weight_demazure('A', 2, [1, 1], [1, 2, 1])
    assert mb.monomials() == basis_lie_highest_weight('A', 2, [1, 1]).monomials()


def test_kodaira():
    res = basis_coordinate_ring_kodaira('A', 2, [1, 0], 3)
    assert [len(new) for mb, new in res] == [3, 0, 0]
    assert [mb.dimension() for mb, new in res] == [3, 6, 10]
    mb, new = res[0]
    assert new == list(mb)
    assert mb.new_monomials() == new
    for mb, new in res[1:]:
        assert mb.new_monomials() is None
        assert mb.minkowski_gens() == [mb.highest_weight().parent().fundamental_weight(1)]


def test_kodaira_with_birational_sequence():
    res = basis_coordinate_ring_kodaira('A', 2, [1, 1], 2, [[1, 0], [0, 1], [1, 1]], 'lex')
    assert [mb.dimension() for mb, new in res] == [8, 27]
    assert res[1][0].monomial_ordering().name() == 'lex'


def test_kodaira_ffl():
    res = basis_coordinate_ring_kodaira_ffl('G', 2, [1, 0], 3)
    assert [len(new) for mb, new in res] == [7, 0, 0]
    assert [mb.dimension() for mb, new in res] == [7, 27, 77]
    x1, x2, x3, x4, x5, x6 = res[0][0].monomial_ordering().ring().gens()
    assert res[0][1] == [1, x6, x4, x3, x2, x1, x1 * x6]


def test_kodaira_requires_positive_degree():
    with pytest.raises(ValueError, match="degree must be positive"):
        basis_coordinate_ring_kodaira('A', 2, [1, 0], 0)
