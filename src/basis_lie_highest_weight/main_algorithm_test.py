from collections import Counter

import pytest

from sage.all import CartanType, RootSystem

from basis_lie_highest_weight.birational_sequence import (BirationalSequence,
                                                          operators_asc_height,
                                                          operators_desc_height,
                                                          operators_by_index)
from basis_lie_highest_weight.main_algorithm import (basis_lie_highest_weight_compute,
                                                     basis_coordinate_ring_kodaira_compute,
                                                     compute_monomials,
                                                     restrict_to_character,
                                                     add_by_hand,
                                                     add_new_monomials)
from basis_lie_highest_weight.linear_algebra import SparseRowSpan
from basis_lie_highest_weight.module_data import SimpleModuleData, DemazureModuleData
from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
from basis_lie_highest_weight.representation_matrices import (tensor_matrices_of_operators,
                                                              highest_weight_vector,
                                                              operator_columns,
                                                              calc_vec)


def weight_space_counts(mb):
    V = mb.module_data()
    seq = mb.birational_sequence()
    return Counter(V.highest_weight() - seq.weight(mon) for mon in mb.monomials())


@pytest.mark.parametrize("cartan_type, highest_weight, ordering", [
    (['A', 2], [1, 1], 'degrevlex'),
    (['A', 2], [2, 1], 'lex'),
    (['A', 3], [1, 0, 1], 'invlex'),
    (['B', 2], [1, 1], 'wdegrevlex'),
    (['C', 2], [0, 2], 'neglex'),
    (['G', 2], [1, 0], 'degrevlex'),
])
def test_basis_matches_character(cartan_type, highest_weight, ordering):
    V = SimpleModuleData(cartan_type, highest_weight)
    mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), ordering)
    assert len(mb) == V.dim()
    assert dict(weight_space_counts(mb)) == V.character()


def test_ffl_sequence():
    V = SimpleModuleData(['B', 2], [1, 1])
    mb = basis_lie_highest_weight_compute(V, operators_desc_height(V.cartan_type()), 'degrevlex')
    assert mb.dimension() == 16
    assert dict(weight_space_counts(mb)) == V.character()


def test_adjoint_representation_of_a2():
    V = SimpleModuleData(['A', 2], [1, 1])
    mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), 'degrevlex')
    x1, x2, x3 = mb.monomial_ordering().ring().gens()
    one = mb.monomial_ordering().ring().one()
    assert mb.monomials() == {one, x1, x2, x3, x1 * x2, x1 * x3, x2 * x3, x3**2}
    La = V.weight_lattice().fundamental_weights()
    assert mb.minkowski_gens() == [La[1], La[2]]
    assert mb.new_monomials() is None
    assert mb.algorithm() is basis_lie_highest_weight_compute


def test_repeated_operators():
    V = SimpleModuleData(['A', 2], [1, 0])
    mb = basis_lie_highest_weight_compute(V, operators_by_index(V.cartan_type(), [1, 2, 1]), 'degrevlex')
    x1, x2, x3 = mb.monomial_ordering().ring().gens()
    assert mb.monomials() == {mb.monomial_ordering().ring().one(), x3, x2 * x3}


def test_zero_weight():
    V = SimpleModuleData(['B', 3], [0, 0, 0])
    mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), 'lex')
    assert mb.monomials() == {mb.monomial_ordering().ring().one()}
    assert mb.dim() == 1
    assert mb.minkowski_gens() == []


def test_deterministic():
    V = SimpleModuleData(['B', 2], [1, 2])
    ops = operators_asc_height(V.cartan_type())
    mb1 = basis_lie_highest_weight_compute(V, ops, 'degrevlex')
    mb2 = basis_lie_highest_weight_compute(SimpleModuleData(['B', 2], [1, 2]), ops, 'degrevlex')
    assert mb1.monomials() == mb2.monomials()
    assert mb1.minkowski_gens() == mb2.minkowski_gens()


def test_fundamental_weights_are_minkowski_gens():
    V = SimpleModuleData(['A', 3], [1, 1, 1])
    mb = basis_lie_highest_weight_compute(V, operators_desc_height(V.cartan_type()), 'degrevlex')
    La = V.weight_lattice().fundamental_weights()
    assert mb.dim() == 64
    assert mb.minkowski_gens()[:3] == [La[1], La[2], La[3]]


def test_minkowski_sums_are_contained():
    ct = CartanType(['B', 2])
    ops = operators_asc_height(ct)
    mb1 = basis_lie_highest_weight_compute(SimpleModuleData(ct, [1, 0]), ops, 'degrevlex')
    mb2 = basis_lie_highest_weight_compute(SimpleModuleData(ct, [0, 1]), ops, 'degrevlex')
    mb = basis_lie_highest_weight_compute(SimpleModuleData(ct, [1, 1]), ops, 'degrevlex')
    products = {p * q for p in mb1 for q in mb2}
    assert mb.monomials() >= products


def test_compute_monomials_uses_memo():
    V = SimpleModuleData(['A', 2], [2, 0])
    seq = BirationalSequence(operators_asc_height(V.cartan_type()))
    ordering = MonomialOrdering('degrevlex', seq)
    sentinel = {ordering.ring().one()}
    memo = {V.highest_weight(): sentinel}
    assert compute_monomials(V, seq, ordering, memo, set()) is sentinel


def test_add_by_hand_completes_partial_basis():
    V = SimpleModuleData(['A', 2], [1, 1])
    seq = BirationalSequence(operators_asc_height(V.cartan_type()))
    ordering = MonomialOrdering('degrevlex', seq)
    x1, x2, x3 = ordering.ring().gens()
    basis = add_by_hand(V, seq, ordering, {x1, x2})
    assert len(basis) == 8
    assert {x1, x2, ordering.ring().one()} <= basis


@pytest.mark.parametrize("word, dim", [([1], 2), ([2], 2), ([1, 2, 1], 8), ([], 1)])
def test_demazure(word, dim):
    V = DemazureModuleData(['A', 2], [1, 1], word)
    mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), 'degrevlex')
    assert mb.dim() == dim
    assert dict(weight_space_counts(mb)) == V.character()


@pytest.mark.parametrize("cartan_type, highest_weight, word, dim", [
    (['A', 2], [1, 1], [2, 1], 5),
    (['A', 2], [2, 1], [2, 1], 9),
    (['B', 2], [1, 1], [2, 1], 6),
    (['A', 3], [1, 1, 0], [2, 1], 5),
])
def test_demazure_products_are_restricted(cartan_type, highest_weight, word, dim):
    V = DemazureModuleData(cartan_type, highest_weight, word)
    mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), 'degrevlex')
    assert V.dim() == dim
    assert len(mb) == dim
    assert dict(weight_space_counts(mb)) == V.character()


def test_restrict_to_character():
    V = DemazureModuleData(['A', 2], [1, 1], [2, 1])
    seq = BirationalSequence(operators_asc_height(V.cartan_type()))
    ring = MonomialOrdering('degrevlex', seq).ring()
    x1, x2, x3 = ring.gens()
    # x1*x2 and x3 share a weight of multiplicity 1, x2*x3 is alone in its weight
    restricted = restrict_to_character(V, seq, {ring.one(), x1, x2, x3, x1 * x2, x2 * x3})
    assert restricted == {ring.one(), x1, x2, x2 * x3}
    assert restrict_to_character(SimpleModuleData(['A', 2], [1, 1]), seq,
                                 {ring.one(), x3, x1 * x2}) == {ring.one(), x3, x1 * x2}


def test_missing_lattice_points_raise():
    # alpha_2 alone never leaves the highest weight space of V(omega_1)
    V = SimpleModuleData(['A', 2], [1, 0])
    with pytest.raises(RuntimeError, match="the input seems to be invalid"):
        basis_lie_highest_weight_compute(V, operators_by_index(V.cartan_type(), [2]), 'degrevlex')
    with pytest.raises(RuntimeError, match="the input seems to be invalid"):
        basis_lie_highest_weight_compute(V, operators_by_index(V.cartan_type(), [1]), 'degrevlex')


def test_exhausted_candidates_raise():
    V = SimpleModuleData(['A', 2], [1, 0])
    seq = BirationalSequence(operators_by_index(V.cartan_type(), [1, 2]))
    ordering = MonomialOrdering('degrevlex', seq)
    mats = tensor_matrices_of_operators(V.cartan_type(), V.highest_weight(), seq.operators_as_roots())
    cols = operator_columns(mats)
    v0 = highest_weight_vector(3)
    x1, x2 = ordering.ring().gens()
    weight_w = V.highest_weight() - V.weight_lattice().simple_root(1)
    # the only candidate x1 is already in the span
    span = SparseRowSpan()
    assert span.insert(calc_vec(v0, x1, cols))
    with pytest.raises(RuntimeError, match="not enough monomials found for the weight space"):
        add_new_monomials(V, seq, ordering, cols, V.character(), weight_w, {weight_w: set()},
                          {weight_w: span}, v0, set(), [])


def test_kodaira_products_are_contained():
    ct = CartanType(['A', 2])
    La = RootSystem(ct).weight_lattice().fundamental_weights()
    res = basis_coordinate_ring_kodaira_compute(ct, La[1] + La[2], 3,
                                                operators_asc_height(ct), 'degrevlex')
    assert [mb.dim() for mb, new in res] == [8, 27, 64]
    bases = [mb.monomials() for mb, new in res]
    for i in range(2, 4):
        for k in range(1, i // 2 + 1):
            assert {p * q for p in bases[i - k - 1] for q in bases[k - 1]} <= bases[i - 1]
    for mb, new in res:
        assert mb.algorithm() is basis_coordinate_ring_kodaira_compute
        assert set(new) <= mb.monomials()


def test_kodaira_without_new_monomials():
    ct = CartanType(['A', 1])
    La = RootSystem(ct).weight_lattice().fundamental_weights()
    res = basis_coordinate_ring_kodaira_compute(ct, La[1], 4, operators_asc_height(ct), 'lex')
    assert [len(new) for mb, new in res] == [2, 0, 0, 0]
    assert res[0][0].new_monomials() == res[0][1]
    for mb, new in res[1:]:
        assert mb.new_monomials() is None
        assert mb.minkowski_gens() == [La[1]]


def test_kodaira_requires_positive_degree():
    ct = CartanType(['A', 1])
    La = RootSystem(ct).weight_lattice().fundamental_weights()
    with pytest.raises(ValueError, match="degree must be positive"):
        basis_coordinate_ring_kodaira_compute(ct, La[1], 0, operators_asc_height(ct), 'lex')


@pytest.mark.slow
def test_kodaira_g2_invlex():
    ct = CartanType(['G', 2])
    La = RootSystem(ct).weight_lattice().fundamental_weights()
    res = basis_coordinate_ring_kodaira_compute(ct, La[1], 6, operators_asc_height(ct), 'invlex')
    assert [len(new) for mb, new in res] == [7, 5, 14, 7, 12, 8]
    x1, x2, x3, x4, x5, x6 = res[0][0].monomial_ordering().ring().gens()
    assert res[0][1] == [1, x1, x3, x1 * x3, x1**2 * x3, x3 * x4, x1 * x3 * x4]
    assert res[-1][0].dim() == 714
    assert res[-1][0].minkowski_gens() == [k * La[1] for k in range(1, 7)]
