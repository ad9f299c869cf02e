import itertools

import pytest

from sage.all import CartanType, RootSystem, PolynomialRing, ZZ

from basis_lie_highest_weight.birational_sequence import (BirationalSequence,
                                                          operators_asc_height,
                                                          operators_desc_height,
                                                          operators_by_index)
from basis_lie_highest_weight.lattice_points import (compute_zero_coordinates,
                                                     get_lattice_points_of_weightspace,
                                                     convert_lattice_points_to_monomials)
from basis_lie_highest_weight.weights import positive_roots_ascending_height


def brute_force(roots, target, zero_coordinates):
    bound = max(target) + 1
    points = []
    for a in itertools.product(range(bound), repeat=len(roots)):
        if any(a[i] for i in zero_coordinates):
            continue
        total = [sum(e * r[j] for e, r in zip(a, roots)) for j in range(len(target))]
        if tuple(total) == tuple(target):
            points.append(a)
    return sorted(points)


@pytest.mark.parametrize("cartan_type", [['A', 2], ['B', 2], ['G', 2]])
@pytest.mark.parametrize("target", [(0, 0), (1, 0), (2, 1), (3, 2), (2, 3)])
def test_lattice_points_are_exhaustive(cartan_type, target):
    roots = positive_roots_ascending_height(CartanType(cartan_type))
    points = get_lattice_points_of_weightspace(roots, target, [])
    assert len(points) == len(set(points))
    assert sorted(points) == brute_force(roots, target, [])


def test_lattice_points_with_zero_coordinates():
    roots = positive_roots_ascending_height(CartanType(['A', 3]))
    target = (1, 2, 1)
    points = get_lattice_points_of_weightspace(roots, target, [5, 4])
    assert sorted(points) == brute_force(roots, target, [5, 4])
    assert all(a[4] == 0 and a[5] == 0 for a in points)


def test_repeated_roots():
    roots = [(1, 0), (0, 1), (1, 0)]
    assert sorted(get_lattice_points_of_weightspace(roots, (2, 1), [])) == [
        (0, 1, 2), (1, 1, 1), (2, 1, 0)]


def test_no_lattice_points():
    roots = [(1, 0), (1, 1)]
    assert get_lattice_points_of_weightspace(roots, (0, 1), []) == []
    assert get_lattice_points_of_weightspace(roots, (1, -1), []) == []


def test_zero_coordinates_suffix():
    ct = CartanType(['A', 3])
    La = RootSystem(ct).weight_lattice().fundamental_weights()
    seq = BirationalSequence(operators_desc_height(ct))
    # descending height ends with alpha[3], alpha[2], alpha[1]
    assert compute_zero_coordinates(seq, La[3]) == [5, 4]
    assert compute_zero_coordinates(seq, La[1]) == []
    seq = BirationalSequence(operators_asc_height(ct))
    assert compute_zero_coordinates(seq, La[2]) == []


def test_zero_coordinates_stop_at_first_acting_operator():
    ct = CartanType(['A', 3])
    La = RootSystem(ct).weight_lattice().fundamental_weights()
    seq = BirationalSequence(operators_by_index(ct, [3, 1, 3, 2]))
    assert compute_zero_coordinates(seq, La[1]) == [3, 2]


def test_convert_lattice_points_to_monomials():
    R = PolynomialRing(ZZ, 3, ['x1', 'x2', 'x3'])
    x1, x2, x3 = R.gens()
    assert convert_lattice_points_to_monomials(R, [(0, 0, 0), (2, 0, 1)]) == [R.one(), x1**2 * x3]
