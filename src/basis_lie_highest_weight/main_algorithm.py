r"""
Computation of monomial bases

Let `\beta_1, \ldots, \beta_N` be a birational sequence and `<` a monomial
ordering. A monomial `x^a` is *essential* for `V(\lambda)` if the vector
`f^a v_{\lambda}` is not a linear combination of vectors `f^b v_{\lambda}`
with `x^b < x^a`. The essential monomials index a basis of `V(\lambda)`.

If `\lambda = \lambda_1 + \lambda_2`, the products of essential monomials
for `\lambda_1` and `\lambda_2` are essential for `\lambda`. The bases are
therefore computed recursively: first all products (the Minkowski sum of
the sets of exponent vectors) for decompositions of the highest weight,
and the missing monomials by hand, going through the candidates of each
weight space in increasing order and keeping those whose vectors are
linearly independent of the ones found before.

EXAMPLES::

    sage: from basis_lie_highest_weight.birational_sequence import operators_asc_height
    sage: from basis_lie_highest_weight.main_algorithm import basis_lie_highest_weight_compute
    sage: from basis_lie_highest_weight.module_data import SimpleModuleData
    sage: V = SimpleModuleData(['A', 2], [1, 1])
    sage: mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), 'degrevlex')
    sage: list(mb)
    [1, x3, x2, x1, x3^2, x2*x3, x1*x3, x1*x2]
    sage: mb.minkowski_gens()
    [Lambda[1], Lambda[2]]

The progress of the computation is reported with :func:`verbose`::

    sage: set_verbose(1)
    sage: mb = basis_lie_highest_weight_compute(V, operators_asc_height(V.cartan_type()), 'lex')
    verbose 1 (...) for [1, 0] we add 2 monomials by hand
    verbose 1 (...) for [0, 1] we add 2 monomials by hand
    verbose 1 (...) for [1, 1] the Minkowski sum yields 8 of 8 monomials
    sage: set_verbose(0)
"""
# ****************************************************************************
#       Copyright (C) 2024 The BasisLieHighestWeight developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 2 of the License, or
# (at your option) any later version.
#                  https://www.gnu.org/licenses/
# ****************************************************************************

from sage.misc.verbose import verbose

from basis_lie_highest_weight.birational_sequence import BirationalSequence
from basis_lie_highest_weight.lattice_points import (compute_zero_coordinates,
                                                     get_lattice_points_of_weightspace,
                                                     convert_lattice_points_to_monomials)
from basis_lie_highest_weight.linear_algebra import SparseRowSpan
from basis_lie_highest_weight.module_data import SimpleModuleData, DemazureModuleData
from basis_lie_highest_weight.monomial_basis import MonomialBasis
from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
from basis_lie_highest_weight.representation_matrices import (tensor_matrices_of_operators,
                                                              highest_weight_vector,
                                                              operator_columns,
                                                              calc_vec)
from basis_lie_highest_weight.weights import (is_fundamental_weight,
                                              root_coefficients,
                                              sub_weights_proper,
                                              weight_coefficients)


def _minkowski_gens_key(wt):
    coeffs = weight_coefficients(wt)
    return (sum(coeffs), tuple(reversed(coeffs)))


def basis_lie_highest_weight_compute(V, operators, monomial_ordering):
    r"""
    Return the monomial basis of the module ``V``.

    INPUT:

    - ``V`` -- a :class:`~basis_lie_highest_weight.module_data.ModuleData`
    - ``operators`` -- a list of positive roots in the root lattice; the
      variable `x_i` corresponds to the ``i``-th of them
    - ``monomial_ordering`` -- the name of a monomial ordering

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_by_index
        sage: from basis_lie_highest_weight.main_algorithm import basis_lie_highest_weight_compute
        sage: from basis_lie_highest_weight.module_data import SimpleModuleData
        sage: V = SimpleModuleData(['A', 2], [1, 0])
        sage: mb = basis_lie_highest_weight_compute(V, operators_by_index(V.cartan_type(), [1, 2, 1]), 'degrevlex')
        sage: sorted(mb.monomials())
        [1, x3, x2*x3]
    """
    birational_seq = BirationalSequence(operators)
    ordering = MonomialOrdering(monomial_ordering, birational_seq)
    P = V.weight_lattice()

    calc_highest_weight = {P.zero(): {ordering.ring().one()}}
    no_minkowski = set()

    monomials = compute_monomials(V, birational_seq, ordering,
                                  calc_highest_weight, no_minkowski)
    minkowski_gens = sorted(no_minkowski, key=_minkowski_gens_key)
    return MonomialBasis(V, birational_seq, ordering, monomials,
                         algorithm=basis_lie_highest_weight_compute,
                         minkowski_gens=minkowski_gens)


def basis_coordinate_ring_kodaira_compute(cartan_type, highest_weight, degree,
                                          operators, monomial_ordering):
    r"""
    Return the monomial bases of `V(k\lambda)` for `k = 1, \ldots,`
    ``degree`` together with the monomials of degree `k` which are not
    products of monomials of smaller degrees.

    The direct sum of the duals of the modules `V(k\lambda)` is the
    homogeneous coordinate ring of the embedding of the flag variety given
    by `\lambda`.

    INPUT:

    - ``cartan_type`` -- a finite Cartan type
    - ``highest_weight`` -- a dominant weight `\lambda`
    - ``degree`` -- a positive integer
    - ``operators`` -- a list of positive roots in the root lattice
    - ``monomial_ordering`` -- the name of a monomial ordering

    OUTPUT:

    A list of pairs ``(basis, new_monomials)``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_asc_height
        sage: from basis_lie_highest_weight.main_algorithm import (
        ....:     basis_coordinate_ring_kodaira_compute)
        sage: ct = CartanType(['A', 1])
        sage: La = RootSystem(ct).weight_lattice().fundamental_weights()
        sage: res = basis_coordinate_ring_kodaira_compute(ct, La[1], 3, operators_asc_height(ct), 'degrevlex')
        sage: [len(mb) for mb, new in res]
        [2, 3, 4]
        sage: [new for mb, new in res]
        [[1, x1], [], []]
        sage: res[2][0].minkowski_gens()
        [Lambda[1]]

    TESTS::

        sage: basis_coordinate_ring_kodaira_compute(ct, La[1], 0, operators_asc_height(ct), 'degrevlex')
        Traceback (most recent call last):
        ...
        ValueError: degree must be positive
    """
    if degree <= 0:
        raise ValueError("degree must be positive")
    birational_seq = BirationalSequence(operators)
    ordering = MonomialOrdering(monomial_ordering, birational_seq)
    P = highest_weight.parent()

    calc_highest_weight = {P.zero(): {ordering.ring().one()}}
    no_minkowski = set()

    monomials_k = []
    monomials_new_k = []
    result = []
    for i in range(1, degree + 1):
        V = SimpleModuleData(cartan_type, i * highest_weight)
        dim_i = V.dim()
        monomials_minkowski_sum = set()
        for k in range(1, i // 2 + 1):
            monomials_minkowski_sum.update(p * q for p in monomials_k[i - k - 1]
                                           for q in monomials_k[k - 1])
            if len(monomials_minkowski_sum) == dim_i:
                break

        if len(monomials_minkowski_sum) == dim_i:
            verbose("for {} everything is generated by smaller weights".format(
                weight_coefficients(i * highest_weight)), level=1)
            monomials = monomials_minkowski_sum
            monomials_new = set()
            calc_highest_weight[i * highest_weight] = monomials
        else:
            verbose("for {} we have {} and need {} monomials".format(
                weight_coefficients(i * highest_weight),
                len(monomials_minkowski_sum), dim_i), level=1)
            monomials = compute_monomials(V, birational_seq, ordering,
                                          calc_highest_weight, no_minkowski)
            monomials_new = monomials.difference(monomials_minkowski_sum)
            verbose("for {} we added {} monomials".format(
                weight_coefficients(i * highest_weight), len(monomials_new)), level=1)

        monomials_new_sorted = ordering.sorted(monomials_new)
        if monomials_new_sorted:
            minkowski_gens = sorted(no_minkowski, key=_minkowski_gens_key)
            new_monomials = monomials_new_sorted
        else:
            minkowski_gens = [k * highest_weight
                              for k, new in enumerate(monomials_new_k, 1) if new]
            new_monomials = None
        mb = MonomialBasis(V, birational_seq, ordering, monomials,
                           algorithm=basis_coordinate_ring_kodaira_compute,
                           minkowski_gens=minkowski_gens,
                           new_monomials=new_monomials)
        monomials_k.append(monomials)
        monomials_new_k.append(monomials_new_sorted)
        result.append((mb, monomials_new_sorted))
    return result


def compute_monomials(V, birational_seq, ordering, calc_highest_weight, no_minkowski):
    r"""
    Return the set of essential monomials of the module ``V``.

    Results are stored in ``calc_highest_weight`` (a dictionary mapping
    highest weights to sets of monomials) and reused. The highest weights
    for which the Minkowski sums did not give enough monomials are added
    to ``no_minkowski``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import (
        ....:     BirationalSequence, operators_asc_height)
        sage: from basis_lie_highest_weight.main_algorithm import compute_monomials
        sage: from basis_lie_highest_weight.module_data import SimpleModuleData
        sage: from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
        sage: V = SimpleModuleData(['B', 2], [1, 1])
        sage: seq = BirationalSequence(operators_asc_height(V.cartan_type()))
        sage: ordering = MonomialOrdering('degrevlex', seq)
        sage: memo = {}
        sage: no_minkowski = set()
        sage: len(compute_monomials(V, seq, ordering, memo, no_minkowski))
        16
        sage: sorted(memo, key=str)
        [Lambda[1], Lambda[1] + Lambda[2], Lambda[2]]
    """
    highest_weight = V.highest_weight()
    if highest_weight in calc_highest_weight:
        return calc_highest_weight[highest_weight]
    if not highest_weight:
        return {ordering.ring().one()}

    if is_fundamental_weight(highest_weight):
        no_minkowski.add(highest_weight)
        monomials = add_by_hand(V, birational_seq, ordering, set())
        calc_highest_weight[highest_weight] = monomials
        return monomials

    dim = V.dim()
    monomials = set()
    sub_weights = sub_weights_proper(highest_weight)
    sub_weights.sort(key=lambda wt: sum(c ** 2 for c in weight_coefficients(wt)))
    # each decomposition lambda_1 + lambda_2 is used once
    for ind_lambda_1, lambda_1 in enumerate(sub_weights):
        if len(monomials) >= dim:
            break
        lambda_2 = highest_weight - lambda_1
        ind_lambda_2 = sub_weights.index(lambda_2)
        if ind_lambda_1 > ind_lambda_2:
            continue

        mon_lambda_1 = compute_monomials(V.with_highest_weight(lambda_1), birational_seq,
                                         ordering, calc_highest_weight, no_minkowski)
        mon_lambda_2 = compute_monomials(V.with_highest_weight(lambda_2), birational_seq,
                                         ordering, calc_highest_weight, no_minkowski)
        monomials.update(p * q for p in mon_lambda_1 for q in mon_lambda_2)

    verbose("for {} the Minkowski sum yields {} of {} monomials".format(
        weight_coefficients(highest_weight), len(monomials), dim), level=1)
    if isinstance(V, DemazureModuleData):
        # products may exceed the Demazure character
        minkowski_sum = monomials
        monomials = add_by_hand(V, birational_seq, ordering,
                                restrict_to_character(V, birational_seq, minkowski_sum))
        if monomials != minkowski_sum:
            no_minkowski.add(highest_weight)
    elif len(monomials) < dim:
        no_minkowski.add(highest_weight)
        monomials = add_by_hand(V, birational_seq, ordering, monomials)

    calc_highest_weight[highest_weight] = monomials
    return monomials


def restrict_to_character(V, birational_seq, monomials):
    r"""
    Return the monomials of ``monomials`` lying in the weight spaces of
    ``V`` which they do not overfill.

    The monomials of a weight space outside the support of the character
    of ``V``, or of a weight space containing more monomials than its
    multiplicity, are all removed.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import (
        ....:     BirationalSequence, operators_asc_height)
        sage: from basis_lie_highest_weight.main_algorithm import restrict_to_character
        sage: from basis_lie_highest_weight.module_data import DemazureModuleData
        sage: from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
        sage: V = DemazureModuleData(['A', 2], [1, 1], [2, 1])
        sage: seq = BirationalSequence(operators_asc_height(V.cartan_type()))
        sage: R = MonomialOrdering('degrevlex', seq).ring()
        sage: x1, x2, x3 = R.gens()
        sage: sorted(restrict_to_character(V, seq, {R.one(), x1, x2, x3, x1*x2, x2*x3}))
        [1, x2, x1, x2*x3]
    """
    highest_weight = V.highest_weight()
    character = V.character()
    by_weight = {}
    for mon in monomials:
        by_weight.setdefault(highest_weight - birational_seq.weight(mon), []).append(mon)
    return {mon for weight_w, mons in by_weight.items()
            if len(mons) <= character.get(weight_w, 0) for mon in mons}


def _vector_weights(V):
    """
    Return the weights of the simple module containing the vectors of the
    monomials of ``V``.
    """
    if isinstance(V, DemazureModuleData):
        return SimpleModuleData(V.cartan_type(), V.highest_weight()).character()
    return V.character()


def add_by_hand(V, birational_seq, ordering, basis):
    r"""
    Complete ``basis`` to a set of essential monomials of ``V``.

    The monomials of ``basis`` are essential. For each weight space which
    does not contain enough of them, the remaining ones are found by
    :func:`add_new_monomials`. The set ``basis`` is modified and returned.

    For a Demazure module, the monomials of ``basis`` whose vectors are
    linearly dependent on those of smaller monomials are removed first.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import (
        ....:     BirationalSequence, operators_asc_height)
        sage: from basis_lie_highest_weight.main_algorithm import add_by_hand
        sage: from basis_lie_highest_weight.module_data import SimpleModuleData
        sage: from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
        sage: V = SimpleModuleData(['A', 2], [0, 1])
        sage: seq = BirationalSequence(operators_asc_height(V.cartan_type()))
        sage: ordering = MonomialOrdering('degrevlex', seq)
        sage: ordering.sorted(add_by_hand(V, seq, ordering, set()))
        [1, x3, x2]
    """
    highest_weight = V.highest_weight()
    matrices_of_operators = tensor_matrices_of_operators(V.cartan_type(), highest_weight,
                                                         birational_seq.operators_as_roots())
    v0 = highest_weight_vector(matrices_of_operators[0].nrows())
    columns_of_operators = operator_columns(matrices_of_operators)
    # spans of the vectors of the monomials found so far in each weight space
    space = {}

    basis.add(ordering.ring().one())
    weightspaces = V.character()
    monomials_in_weightspace = {weight_w: set() for weight_w in weightspaces}
    for mon in basis:
        monomials_in_weightspace[highest_weight - birational_seq.weight(mon)].add(mon)

    check_all = isinstance(V, DemazureModuleData)
    for weight_w, dim_weightspace in weightspaces.items():
        mons = monomials_in_weightspace[weight_w]
        if len(mons) == dim_weightspace and not check_all:
            continue
        span = space.setdefault(weight_w, SparseRowSpan())
        for mon in ordering.sorted(mons):
            if not span.insert(calc_vec(v0, mon, columns_of_operators)):
                mons.discard(mon)
                basis.discard(mon)

    weights_with_non_full_weightspace = [weight_w for weight_w, dim_weightspace in weightspaces.items()
                                         if len(monomials_in_weightspace[weight_w]) != dim_weightspace]
    zero_coordinates = compute_zero_coordinates(birational_seq, highest_weight)
    vector_weights = _vector_weights(V)

    added = 0
    for weight_w in weights_with_non_full_weightspace:
        added += add_new_monomials(V, birational_seq, ordering, columns_of_operators,
                                   weightspaces, weight_w, monomials_in_weightspace,
                                   space, v0, basis, zero_coordinates,
                                   vector_weights=vector_weights)
    verbose("for {} we add {} monomials by hand".format(weight_coefficients(highest_weight),
                                                        added), level=1)
    return basis


def add_new_monomials(V, birational_seq, ordering, columns_of_operators, weightspaces,
                      weight_w, monomials_in_weightspace, space, v0, basis, zero_coordinates,
                      vector_weights=None):
    r"""
    Add the missing essential monomials of the weight space of ``weight_w``
    to ``basis`` and return how many were added.

    The candidates are the monomials of weight
    `\lambda -` ``weight_w``, taken in increasing order. A candidate is
    kept if its vector is linearly independent of the vectors of the
    monomials chosen before in this weight space.

    Candidates having a suffix `x_i^{a_i} \cdots x_N^{a_N}` whose weight
    is not in ``vector_weights`` (by default the weights of ``V``) are
    skipped, since their vectors vanish.

    TESTS::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight
        sage: basis_lie_highest_weight('A', 2, [1, 0], [2])
        Traceback (most recent call last):
        ...
        RuntimeError: the input seems to be invalid
    """
    if vector_weights is None:
        vector_weights = weightspaces
    highest_weight = V.highest_weight()
    dim_weightspace = weightspaces[weight_w]
    roots = birational_seq.root_coefficients()
    target = root_coefficients(highest_weight - weight_w)
    lattice_points = get_lattice_points_of_weightspace(roots, target, zero_coordinates)
    poss_mon_in_weightspace = convert_lattice_points_to_monomials(ordering.ring(), lattice_points)
    if not poss_mon_in_weightspace:
        raise RuntimeError("the input seems to be invalid")
    poss_mon_in_weightspace = ordering.sorted(poss_mon_in_weightspace)
    verbose("weight space {}: {} candidates for {} monomials".format(
        weight_coefficients(weight_w), len(poss_mon_in_weightspace), dim_weightspace), level=2)

    operators_as_weights = birational_seq.operators_as_weights()
    span = space.setdefault(weight_w, SparseRowSpan())
    number_mon_in_weightspace = len(monomials_in_weightspace[weight_w])
    added = 0
    candidates = iter(poss_mon_in_weightspace)
    while number_mon_in_weightspace < dim_weightspace:
        mon = next(candidates, None)
        if mon is None:
            raise RuntimeError("not enough monomials found for the weight space {}".format(
                weight_coefficients(weight_w)))
        if mon in basis:
            continue

        exponents = mon.degrees()
        suffix_weight = highest_weight.parent().zero()
        for exp, wt in zip(reversed(exponents[1:]), reversed(operators_as_weights[1:])):
            suffix_weight += exp * wt
            if highest_weight - suffix_weight not in vector_weights:
                break
        else:
            if span.insert(calc_vec(v0, mon, columns_of_operators)):
                number_mon_in_weightspace += 1
                added += 1
                monomials_in_weightspace[weight_w].add(mon)
                basis.add(mon)
    return added
