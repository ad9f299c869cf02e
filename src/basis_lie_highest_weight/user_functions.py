r"""
Monomial bases of highest weight modules

This module contains the functions computing monomial bases of simple
highest weight modules, of Demazure modules and of the homogeneous
coordinate rings of flag varieties.

The Lie algebra is given by the letter and the rank of its Cartan type and
the highest weight by its coefficients with respect to the fundamental
weights. A birational sequence is given either by the indices of the
positive roots in :func:`basis_lie_highest_weight_operators` or by the
coefficients of the roots with respect to the simple roots.

EXAMPLES::

    sage: from basis_lie_highest_weight import *
    sage: basis_lie_highest_weight_operators('B', 2)
    [(1, [1, 0]), (2, [0, 1]), (3, [1, 1]), (4, [1, 2])]
    sage: mb = basis_lie_highest_weight('A', 2, [1, 1]); mb
    Monomial basis of a highest weight module
      of highest weight [1, 1]
      of dimension 8
      with monomial ordering degrevlex([x1, x2, x3])
    over Lie algebra of type A2
      where the used birational sequence consists of the following roots (given as coefficients w.r.t. alpha_i):
        [1, 0]
        [0, 1]
        [1, 1]
      and the basis was generated by Minkowski sums of the bases of the following highest weight modules:
        [1, 0]
        [0, 1]
    sage: basis_lie_highest_weight('A', 3, [2, 2, 3], monomial_ordering='lex').dimension()
    1260

AUTHORS:

- The BasisLieHighestWeight developers (2024): initial version
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

from sage.combinat.root_system.cartan_type import CartanType
from sage.combinat.root_system.root_system import RootSystem

from basis_lie_highest_weight.birational_sequence import (operators_asc_height,
                                                          operators_desc_height,
                                                          operators_by_index,
                                                          operators_by_simple_roots,
                                                          operators_lusztig,
                                                          operators_string)
from basis_lie_highest_weight.main_algorithm import (basis_lie_highest_weight_compute,
                                                     basis_coordinate_ring_kodaira_compute)
from basis_lie_highest_weight.module_data import SimpleModuleData, DemazureModuleData
from basis_lie_highest_weight.monomial_basis import MonomialBasis
from basis_lie_highest_weight.weights import (positive_roots_ascending_height,
                                              weight_from_coefficients)


def _cartan_type(type, rank):
    return CartanType([type, rank])


def _operators(cartan_type, birational_sequence):
    """
    Return the operators of ``birational_sequence``, which is ``None``, a
    list of indices or a list of simple root coefficients.
    """
    if birational_sequence is None:
        return operators_asc_height(cartan_type)
    birational_sequence = list(birational_sequence)
    if birational_sequence and isinstance(birational_sequence[0], (list, tuple)):
        return operators_by_simple_roots(cartan_type, birational_sequence)
    return operators_by_index(cartan_type, birational_sequence)


def _monomial_ordering(monomial_ordering):
    if monomial_ordering is None:
        return MonomialBasis.options.monomial_ordering
    return monomial_ordering


def basis_lie_highest_weight_operators(type, rank):
    r"""
    Return the operators available for the simple Lie algebra of type
    ``type`` and rank ``rank`` together with their indices.

    The operator `f_{\alpha}` of the negative root `-\alpha` is given by
    the coefficients of `\alpha` with respect to the simple roots.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight_operators
        sage: basis_lie_highest_weight_operators('G', 2)
        [(1, [1, 0]), (2, [0, 1]), (3, [1, 1]), (4, [2, 1]), (5, [3, 1]), (6, [3, 2])]
    """
    roots = positive_roots_ascending_height(_cartan_type(type, rank))
    return [(i, list(coeffs)) for i, coeffs in enumerate(roots, 1)]


def basis_lie_highest_weight(type, rank, highest_weight, birational_sequence=None,
                             monomial_ordering=None):
    r"""
    Return a monomial basis of the simple module of highest weight
    ``highest_weight`` of the simple Lie algebra of type ``type`` and rank
    ``rank``.

    INPUT:

    - ``type`` -- the letter of the Cartan type
    - ``rank`` -- the rank
    - ``highest_weight`` -- the coefficients of the highest weight with
      respect to the fundamental weights
    - ``birational_sequence`` -- (optional) a list of indices of the
      operators in :func:`basis_lie_highest_weight_operators` or a list
      of coefficients of positive roots with respect to the simple roots;
      by default all positive roots by ascending height are used
    - ``monomial_ordering`` -- (optional) the name of a monomial ordering;
      the default is taken from ``MonomialBasis.options``. For weighted
      orderings, the heights of the roots are the weights.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight
        sage: mb = basis_lie_highest_weight('A', 2, [1, 0], [1, 2, 1])
        sage: sorted(mb.monomials())
        [1, x3, x2*x3]
        sage: mb2 = basis_lie_highest_weight('A', 2, [1, 0], [[1, 0], [0, 1], [1, 0]])
        sage: mb.monomials() == mb2.monomials()
        True
        sage: basis_lie_highest_weight('C', 3, [1, 1, 1], monomial_ordering='lex').dimension()
        512

    TESTS::

        sage: basis_lie_highest_weight('A', 2, [1, 0], monomial_ordering='revlex')
        Traceback (most recent call last):
        ...
        ValueError: unknown monomial ordering revlex
        sage: basis_lie_highest_weight('A', 2, [1, 0], [[1, 1, 0]])
        Traceback (most recent call last):
        ...
        ValueError: only positive roots are allowed as input
    """
    ct = _cartan_type(type, rank)
    monomial_ordering = _monomial_ordering(monomial_ordering)
    V = SimpleModuleData(ct, highest_weight)
    operators = _operators(ct, birational_sequence)
    return basis_lie_highest_weight_compute(V, operators, monomial_ordering)


def basis_lie_highest_weight_lusztig(type, rank, highest_weight, reduced_expression):
    r"""
    Return a monomial basis of the simple module of highest weight
    ``highest_weight`` for the Lusztig parametrization.

    Let `w_0 = s_{i_1} \cdots s_{i_N}` be the reduced expression
    ``reduced_expression`` of the longest element of the Weyl group. The
    birational sequence consists of `\beta_k = s_{i_1} \cdots
    s_{i_{k-1}}(\alpha_{i_k})` and the monomial ordering is
    ``wdegrevlex``.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight_lusztig
        sage: mb = basis_lie_highest_weight_lusztig('D', 4, [1, 1, 1, 1],  # long time
        ....:                                       [4, 3, 2, 4, 3, 2, 1, 2, 4, 3, 2, 1])
        sage: mb.dimension()  # long time
        4096
        sage: mb.monomial_ordering()  # long time
        wdegrevlex([x1, x2, x3, x4, x5, x6, x7, x8, x9, x10, x11, x12],
                   [1, 1, 3, 2, 2, 1, 5, 4, 3, 3, 2, 1])
    """
    ct = _cartan_type(type, rank)
    V = SimpleModuleData(ct, highest_weight)
    operators = operators_lusztig(ct, reduced_expression)
    return basis_lie_highest_weight_compute(V, operators, 'wdegrevlex')


def basis_lie_highest_weight_string(type, rank, highest_weight, reduced_expression):
    r"""
    Return a monomial basis of the simple module of highest weight
    ``highest_weight`` for the string parametrization.

    Let `w_0 = s_{i_1} \cdots s_{i_N}` be the reduced expression
    ``reduced_expression`` of the longest element of the Weyl group. The
    birational sequence consists of `\alpha_{i_1}, \ldots, \alpha_{i_N}`
    and the monomial ordering is ``neglex``.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight_string
        sage: mb = basis_lie_highest_weight_string('B', 3, [1, 1, 1], [3, 2, 3, 2, 1, 2, 3, 2, 1])  # long time
        sage: mb.dimension()  # long time
        512
        sage: mb.minkowski_gens()  # long time
        [Lambda[1], Lambda[2], Lambda[3]]
    """
    ct = _cartan_type(type, rank)
    V = SimpleModuleData(ct, highest_weight)
    operators = operators_string(ct, reduced_expression)
    return basis_lie_highest_weight_compute(V, operators, 'neglex')


def basis_lie_highest_weight_ffl(type, rank, highest_weight):
    r"""
    Return the FFL basis (of Feigin, Fourier and Littelmann) of the simple
    module of highest weight ``highest_weight``.

    The birational sequence consists of all positive roots by descending
    height and the monomial ordering is ``degrevlex``.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight_ffl
        sage: mb = basis_lie_highest_weight_ffl('A', 3, [1, 1, 1])
        sage: mb.dimension()
        64
        sage: [list(c) for c in mb.birational_sequence().root_coefficients()]
        [[1, 1, 1], [0, 1, 1], [1, 1, 0], [0, 0, 1], [0, 1, 0], [1, 0, 0]]
        sage: mb.minkowski_gens()
        [Lambda[1], Lambda[2], Lambda[3]]
    """
    ct = _cartan_type(type, rank)
    V = SimpleModuleData(ct, highest_weight)
    return basis_lie_highest_weight_compute(V, operators_desc_height(ct), 'degrevlex')


def basis_lie_highest_weight_nz(type, rank, highest_weight, reduced_expression):
    r"""
    Return a monomial basis of the simple module of highest weight
    ``highest_weight`` for the Nakashima-Zelevinsky parametrization.

    Let `w_0 = s_{i_1} \cdots s_{i_N}` be the reduced expression
    ``reduced_expression`` of the longest element of the Weyl group. The
    birational sequence consists of `\alpha_{i_1}, \ldots, \alpha_{i_N}`
    and the monomial ordering is ``degrevlex``.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight_nz
        sage: mb = basis_lie_highest_weight_nz('C', 3, [1, 1, 1], [3, 2, 3, 2, 1, 2, 3, 2, 1])  # long time
        sage: mb.dimension()  # long time
        512
        sage: mb.monomial_ordering()  # long time
        degrevlex([x1, x2, x3, x4, x5, x6, x7, x8, x9])
    """
    ct = _cartan_type(type, rank)
    V = SimpleModuleData(ct, highest_weight)
    operators = operators_string(ct, reduced_expression)
    return basis_lie_highest_weight_compute(V, operators, 'degrevlex')


def basis_lie_highest_weight_demazure(type, rank, highest_weight, weyl_group_elem,
                                      monomial_ordering=None):
    r"""
    Return a monomial basis of the Demazure module of highest weight
    ``highest_weight`` for the Weyl group element ``weyl_group_elem``.

    The birational sequence consists of all positive roots by ascending
    height.

    INPUT:

    - ``type``, ``rank``, ``highest_weight`` -- as in
      :func:`basis_lie_highest_weight`
    - ``weyl_group_elem`` -- a reduced word of an element of the Weyl group
    - ``monomial_ordering`` -- (optional) the name of a monomial ordering

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight_demazure
        sage: basis_lie_highest_weight_demazure('A', 2, [1, 1], [1, 2, 1]).dimension()
        8
        sage: sorted(basis_lie_highest_weight_demazure('A', 2, [1, 1], []).monomials())
        [1]
    """
    ct = _cartan_type(type, rank)
    monomial_ordering = _monomial_ordering(monomial_ordering)
    V = DemazureModuleData(ct, highest_weight, weyl_group_elem)
    return basis_lie_highest_weight_compute(V, operators_asc_height(ct), monomial_ordering)


def basis_coordinate_ring_kodaira(type, rank, highest_weight, degree,
                                  birational_sequence=None, monomial_ordering=None):
    r"""
    Return monomial bases of the homogeneous coordinate ring of the
    embedding of the flag variety into the projective space of the simple
    module of highest weight ``highest_weight``, up to degree ``degree``.

    For each degree `k`, the result contains the monomial basis of
    `V(k\lambda)` and the monomials which are not products of monomials
    of the bases of smaller degrees.

    .. WARNING::

        The highest weight `-w_0(\lambda)` has to be given instead of
        `\lambda`.

    INPUT:

    - ``type``, ``rank``, ``highest_weight``, ``birational_sequence``,
      ``monomial_ordering`` -- as in :func:`basis_lie_highest_weight`
    - ``degree`` -- a positive integer

    OUTPUT:

    A list of pairs ``(basis, new_monomials)``.

    EXAMPLES::

        sage: from basis_lie_highest_weight import *
        sage: MonomialBasis.options.display = 'short'
        sage: res = basis_coordinate_ring_kodaira('A', 2, [1, 0], 3)
        sage: res[0]
        (Monomial basis of a highest weight module with highest weight [1, 0]
          over Lie algebra of type A2, [1, x3, x1])
        sage: [len(new) for mb, new in res]
        [3, 0, 0]
        sage: MonomialBasis.options._reset()

    TESTS::

        sage: basis_coordinate_ring_kodaira('A', 2, [1, 0], 0)
        Traceback (most recent call last):
        ...
        ValueError: degree must be positive
    """
    ct = _cartan_type(type, rank)
    monomial_ordering = _monomial_ordering(monomial_ordering)
    P = RootSystem(ct).weight_lattice()
    highest_weight = weight_from_coefficients(P, highest_weight)
    operators = _operators(ct, birational_sequence)
    return basis_coordinate_ring_kodaira_compute(ct, highest_weight, degree,
                                                 operators, monomial_ordering)


def basis_coordinate_ring_kodaira_ffl(type, rank, highest_weight, degree):
    r"""
    Return the monomial bases of :func:`basis_coordinate_ring_kodaira` for
    the birational sequence of all positive roots by descending height and
    the monomial ordering ``degrevlex``.

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_coordinate_ring_kodaira_ffl
        sage: res = basis_coordinate_ring_kodaira_ffl('G', 2, [1, 0], 6)
        sage: [len(new) for mb, new in res]
        [7, 0, 0, 0, 0, 0]
        sage: res[0][1]
        [1, x6, x4, x3, x2, x1, x1*x6]
        sage: res[-1][0].minkowski_gens()
        [Lambda[1]]
    """
    ct = _cartan_type(type, rank)
    P = RootSystem(ct).weight_lattice()
    highest_weight = weight_from_coefficients(P, highest_weight)
    return basis_coordinate_ring_kodaira_compute(ct, highest_weight, degree,
                                                 operators_desc_height(ct), 'degrevlex')
