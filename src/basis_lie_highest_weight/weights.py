r"""
Weights and roots

Helpers translating between coefficient lists and the weight and root
lattices of a root system.

Weights are elements of the weight lattice written in the basis of the
fundamental weights `\Lambda_i`; roots are given by their coefficients
with respect to the simple roots `\alpha_i`.

EXAMPLES::

    sage: from basis_lie_highest_weight.weights import (weight_from_coefficients,
    ....:     sub_weights_proper)
    sage: P = RootSystem(['A', 2]).weight_lattice()
    sage: la = weight_from_coefficients(P, [1, 1]); la
    Lambda[1] + Lambda[2]
    sage: sub_weights_proper(la)
    [Lambda[1], Lambda[2]]
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

import itertools

from sage.misc.cachefunc import cached_function
from sage.combinat.root_system.root_system import RootSystem
from sage.matrix.constructor import matrix
from sage.modules.free_module_element import vector
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ


def weight_from_coefficients(P, coeffs):
    r"""
    Return the element `\sum_i c_i \Lambda_i` of the weight lattice ``P``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import weight_from_coefficients
        sage: P = RootSystem(['B', 3]).weight_lattice()
        sage: weight_from_coefficients(P, [0, 2, 1])
        2*Lambda[2] + Lambda[3]

    TESTS::

        sage: weight_from_coefficients(P, [1, 2])
        Traceback (most recent call last):
        ...
        ValueError: the weight must have 3 coefficients
    """
    I = P.index_set()
    coeffs = list(coeffs)
    if len(coeffs) != len(I):
        raise ValueError("the weight must have {} coefficients".format(len(I)))
    return P._from_dict({i: ZZ(c) for i, c in zip(I, coeffs) if c})


def weight_coefficients(wt):
    """
    Return the coefficients of ``wt`` with respect to the fundamental weights.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import weight_coefficients
        sage: La = RootSystem(['C', 3]).weight_lattice().fundamental_weights()
        sage: weight_coefficients(La[1] + 3*La[3])
        [1, 0, 3]
    """
    return [wt[i] for i in wt.parent().index_set()]


def is_fundamental_weight(wt):
    """
    Return whether ``wt`` is a fundamental weight.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import is_fundamental_weight
        sage: La = RootSystem(['A', 3]).weight_lattice().fundamental_weights()
        sage: is_fundamental_weight(La[2])
        True
        sage: is_fundamental_weight(2*La[2])
        False
        sage: is_fundamental_weight(La[1] + La[3])
        False
    """
    coeffs = weight_coefficients(wt)
    return sorted(coeffs) == [0] * (len(coeffs) - 1) + [1]


def sub_weights(wt):
    r"""
    Return the weights `v` with `0 \leq v \leq` ``wt`` coordinatewise.

    The first coordinate varies fastest.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import sub_weights
        sage: La = RootSystem(['A', 2]).weight_lattice().fundamental_weights()
        sage: sub_weights(2*La[1] + La[2])
        [0, Lambda[1], 2*Lambda[1], Lambda[2], Lambda[1] + Lambda[2],
         2*Lambda[1] + Lambda[2]]

    TESTS::

        sage: sub_weights(La[1] - La[2])
        Traceback (most recent call last):
        ...
        ValueError: the input must be a dominant weight
    """
    if not wt.is_dominant():
        raise ValueError("the input must be a dominant weight")
    P = wt.parent()
    ranges = [range(c + 1) for c in weight_coefficients(wt)]
    return [weight_from_coefficients(P, reversed(coeffs))
            for coeffs in itertools.product(*reversed(ranges))]


def sub_weights_proper(wt):
    """
    Return the weights of :func:`sub_weights` which are neither `0`
    nor ``wt``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import sub_weights_proper
        sage: La = RootSystem(['G', 2]).weight_lattice().fundamental_weights()
        sage: sub_weights_proper(2*La[1])
        [Lambda[1]]
        sage: sub_weights_proper(La[2])
        []
    """
    return [v for v in sub_weights(wt) if v and v != wt]


@cached_function
def _simple_roots_inverse(cartan_type):
    """
    Return the inverse of the matrix whose rows are the simple roots
    written in the fundamental weights.
    """
    P = RootSystem(cartan_type).weight_lattice()
    alpha = P.simple_roots()
    I = cartan_type.index_set()
    return matrix(QQ, [[alpha[j][i] for i in I] for j in I]).inverse()


def root_coefficients(wt):
    r"""
    Return the coefficients of ``wt`` with respect to the simple roots.

    ``wt`` must lie in the root lattice.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import root_coefficients
        sage: P = RootSystem(['G', 2]).weight_lattice()
        sage: alpha = P.simple_roots()
        sage: root_coefficients(3*alpha[1] + 2*alpha[2])
        (3, 2)
    """
    ct = wt.parent().cartan_type()
    coeffs = vector(QQ, weight_coefficients(wt)) * _simple_roots_inverse(ct)
    return tuple(ZZ(c) for c in coeffs)


def root_to_weight(P, coeffs):
    r"""
    Return the root `\sum_i c_i \alpha_i` as an element of ``P``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import root_to_weight
        sage: P = RootSystem(['A', 2]).weight_lattice()
        sage: root_to_weight(P, (1, 1))
        Lambda[1] + Lambda[2]
    """
    alpha = P.simple_roots()
    return P.sum(c * alpha[i] for i, c in zip(P.index_set(), coeffs) if c)


def ambient_to_weight(P, mu, coroots):
    """
    Return the ambient space weight ``mu`` as an element of ``P``.

    The coordinates are the pairings with the simple ``coroots`` of the
    ambient space.
    """
    coeffs = [mu.scalar(coroots[i]) for i in P.index_set()]
    return weight_from_coefficients(P, coeffs)


@cached_function
def positive_roots_ascending_height(cartan_type):
    r"""
    Return the positive roots of ``cartan_type`` as coefficient tuples with
    respect to the simple roots, sorted by ascending height.

    The roots are found by closing the simple roots under the simple
    reflections; roots of equal height keep the order of discovery.

    EXAMPLES::

        sage: from basis_lie_highest_weight.weights import positive_roots_ascending_height
        sage: positive_roots_ascending_height(CartanType(['B', 2]))
        ((1, 0), (0, 1), (1, 1), (1, 2))
        sage: positive_roots_ascending_height(CartanType(['G', 2]))
        ((1, 0), (0, 1), (1, 1), (2, 1), (3, 1), (3, 2))
        sage: len(positive_roots_ascending_height(CartanType(['E', 6])))
        36
    """
    P = RootSystem(cartan_type).weight_lattice()
    alpha = P.simple_roots()
    I = cartan_type.index_set()
    roots = [tuple(ZZ(i == j) for j in I) for i in I]
    as_weight = {r: alpha[i] for r, i in zip(roots, I)}
    k = 0
    while k < len(roots):
        beta = roots[k]
        wt = as_weight[beta]
        for pos, j in enumerate(I):
            pairing = wt[j]
            if not pairing:
                continue
            gamma = list(beta)
            gamma[pos] -= pairing
            gamma = tuple(gamma)
            if gamma in as_weight or any(c < 0 for c in gamma):
                continue
            as_weight[gamma] = wt - pairing * alpha[j]
            roots.append(gamma)
        k += 1
    return tuple(sorted(roots, key=sum))
