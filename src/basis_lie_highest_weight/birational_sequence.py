r"""
Birational sequences

A birational sequence is a sequence `\beta_1, \ldots, \beta_N` of positive
roots. The monomial `x_1^{a_1} \cdots x_N^{a_N}` stands for the vector
`f_{\beta_1}^{a_1} \cdots f_{\beta_N}^{a_N} v_{\lambda}`, where
`f_{\beta}` is a root vector of the negative root `-\beta`.

This module also contains the functions producing the usual birational
sequences: all positive roots by height, a subsequence given by indices or
simple root coefficients, and the sequences attached to a reduced
expression of the longest element of the Weyl group.

EXAMPLES::

    sage: from basis_lie_highest_weight.birational_sequence import (
    ....:     BirationalSequence, operators_lusztig)
    sage: ops = operators_lusztig(CartanType(['A', 2]), [1, 2, 1])
    sage: seq = BirationalSequence(ops); seq
    Birational sequence of length 3 over Lie algebra of type A2
     given by the roots [[1, 0], [1, 1], [0, 1]]
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

from sage.misc.cachefunc import cached_method
from sage.structure.sage_object import SageObject
from sage.combinat.root_system.root_system import RootSystem
from sage.combinat.root_system.weyl_group import WeylGroup
from sage.rings.integer_ring import ZZ

from basis_lie_highest_weight.weights import (positive_roots_ascending_height,
                                              root_to_weight)
from basis_lie_highest_weight.module_data import lie_type_string


class BirationalSequence(SageObject):
    """
    A sequence of positive roots indexing the variables of the monomials.

    INPUT:

    - ``operators`` -- a nonempty list of positive roots in the root lattice
    """
    def __init__(self, operators):
        """
        Initialize ``self``.

        TESTS::

            sage: from basis_lie_highest_weight.birational_sequence import BirationalSequence
            sage: BirationalSequence([])
            Traceback (most recent call last):
            ...
            ValueError: the birational sequence must not be empty
        """
        operators = tuple(operators)
        if not operators:
            raise ValueError("the birational sequence must not be empty")
        self._root_lattice = operators[0].parent()
        self._cartan_type = self._root_lattice.cartan_type()
        self._operators = operators

    def _repr_(self):
        """
        Return a string representation of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.birational_sequence import (
            ....:     BirationalSequence, operators_asc_height)
            sage: BirationalSequence(operators_asc_height(CartanType(['B', 2])))
            Birational sequence of length 4 over Lie algebra of type B2
             given by the roots [[1, 0], [0, 1], [1, 1], [1, 2]]
        """
        return ("Birational sequence of length {} over Lie algebra of type {}"
                " given by the roots {}".format(len(self),
                                                lie_type_string(self._cartan_type),
                                                [list(c) for c in self.root_coefficients()]))

    def __len__(self):
        """
        Return the number of operators of ``self``.
        """
        return len(self._operators)

    def cartan_type(self):
        """
        Return the Cartan type of ``self``.
        """
        return self._cartan_type

    def operators_as_roots(self):
        """
        Return the operators of ``self`` as elements of the root lattice.

        EXAMPLES::

            sage: from basis_lie_highest_weight.birational_sequence import (
            ....:     BirationalSequence, operators_by_index)
            sage: seq = BirationalSequence(operators_by_index(CartanType(['A', 2]), [3, 1]))
            sage: seq.operators_as_roots()
            (alpha[1] + alpha[2], alpha[1])
        """
        return self._operators

    @cached_method
    def root_coefficients(self):
        """
        Return the coefficients of the operators of ``self`` with respect
        to the simple roots.
        """
        I = self._cartan_type.index_set()
        return tuple(tuple(beta[i] for i in I) for beta in self._operators)

    @cached_method
    def operators_as_weights(self):
        """
        Return the operators of ``self`` as elements of the weight lattice.

        EXAMPLES::

            sage: from basis_lie_highest_weight.birational_sequence import (
            ....:     BirationalSequence, operators_asc_height)
            sage: seq = BirationalSequence(operators_asc_height(CartanType(['A', 2])))
            sage: seq.operators_as_weights()
            (2*Lambda[1] - Lambda[2], -Lambda[1] + 2*Lambda[2], Lambda[1] + Lambda[2])
        """
        P = RootSystem(self._cartan_type).weight_lattice()
        return tuple(root_to_weight(P, c) for c in self.root_coefficients())

    @cached_method
    def heights(self):
        """
        Return the heights of the operators of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.birational_sequence import (
            ....:     BirationalSequence, operators_asc_height)
            sage: seq = BirationalSequence(operators_asc_height(CartanType(['G', 2])))
            sage: seq.heights()
            (1, 1, 2, 3, 4, 5)
        """
        return tuple(ZZ(sum(c)) for c in self.root_coefficients())

    def weight(self, monomial):
        r"""
        Return the weight `\sum_i a_i \beta_i` of the monomial
        `x_1^{a_1} \cdots x_N^{a_N}`.

        The vector of ``monomial`` lies in the weight space of the highest
        weight minus this weight.

        EXAMPLES::

            sage: from basis_lie_highest_weight.birational_sequence import (
            ....:     BirationalSequence, operators_asc_height)
            sage: seq = BirationalSequence(operators_asc_height(CartanType(['A', 2])))
            sage: R = PolynomialRing(ZZ, 3, 'x')
            sage: x0, x1, x2 = R.gens()
            sage: seq.weight(x0 * x2^2)
            4*Lambda[1] + Lambda[2]
        """
        P = RootSystem(self._cartan_type).weight_lattice()
        return P.sum(e * wt for e, wt in zip(monomial.degrees(), self.operators_as_weights())
                     if e)


def _positive_roots(cartan_type):
    """
    Return the positive roots of ``cartan_type`` in the root lattice,
    sorted by ascending height.
    """
    Q = RootSystem(cartan_type).root_lattice()
    return [Q._from_dict({i: c for i, c in zip(cartan_type.index_set(), coeffs) if c})
            for coeffs in positive_roots_ascending_height(cartan_type)]


def operators_asc_height(cartan_type):
    """
    Return all positive roots of ``cartan_type`` in ascending height.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_asc_height
        sage: operators_asc_height(CartanType(['A', 2]))
        [alpha[1], alpha[2], alpha[1] + alpha[2]]
    """
    return _positive_roots(cartan_type)


def operators_desc_height(cartan_type):
    """
    Return all positive roots of ``cartan_type`` in descending height.

    The simple roots are at the end of this sequence, which makes it a good
    ordering.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_desc_height
        sage: operators_desc_height(CartanType(['A', 2]))
        [alpha[1] + alpha[2], alpha[2], alpha[1]]
    """
    return list(reversed(_positive_roots(cartan_type)))


def operators_by_index(cartan_type, birational_seq):
    """
    Return the positive roots of ``cartan_type`` at the (`1`-based)
    positions ``birational_seq`` of :func:`operators_asc_height`.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_by_index
        sage: operators_by_index(CartanType(['A', 2]), [1, 2, 1])
        [alpha[1], alpha[2], alpha[1]]

    TESTS::

        sage: operators_by_index(CartanType(['A', 2]), [4])
        Traceback (most recent call last):
        ...
        ValueError: the operator indices must be between 1 and 3
    """
    roots = _positive_roots(cartan_type)
    if any(not 1 <= i <= len(roots) for i in birational_seq):
        raise ValueError("the operator indices must be between 1 and {}".format(len(roots)))
    return [roots[i - 1] for i in birational_seq]


def operators_by_simple_roots(cartan_type, birational_seq):
    """
    Return the roots of ``cartan_type`` with the simple root coefficients
    listed in ``birational_seq``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_by_simple_roots
        sage: operators_by_simple_roots(CartanType(['B', 2]), [[1, 2], [0, 1]])
        [alpha[1] + 2*alpha[2], alpha[2]]

    TESTS::

        sage: operators_by_simple_roots(CartanType(['B', 2]), [[2, 1]])
        Traceback (most recent call last):
        ...
        ValueError: only positive roots are allowed as input
    """
    roots = _positive_roots(cartan_type)
    positive = dict(zip(positive_roots_ascending_height(cartan_type), roots))
    operators = []
    for coeffs in birational_seq:
        coeffs = tuple(ZZ(c) for c in coeffs)
        if coeffs not in positive:
            raise ValueError("only positive roots are allowed as input")
        operators.append(positive[coeffs])
    return operators


def _check_reduced_word(cartan_type, reduced_expression):
    I = cartan_type.index_set()
    if any(i not in I for i in reduced_expression):
        raise ValueError("the reduced expression must consist of elements of {}".format(I))


def operators_lusztig(cartan_type, reduced_expression):
    r"""
    Return the birational sequence of the Lusztig parametrization attached
    to the reduced expression `w_0 = s_{i_1} \cdots s_{i_N}`.

    The sequence consists of the roots
    `\beta_k = s_{i_1} \cdots s_{i_{k-1}}(\alpha_{i_k})`.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_lusztig
        sage: operators_lusztig(CartanType(['A', 2]), [1, 2, 1])
        [alpha[1], alpha[1] + alpha[2], alpha[2]]

    TESTS::

        sage: operators_lusztig(CartanType(['A', 2]), [1, 1])
        Traceback (most recent call last):
        ...
        ValueError: only positive roots may occur here
    """
    _check_reduced_word(cartan_type, reduced_expression)
    Q = RootSystem(cartan_type).root_lattice()
    W = WeylGroup(Q, prefix="s")
    alpha = Q.simple_roots()
    positive = set(_positive_roots(cartan_type))
    operators = []
    for k, i in enumerate(reduced_expression):
        w = W.from_reduced_word(list(reduced_expression[:k]))
        root = w.action(alpha[i])
        if root not in positive:
            raise ValueError("only positive roots may occur here")
        operators.append(root)
    return operators


def operators_string(cartan_type, reduced_expression):
    r"""
    Return the simple roots `\alpha_{i_1}, \ldots, \alpha_{i_N}` of the
    reduced expression `w_0 = s_{i_1} \cdots s_{i_N}`.

    This is the birational sequence of the string parametrization.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_string
        sage: operators_string(CartanType(['A', 2]), [2, 1, 2])
        [alpha[2], alpha[1], alpha[2]]
    """
    _check_reduced_word(cartan_type, reduced_expression)
    alpha = RootSystem(cartan_type).root_lattice().simple_roots()
    return [alpha[i] for i in reduced_expression]
