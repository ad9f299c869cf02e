r"""
Monomial orderings

The monomials `x_1^{a_1} \cdots x_N^{a_N}` live in a polynomial ring over
`\ZZ` whose term order is the chosen monomial ordering. The weighted orders
use the heights of the roots of the birational sequence as weights.

EXAMPLES::

    sage: from basis_lie_highest_weight.birational_sequence import (
    ....:     BirationalSequence, operators_asc_height)
    sage: from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
    sage: seq = BirationalSequence(operators_asc_height(CartanType(['A', 2])))
    sage: MonomialOrdering('wdegrevlex', seq)
    wdegrevlex([x1, x2, x3], [1, 1, 2])
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

from functools import cmp_to_key

from sage.structure.sage_object import SageObject
from sage.rings.integer_ring import ZZ
from sage.rings.polynomial.polynomial_ring_constructor import PolynomialRing
from sage.rings.polynomial.term_order import TermOrder

UNWEIGHTED_ORDERINGS = ('lex', 'invlex', 'deglex', 'degrevlex',
                        'neglex', 'negdeglex', 'negdegrevlex')
WEIGHTED_ORDERINGS = ('wdeglex', 'wdegrevlex', 'negwdeglex', 'negwdegrevlex')
MONOMIAL_ORDERINGS = UNWEIGHTED_ORDERINGS + WEIGHTED_ORDERINGS


class MonomialOrdering(SageObject):
    """
    A monomial ordering on the monomials attached to a birational sequence.

    INPUT:

    - ``name`` -- one of :data:`MONOMIAL_ORDERINGS`
    - ``birational_seq`` -- a :class:`BirationalSequence`

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import (
        ....:     BirationalSequence, operators_asc_height)
        sage: from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
        sage: seq = BirationalSequence(operators_asc_height(CartanType(['A', 2])))
        sage: ordering = MonomialOrdering('degrevlex', seq); ordering
        degrevlex([x1, x2, x3])
        sage: x1, x2, x3 = ordering.ring().gens()
        sage: ordering.sorted([x1*x2, x3, x1, ordering.ring().one()])
        [1, x3, x1, x1*x2]

    TESTS::

        sage: MonomialOrdering('revlex', seq)
        Traceback (most recent call last):
        ...
        ValueError: unknown monomial ordering revlex
    """
    def __init__(self, name, birational_seq):
        """
        Initialize ``self``.
        """
        name = str(name)
        if name not in MONOMIAL_ORDERINGS:
            raise ValueError("unknown monomial ordering {}".format(name))
        n = len(birational_seq)
        self._name = name
        if name in WEIGHTED_ORDERINGS:
            self._weights = birational_seq.heights()
            term_order = TermOrder(name, self._weights)
        else:
            self._weights = None
            term_order = TermOrder(name, n)
        names = ['x{}'.format(i) for i in range(1, n + 1)]
        self._ring = PolynomialRing(ZZ, n, names, order=term_order)

    def _repr_(self):
        """
        Return a string representation of ``self``.
        """
        ret = "{}({}".format(self._name, list(self._ring.gens()))
        if self._weights is not None:
            ret += ", {}".format(list(self._weights))
        return ret + ")"

    def name(self):
        """
        Return the name of ``self``.
        """
        return self._name

    def weights(self):
        """
        Return the weights of ``self`` or ``None`` if ``self`` is not
        a weighted ordering.
        """
        return self._weights

    def ring(self):
        """
        Return the polynomial ring containing the monomials.
        """
        return self._ring

    def compare(self, m1, m2):
        """
        Return `-1`, `0` or `1` according to ``m1`` being smaller, equal or
        larger than ``m2``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.birational_sequence import (
            ....:     BirationalSequence, operators_asc_height)
            sage: from basis_lie_highest_weight.monomial_ordering import MonomialOrdering
            sage: seq = BirationalSequence(operators_asc_height(CartanType(['A', 2])))
            sage: ordering = MonomialOrdering('neglex', seq)
            sage: x1, x2, x3 = ordering.ring().gens()
            sage: ordering.compare(x1, ordering.ring().one())
            -1
        """
        if m1 == m2:
            return 0
        return -1 if m1 < m2 else 1

    def sorted(self, monomials):
        """
        Return the ``monomials`` sorted increasingly with respect to ``self``.
        """
        return sorted(monomials, key=cmp_to_key(self.compare))

    def monomial(self, exponents):
        """
        Return the monomial with exponent vector ``exponents``.
        """
        return self._ring.monomial(*exponents)
