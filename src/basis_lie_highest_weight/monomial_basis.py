r"""
Monomial bases

The result of the computations of this package: a set of monomials
indexing a basis of a module, together with the data it was computed from.

EXAMPLES::

    sage: from basis_lie_highest_weight import basis_lie_highest_weight
    sage: mb = basis_lie_highest_weight('A', 2, [1, 0])
    sage: mb
    Monomial basis of a highest weight module
      of highest weight [1, 0]
      of dimension 3
      with monomial ordering degrevlex([x1, x2, x3])
    over Lie algebra of type A2
      where the used birational sequence consists of the following roots (given as coefficients w.r.t. alpha_i):
        [1, 0]
        [0, 1]
        [1, 1]
      and the basis was generated by Minkowski sums of the bases of the following highest weight modules:
        [1, 0]
    sage: list(mb)
    [1, x3, x1]
    sage: from basis_lie_highest_weight import MonomialBasis
    sage: MonomialBasis.options.display = 'short'
    sage: mb
    Monomial basis of a highest weight module with highest weight [1, 0]
     over Lie algebra of type A2
    sage: MonomialBasis.options._reset()
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

from sage.structure.sage_object import SageObject
from sage.structure.global_options import GlobalOptions

from basis_lie_highest_weight.module_data import DemazureModuleData, lie_type_string
from basis_lie_highest_weight.monomial_ordering import MONOMIAL_ORDERINGS
from basis_lie_highest_weight.weights import weight_coefficients


class MonomialBasis(SageObject):
    r"""
    A monomial basis of a module.

    The monomial `x_1^{a_1} \cdots x_N^{a_N}` stands for the vector
    `f_{\beta_1}^{a_1} \cdots f_{\beta_N}^{a_N} v_{\lambda}`, where
    `\beta_1, \ldots, \beta_N` is the birational sequence.

    INPUT:

    - ``module_data`` -- a :class:`~basis_lie_highest_weight.module_data.ModuleData`
    - ``birational_seq`` -- a
      :class:`~basis_lie_highest_weight.birational_sequence.BirationalSequence`
    - ``monomial_ordering`` -- a
      :class:`~basis_lie_highest_weight.monomial_ordering.MonomialOrdering`
    - ``monomials`` -- the monomials of the basis
    - ``algorithm`` -- the function which computed the basis
    - ``minkowski_gens`` -- the highest weights whose bases were not
      obtained as Minkowski sums
    - ``new_monomials`` -- (default: ``None``) the monomials which are not
      products of monomials of smaller degree

    EXAMPLES::

        sage: from basis_lie_highest_weight import basis_lie_highest_weight
        sage: mb = basis_lie_highest_weight('A', 2, [1, 1])
        sage: len(mb)
        8
        sage: x1, x2, x3 = mb.monomial_ordering().ring().gens()
        sage: x3^2 in mb
        True
        sage: x1^2 in mb
        False
        sage: mb.minkowski_gens()
        [Lambda[1], Lambda[2]]
    """
    class options(GlobalOptions):
        r"""
        Sets and displays the options for monomial bases.

        If no parameters are set, then the function returns a copy of
        the options dictionary.

        The ``options`` to monomial bases can be accessed as the method
        :obj:`MonomialBasis.options` of :class:`MonomialBasis`.

        @OPTIONS@

        EXAMPLES::

            sage: from basis_lie_highest_weight import MonomialBasis
            sage: MonomialBasis.options.monomial_ordering == "degrevlex"
            True
            sage: MonomialBasis.options.monomial_ordering = 'invlex'
            sage: MonomialBasis.options.monomial_ordering == "invlex"
            True
            sage: MonomialBasis.options._reset()
        """
        NAME = 'MonomialBasis'
        module = 'basis_lie_highest_weight.monomial_basis'
        display = dict(default="long",
                       description='Specifies how monomial bases should be printed',
                       values=dict(long='describe the module, the birational sequence and the Minkowski generators',
                                   short='a one line description'),
                       case_sensitive=False)
        monomial_ordering = dict(default="degrevlex",
                                 description='The monomial ordering used when none is given',
                                 checker=lambda x: x in MONOMIAL_ORDERINGS)

    def __init__(self, module_data, birational_seq, monomial_ordering, monomials,
                 algorithm, minkowski_gens, new_monomials=None):
        """
        Initialize ``self``.
        """
        self._module_data = module_data
        self._birational_seq = birational_seq
        self._monomial_ordering = monomial_ordering
        self._monomials = frozenset(monomials)
        self._algorithm = algorithm
        self._minkowski_gens = list(minkowski_gens)
        self._new_monomials = None if new_monomials is None else list(new_monomials)

    def _is_demazure(self):
        return isinstance(self._module_data, DemazureModuleData)

    def _repr_(self):
        """
        Return a string representation of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight import basis_lie_highest_weight_demazure
            sage: basis_lie_highest_weight_demazure('A', 2, [1, 0], [1])
            Monomial basis of a Demazure module
              of highest weight [1, 0]
              with Weyl group element s1
              of dimension 2
              with monomial ordering degrevlex([x1, x2, x3])
            over Lie algebra of type A2
              where the used birational sequence consists of the following roots (given as coefficients w.r.t. alpha_i):
                [1, 0]
                [0, 1]
                [1, 1]
              and the basis was generated by Minkowski sums of the bases of the following Demazure modules:
                [1, 0]
        """
        kind = "Demazure module" if self._is_demazure() else "highest weight module"
        hw = weight_coefficients(self.highest_weight())
        lie_type = lie_type_string(self.cartan_type())
        if self.options.display == "short":
            ret = "Monomial basis of a {} with highest weight {}".format(kind, hw)
            if self._is_demazure():
                ret += " and Weyl group element {}".format(self._module_data.weyl_group_elem())
            return ret + " over Lie algebra of type {}".format(lie_type)

        lines = ["Monomial basis of a {}".format(kind),
                 "  of highest weight {}".format(hw)]
        if self._is_demazure():
            lines.append("  with Weyl group element {}".format(self._module_data.weyl_group_elem()))
        lines.append("  of dimension {}".format(self.dimension()))
        lines.append("  with monomial ordering {}".format(self._monomial_ordering))
        lines.append("over Lie algebra of type {}".format(lie_type))
        lines.append("  where the used birational sequence consists of the following roots"
                     " (given as coefficients w.r.t. alpha_i):")
        lines.extend("    {}".format(list(c)) for c in self._birational_seq.root_coefficients())
        if self._minkowski_gens:
            lines.append("  and the basis was generated by Minkowski sums of the bases"
                         " of the following {}s:".format(kind))
            lines.extend("    {}".format(weight_coefficients(gen)) for gen in self._minkowski_gens)
        return "\n".join(lines)

    def module_data(self):
        """
        Return the module whose basis is ``self``.
        """
        return self._module_data

    def base_lie_algebra(self):
        """
        Return the Lie algebra acting on the module of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight import basis_lie_highest_weight
            sage: basis_lie_highest_weight('B', 2, [1, 0]).base_lie_algebra()
            Lie algebra of ['B', 2] in the Chevalley basis
        """
        return self._module_data.base_lie_algebra()

    def cartan_type(self):
        """
        Return the Cartan type of the Lie algebra of ``self``.
        """
        return self._module_data.cartan_type()

    def highest_weight(self):
        """
        Return the highest weight of the module of ``self``.
        """
        return self._module_data.highest_weight()

    def dimension(self):
        """
        Return the number of monomials of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight import basis_lie_highest_weight
            sage: basis_lie_highest_weight('G', 2, [1, 0]).dimension()
            7
        """
        return len(self._monomials)

    dim = dimension

    def __len__(self):
        """
        Return the number of monomials of ``self``.
        """
        return len(self._monomials)

    def __iter__(self):
        """
        Iterate over the monomials of ``self`` in increasing order with
        respect to the monomial ordering.
        """
        return iter(self._monomial_ordering.sorted(self._monomials))

    def __contains__(self, monomial):
        """
        Return whether ``monomial`` belongs to ``self``.
        """
        return monomial in self._monomials

    def monomial_ordering(self):
        """
        Return the monomial ordering of ``self``.
        """
        return self._monomial_ordering

    def birational_sequence(self):
        """
        Return the birational sequence of ``self``.
        """
        return self._birational_seq

    def monomials(self):
        """
        Return the set of monomials of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight import basis_lie_highest_weight
            sage: sorted(basis_lie_highest_weight('A', 2, [0, 0]).monomials())
            [1]
        """
        return self._monomials

    def minkowski_gens(self):
        """
        Return the highest weights whose bases were not obtained as
        Minkowski sums of bases of smaller highest weights.

        The weights are sorted by the sum of their coefficients first.
        """
        return list(self._minkowski_gens)

    def new_monomials(self):
        """
        Return the monomials of ``self`` which are not products of
        monomials of bases of smaller degree, or ``None``.

        This is only set for bases of the homogeneous coordinate ring.
        """
        if self._new_monomials is None:
            return None
        return list(self._new_monomials)

    def algorithm(self):
        """
        Return the function which computed ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight import basis_lie_highest_weight
            sage: basis_lie_highest_weight('A', 1, [2]).algorithm().__name__
            'basis_lie_highest_weight_compute'
        """
        return self._algorithm
