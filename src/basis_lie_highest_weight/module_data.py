r"""
Module data

The modules whose monomial bases are computed: finite dimensional simple
highest weight modules `V(\lambda)` and Demazure modules `V_w(\lambda)`.

A module only needs to know its Lie algebra, its highest weight, its
dimension and its character (the multiplicity of each weight); the last
two are computed once and then cached.

EXAMPLES::

    sage: from basis_lie_highest_weight.module_data import SimpleModuleData
    sage: V = SimpleModuleData(['A', 2], [1, 1]); V
    Simple module of highest weight [1, 1] over Lie algebra of type A2
    sage: V.dim()
    8
    sage: sum(V.character().values())
    8
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

from sage.misc.abstract_method import abstract_method
from sage.misc.cachefunc import cached_method
from sage.structure.sage_object import SageObject
from sage.algebras.lie_algebras.lie_algebra import LieAlgebra
from sage.combinat.root_system.cartan_type import CartanType
from sage.combinat.root_system.root_system import RootSystem
from sage.combinat.root_system.weyl_characters import WeylCharacterRing, WeightRing
from sage.combinat.root_system.weyl_group import WeylGroup
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ

from basis_lie_highest_weight.weights import (weight_from_coefficients,
                                              weight_coefficients,
                                              ambient_to_weight)


def lie_type_string(cartan_type):
    """
    Return the short name of a finite Cartan type, such as ``'A2'``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.module_data import lie_type_string
        sage: lie_type_string(CartanType(['G', 2]))
        'G2'
    """
    return "{}{}".format(cartan_type.type(), cartan_type.rank())


class ModuleData(SageObject):
    r"""
    Abstract base class for the modules handled by the algorithm.

    INPUT:

    - ``cartan_type`` -- a finite Cartan type
    - ``highest_weight`` -- a dominant weight, either an element of the
      weight lattice or its list of coefficients with respect to the
      fundamental weights

    Subclasses implement :meth:`dim`, :meth:`character` and
    :meth:`with_highest_weight`.
    """
    def __init__(self, cartan_type, highest_weight):
        """
        Initialize ``self``.

        TESTS::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: SimpleModuleData(['A', 2], [1, -1])
            Traceback (most recent call last):
            ...
            ValueError: the highest weight must be dominant
            sage: SimpleModuleData(['A', 2], [1, 0, 0])
            Traceback (most recent call last):
            ...
            ValueError: the weight must have 2 coefficients
        """
        self._cartan_type = CartanType(cartan_type)
        if not self._cartan_type.is_finite():
            raise ValueError("the Cartan type must be finite")
        P = self.weight_lattice()
        if isinstance(highest_weight, (list, tuple)):
            highest_weight = weight_from_coefficients(P, highest_weight)
        else:
            highest_weight = P(highest_weight)
        if not highest_weight.is_dominant():
            raise ValueError("the highest weight must be dominant")
        self._highest_weight = highest_weight

    def cartan_type(self):
        """
        Return the Cartan type of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: SimpleModuleData(['B', 3], [0, 0, 1]).cartan_type()
            ['B', 3]
        """
        return self._cartan_type

    def root_system(self):
        """
        Return the root system of ``self``.
        """
        return RootSystem(self._cartan_type)

    def weight_lattice(self):
        """
        Return the weight lattice containing the weights of ``self``.
        """
        return self.root_system().weight_lattice()

    @cached_method
    def base_lie_algebra(self):
        """
        Return the simple Lie algebra acting on ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: L = SimpleModuleData(['A', 2], [1, 0]).base_lie_algebra()
            sage: L.dimension()
            8
        """
        return LieAlgebra(QQ, cartan_type=self._cartan_type)

    def highest_weight(self):
        """
        Return the highest weight of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: SimpleModuleData(['C', 3], [1, 0, 2]).highest_weight()
            Lambda[1] + 2*Lambda[3]
        """
        return self._highest_weight

    def _repr_weight(self):
        return repr(weight_coefficients(self._highest_weight))

    @cached_method
    def _character_ring(self):
        return WeylCharacterRing(self._cartan_type)

    def _ambient_highest_weight(self):
        """
        Return the highest weight of ``self`` in the ambient space of
        the Weyl character ring.
        """
        WCR = self._character_ring()
        fw = WCR.fundamental_weights()
        return WCR.space().sum(c * fw[i] for i, c in self._highest_weight)

    def _from_ambient_multiplicities(self, mults):
        """
        Convert a dictionary of multiplicities of ambient space weights
        into a dictionary indexed by the weight lattice.
        """
        P = self.weight_lattice()
        coroots = self._character_ring().space().simple_coroots()
        return {ambient_to_weight(P, mu, coroots): ZZ(m)
                for mu, m in mults.items() if m}

    @abstract_method
    def dim(self):
        """
        Return the dimension of ``self``.
        """

    @abstract_method
    def character(self):
        """
        Return the character of ``self`` as a dictionary mapping each
        weight to its multiplicity.
        """

    @abstract_method
    def with_highest_weight(self, highest_weight):
        """
        Return the module of the same kind as ``self`` with highest
        weight ``highest_weight``.
        """


class SimpleModuleData(ModuleData):
    r"""
    The simple module `V(\lambda)` of a simple Lie algebra.

    EXAMPLES::

        sage: from basis_lie_highest_weight.module_data import SimpleModuleData
        sage: V = SimpleModuleData(['G', 2], [1, 0])
        sage: V.dim()
        7
        sage: P = V.weight_lattice()
        sage: V.character()[P.zero()]
        1
        sage: SimpleModuleData(['A', 3], [2, 2, 3]).dim()
        1260
        sage: SimpleModuleData(['A', 2], [0, 0]).character()
        {0: 1}
    """
    def _repr_(self):
        """
        Return a string representation of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: SimpleModuleData(['C', 3], [1, 1, 1])
            Simple module of highest weight [1, 1, 1] over Lie algebra of type C3
        """
        return "Simple module of highest weight {} over Lie algebra of type {}".format(
            self._repr_weight(), lie_type_string(self._cartan_type))

    @cached_method
    def _irreducible_character(self):
        WCR = self._character_ring()
        return WCR(self._ambient_highest_weight())

    @cached_method
    def dim(self):
        """
        Return the dimension of ``self`` given by the Weyl dimension formula.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: SimpleModuleData(['C', 3], [1, 1, 1]).dim()
            512
        """
        return ZZ(self._irreducible_character().degree())

    @cached_method
    def character(self):
        """
        Return the weight multiplicities of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: V = SimpleModuleData(['A', 2], [1, 1])
            sage: sorted(V.character().values())
            [1, 1, 1, 1, 1, 1, 2]
        """
        mults = self._irreducible_character().weight_multiplicities()
        return self._from_ambient_multiplicities(mults)

    def with_highest_weight(self, highest_weight):
        """
        Return the simple module with highest weight ``highest_weight``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import SimpleModuleData
            sage: V = SimpleModuleData(['A', 2], [1, 1])
            sage: V.with_highest_weight(V.highest_weight() * 2)
            Simple module of highest weight [2, 2] over Lie algebra of type A2
        """
        return SimpleModuleData(self._cartan_type, highest_weight)


class DemazureModuleData(ModuleData):
    r"""
    The Demazure module `V_w(\lambda)` of a simple Lie algebra.

    Its character is obtained by applying the Demazure operator
    `\partial_w` to `e^{\lambda}`.

    INPUT:

    - ``cartan_type`` -- a finite Cartan type
    - ``highest_weight`` -- a dominant weight
    - ``weyl_group_elem`` -- an element of the Weyl group, or a reduced
      word of it

    EXAMPLES::

        sage: from basis_lie_highest_weight.module_data import DemazureModuleData
        sage: V = DemazureModuleData(['A', 2], [1, 0], [1]); V
        Demazure module of highest weight [1, 0] and Weyl group element s1
         over Lie algebra of type A2
        sage: V.dim()
        2
        sage: DemazureModuleData(['A', 2], [1, 1], [1, 2, 1]).dim()
        8
        sage: DemazureModuleData(['A', 2], [1, 1], []).dim()
        1
    """
    def __init__(self, cartan_type, highest_weight, weyl_group_elem):
        """
        Initialize ``self``.

        TESTS::

            sage: from basis_lie_highest_weight.module_data import DemazureModuleData
            sage: DemazureModuleData(['A', 2], [1, 0], [3])
            Traceback (most recent call last):
            ...
            ValueError: the reduced word must consist of elements of (1, 2)
        """
        ModuleData.__init__(self, cartan_type, highest_weight)
        W = WeylGroup(self.root_system().root_lattice(), prefix="s")
        if isinstance(weyl_group_elem, (list, tuple)):
            word = list(weyl_group_elem)
        else:
            word = list(weyl_group_elem.reduced_word())
        I = self._cartan_type.index_set()
        if any(i not in I for i in word):
            raise ValueError("the reduced word must consist of elements of {}".format(I))
        self._weyl_group_elem = W.from_reduced_word(word)

    def _repr_(self):
        """
        Return a string representation of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import DemazureModuleData
            sage: DemazureModuleData(['B', 2], [1, 1], [2, 1])
            Demazure module of highest weight [1, 1] and Weyl group element s2*s1
             over Lie algebra of type B2
        """
        return ("Demazure module of highest weight {} and Weyl group element {}"
                " over Lie algebra of type {}".format(self._repr_weight(),
                                                      self._weyl_group_elem,
                                                      lie_type_string(self._cartan_type)))

    def weyl_group_elem(self):
        """
        Return the Weyl group element of ``self``.
        """
        return self._weyl_group_elem

    @cached_method
    def _character_ring(self):
        # Demazure operators are only available in this style
        return WeylCharacterRing(self._cartan_type, style="coroots")

    @cached_method
    def character(self):
        """
        Return the weight multiplicities of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import DemazureModuleData
            sage: V = DemazureModuleData(['A', 2], [1, 0], [2, 1])
            sage: sorted(V.character().values())
            [1, 1, 1]
        """
        WR = WeightRing(self._character_ring())
        chi = WR.monomial(self._ambient_highest_weight())
        chi = chi.demazure(list(self._weyl_group_elem.reduced_word()))
        return self._from_ambient_multiplicities(chi.monomial_coefficients())

    @cached_method
    def dim(self):
        """
        Return the dimension of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.module_data import DemazureModuleData
            sage: DemazureModuleData(['A', 2], [1, 1], [1]).dim()
            2
        """
        return sum(self.character().values(), ZZ.zero())

    def with_highest_weight(self, highest_weight):
        """
        Return the Demazure module for the same Weyl group element with
        highest weight ``highest_weight``.
        """
        return DemazureModuleData(self._cartan_type, highest_weight,
                                  self._weyl_group_elem)
