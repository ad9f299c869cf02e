r"""
Matrices of the lowering operators

The vector attached to a monomial is computed in the tensor product

.. MATH::

    V(\omega_1)^{\otimes \lambda_1} \otimes \cdots
    \otimes V(\omega_n)^{\otimes \lambda_n},

whose first basis vector is a highest weight vector of weight `\lambda`
generating a copy of `V(\lambda)`. The fundamental modules and the action
of the root vectors on them are taken from GAP. In the Chevalley basis of
GAP these matrices have integer entries.

EXAMPLES::

    sage: from basis_lie_highest_weight.birational_sequence import operators_asc_height
    sage: from basis_lie_highest_weight.representation_matrices import (
    ....:     tensor_matrices_of_operators, highest_weight_vector, operator_columns, calc_vec)
    sage: ct = CartanType(['A', 2])
    sage: P = RootSystem(ct).weight_lattice()
    sage: La = P.fundamental_weights()
    sage: mats = tensor_matrices_of_operators(ct, La[1] + La[2], operators_asc_height(ct))
    sage: [M.dimensions() for M in mats]
    [(9, 9), (9, 9), (9, 9)]
    sage: v0 = highest_weight_vector(9)
    sage: R = PolynomialRing(ZZ, 3, 'x')
    sage: x0, x1, x2 = R.gens()
    sage: cols = operator_columns(mats)
    sage: calc_vec(v0, x0^2, cols) == 0
    True
    sage: calc_vec(v0, x0*x1, cols) == 0
    False
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

from sage.libs.gap.libgap import libgap
from sage.matrix.constructor import matrix
from sage.misc.cachefunc import cached_function
from sage.misc.verbose import verbose
from sage.modules.free_module import FreeModule
from sage.modules.free_module_element import vector
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ

from basis_lie_highest_weight.weights import (positive_roots_ascending_height,
                                              weight_coefficients)


@cached_function
def gap_lie_algebra(cartan_type):
    r"""
    Return the simple Lie algebra of ``cartan_type`` in GAP, together with
    its negative root vectors indexed by the simple root coefficients of
    the corresponding positive roots and the numbering of its nodes.

    The numbering is a tuple ``perm`` such that the simple root `\alpha_i`
    of Sage corresponds to the simple root of GAP at position
    ``perm[i-1]``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import gap_lie_algebra
        sage: L, root_vectors, perm = gap_lie_algebra(CartanType(['B', 2]))
        sage: sorted(root_vectors)
        [(0, 1), (1, 0), (1, 1), (1, 2)]
        sage: libgap.Dimension(L)
        10
    """
    rank = cartan_type.rank()
    L = libgap.SimpleLieAlgebra(cartan_type.type(), rank, libgap.Rationals)
    R = libgap.RootSystem(L)
    S = matrix(QQ, libgap.SimpleSystem(R).sage())
    Sinv = S.inverse()
    gap_roots = [tuple(ZZ(c) for c in vector(QQ, r) * Sinv)
                 for r in libgap.PositiveRoots(R).sage()]
    positive = set(positive_roots_ascending_height(cartan_type))
    for perm in itertools.permutations(range(rank)):
        renumbered = [tuple(r[perm[k]] for k in range(rank)) for r in gap_roots]
        if set(renumbered) == positive:
            break
    else:
        raise RuntimeError("the root system of GAP does not match {}".format(cartan_type))
    if perm != tuple(range(rank)):
        verbose("GAP numbers the nodes of {} as {}".format(cartan_type, perm), level=2)
    ys = libgap.NegativeRootVectors(R)
    root_vectors = {r: ys[k] for k, r in enumerate(renumbered)}
    return L, root_vectors, perm


@cached_function
def _gap_images_of_basis():
    """
    Return the GAP function listing the coefficients of the images of the
    basis vectors of a module under an element of the Lie algebra.
    """
    return libgap.function_factory("""function(B, x)
        return List(BasisVectors(B), b -> Coefficients(B, x^b));
    end""")


def _matrices_of_operators_gap(cartan_type, i, operators):
    r"""
    Return the integral sparse matrices of the operators ``operators``
    acting on the fundamental module `V(\omega_i)` from GAP.

    The matrices act on column vectors and the first basis vector is the
    highest weight vector. A non-integral matrix raises a :class:`TypeError`.
    """
    L, root_vectors, perm = gap_lie_algebra(cartan_type)
    I = cartan_type.index_set()
    gap_weight = [0] * len(I)
    gap_weight[perm[I.index(i)]] = 1
    V = libgap.HighestWeightModule(L, gap_weight)
    B = libgap.Basis(V)
    images = _gap_images_of_basis()
    # row k holds the image of the k-th basis vector
    return [matrix(QQ, images(B, root_vectors[beta]).sage(), sparse=True)
            .transpose().change_ring(ZZ) for beta in operators]


@cached_function
def fundamental_matrices_of_operators(cartan_type, i, operators):
    r"""
    Return the matrices of the operators ``operators`` (given by their
    simple root coefficients) on the fundamental module `V(\omega_i)`.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import (
        ....:     fundamental_matrices_of_operators)
        sage: mats = fundamental_matrices_of_operators(CartanType(['G', 2]), 1,
        ....:                                          ((1, 0), (3, 2)))
        sage: [M.dimensions() for M in mats]
        [(7, 7), (7, 7)]
        sage: all(M.base_ring() is ZZ and M.is_sparse() for M in mats)
        True
    """
    return tuple(_matrices_of_operators_gap(cartan_type, i, operators))


def kronecker_sum(A, B):
    r"""
    Return the matrix `A \otimes 1 + 1 \otimes B` of the action on the
    tensor product.

    Only the nonzero entries of ``A`` and ``B`` are visited, unlike
    :meth:`~sage.matrix.matrix2.Matrix.tensor_product`, which builds a
    block for every entry.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import kronecker_sum
        sage: A = matrix(ZZ, [[0, 0], [1, 0]], sparse=True)
        sage: kronecker_sum(A, A)
        [0 0 0 0]
        [1 0 0 0]
        [1 0 0 0]
        [0 1 1 0]
    """
    n = A.nrows()
    m = B.nrows()
    entries = {}
    for (r, c), a in A.dict().items():
        for k in range(m):
            entries[r * m + k, c * m + k] = a
    for (r, c), b in B.dict().items():
        for k in range(n):
            pos = (k * m + r, k * m + c)
            entries[pos] = entries.get(pos, 0) + b
    return matrix(ZZ, n * m, n * m, entries, sparse=True)


def tensor_matrices_of_operators(cartan_type, highest_weight, operators):
    r"""
    Return the matrices of the operators ``operators`` on the tensor
    product of fundamental modules of total highest weight
    ``highest_weight``.

    INPUT:

    - ``cartan_type`` -- a finite Cartan type
    - ``highest_weight`` -- a dominant weight
    - ``operators`` -- a list of positive roots in the root lattice

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import operators_asc_height
        sage: from basis_lie_highest_weight.representation_matrices import (
        ....:     tensor_matrices_of_operators)
        sage: ct = CartanType(['B', 2])
        sage: La = RootSystem(ct).weight_lattice().fundamental_weights()
        sage: mats = tensor_matrices_of_operators(ct, 2*La[2], operators_asc_height(ct))
        sage: len(mats), mats[0].dimensions()
        (4, (16, 16))
    """
    I = cartan_type.index_set()
    coeffs = tuple(tuple(beta[j] for j in I) for beta in operators)
    mats = [matrix(ZZ, 1, 1, sparse=True) for _ in coeffs]
    for i, mult in zip(I, weight_coefficients(highest_weight)):
        if mult <= 0:
            continue
        fundamental = fundamental_matrices_of_operators(cartan_type, i, coeffs)
        for _ in range(mult):
            mats = [kronecker_sum(A, B) for A, B in zip(mats, fundamental)]
    verbose("operators act on a space of dimension {}".format(mats[0].nrows()), level=2)
    return mats


def highest_weight_vector(dimension):
    """
    Return the first unit vector of the integral sparse free module of
    rank ``dimension``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import highest_weight_vector
        sage: highest_weight_vector(3)
        (1, 0, 0)
    """
    return FreeModule(ZZ, dimension, sparse=True).gen(0)


def operator_columns(matrices_of_operators):
    r"""
    Return the lists of sparse columns of ``matrices_of_operators``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import operator_columns
        sage: A = matrix(ZZ, [[0, 0], [1, 0]], sparse=True)
        sage: operator_columns([A])
        [[(0, 1), (0, 0)]]
    """
    return [M.sparse_columns() for M in matrices_of_operators]


def apply_operator(columns, vec):
    r"""
    Return the image of the sparse vector ``vec`` under the operator with
    columns ``columns``.

    Only the columns of the nonzero entries of ``vec`` are used.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import apply_operator
        sage: A = matrix(ZZ, [[0, 0, 0], [2, 0, 0], [0, 3, 0]], sparse=True)
        sage: v = vector(ZZ, [1, 1, 0], sparse=True)
        sage: apply_operator(A.sparse_columns(), v) == A * v
        True
    """
    return sum((c * columns[j] for j, c in vec.dict().items()), vec.parent().zero())


def calc_vec(v0, monomial, columns_of_operators):
    r"""
    Return the vector `f_1^{a_1} \cdots f_N^{a_N} v_0` attached to the
    monomial `x_1^{a_1} \cdots x_N^{a_N}`.

    The operators are given by their columns as in :func:`operator_columns`.
    The operator `f_N` is applied first.

    EXAMPLES::

        sage: from basis_lie_highest_weight.representation_matrices import (
        ....:     calc_vec, operator_columns)
        sage: A = matrix(ZZ, [[0, 0], [1, 0]], sparse=True)
        sage: B = matrix(ZZ, [[0, 1], [0, 0]], sparse=True)
        sage: cols = operator_columns([A, B])
        sage: v0 = vector(ZZ, [1, 0], sparse=True)
        sage: R = PolynomialRing(ZZ, 2, 'x')
        sage: x0, x1 = R.gens()
        sage: calc_vec(v0, x0, cols)
        (0, 1)
        sage: calc_vec(v0, x0*x1, cols)
        (0, 0)
        sage: calc_vec(v0, R.one(), cols)
        (1, 0)
    """
    vec = v0
    for columns, e in reversed(list(zip(columns_of_operators, monomial.degrees()))):
        for _ in range(e):
            if not vec:
                return vec
            vec = apply_operator(columns, vec)
    return vec
