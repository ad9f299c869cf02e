r"""
Lattice points of weight spaces

The candidates for a weight space `\lambda - \mu` are the exponent vectors
`a \in \ZZ_{\geq 0}^N` with `\sum_i a_i \beta_i = \mu`, where the
`\beta_i` are the roots of the birational sequence. Since all `\beta_i` are
positive roots, there are only finitely many such vectors.

EXAMPLES::

    sage: from basis_lie_highest_weight.lattice_points import (
    ....:     get_lattice_points_of_weightspace)
    sage: roots = [(1, 0), (0, 1), (1, 1)]
    sage: sorted(get_lattice_points_of_weightspace(roots, (1, 1), []))
    [(0, 0, 1), (1, 1, 0)]
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

from basis_lie_highest_weight.weights import weight_coefficients


def compute_zero_coordinates(birational_seq, highest_weight):
    r"""
    Return the positions of the operators at the end of ``birational_seq``
    which annihilate the highest weight vector.

    The last operator acts first, so as long as `f_{\beta}v_{\lambda} = 0`,
    which happens exactly when the support of `\beta` does not meet the
    support of `\lambda`, the corresponding exponent has to vanish.

    EXAMPLES::

        sage: from basis_lie_highest_weight.birational_sequence import (
        ....:     BirationalSequence, operators_by_index)
        sage: from basis_lie_highest_weight.lattice_points import compute_zero_coordinates
        sage: ct = CartanType(['A', 3])
        sage: La = RootSystem(ct).weight_lattice().fundamental_weights()
        sage: seq = BirationalSequence(operators_by_index(ct, [4, 1, 2, 3]))
        sage: compute_zero_coordinates(seq, La[1])
        [3, 2]
        sage: compute_zero_coordinates(seq, La[2])
        [3]
        sage: compute_zero_coordinates(seq, La[1] + La[3])
        []
    """
    support = [c != 0 for c in weight_coefficients(highest_weight)]
    roots = birational_seq.root_coefficients()
    zero_coordinates = []
    for k in range(len(roots) - 1, -1, -1):
        if any(b and s for b, s in zip(roots[k], support)):
            break
        zero_coordinates.append(k)
    return zero_coordinates


def get_lattice_points_of_weightspace(roots, target, zero_coordinates):
    r"""
    Return all exponent vectors `a` with nonnegative entries such that
    `\sum_i a_i \beta_i` equals ``target``.

    INPUT:

    - ``roots`` -- a list of the coefficient tuples of the positive roots
      `\beta_i` with respect to the simple roots
    - ``target`` -- the coefficient tuple of an element of the root lattice
    - ``zero_coordinates`` -- positions `i` with `a_i = 0`

    OUTPUT:

    A list of tuples, each of which occurs once.

    EXAMPLES::

        sage: from basis_lie_highest_weight.lattice_points import (
        ....:     get_lattice_points_of_weightspace)
        sage: roots = [(1, 0), (0, 1), (1, 1), (1, 2)]
        sage: sorted(get_lattice_points_of_weightspace(roots, (2, 2), []))
        [(0, 0, 2, 0), (1, 0, 0, 1), (1, 1, 1, 0), (2, 2, 0, 0)]
        sage: sorted(get_lattice_points_of_weightspace(roots, (2, 2), [2]))
        [(1, 0, 0, 1), (2, 2, 0, 0)]
        sage: get_lattice_points_of_weightspace(roots, (0, 0), [])
        [(0, 0, 0, 0)]
        sage: get_lattice_points_of_weightspace(roots, (-1, 1), [])
        []
    """
    target = tuple(target)
    if any(c < 0 for c in target):
        return []
    n = len(roots)
    zero_coordinates = set(zero_coordinates)
    free = [i for i in range(n) if i not in zero_coordinates and any(roots[i])]
    # coordinates still reachable by the free operators from position p onwards
    reachable = [set() for _ in range(len(free) + 1)]
    for p in range(len(free) - 1, -1, -1):
        reachable[p] = reachable[p + 1] | {j for j, b in enumerate(roots[free[p]]) if b}

    points = []
    exponents = [0] * n

    def search(p, remaining):
        if all(c == 0 for c in remaining):
            points.append(tuple(exponents))
            return
        if p == len(free):
            return
        if any(c and j not in reachable[p] for j, c in enumerate(remaining)):
            return
        i = free[p]
        beta = roots[i]
        bound = min(remaining[j] // b for j, b in enumerate(beta) if b)
        for a in range(bound, -1, -1):
            exponents[i] = a
            search(p + 1, tuple(c - a * b for c, b in zip(remaining, beta)))
        exponents[i] = 0

    search(0, target)
    return points


def convert_lattice_points_to_monomials(ring, lattice_points):
    """
    Return the monomials of ``ring`` with the exponent vectors
    ``lattice_points``.

    EXAMPLES::

        sage: from basis_lie_highest_weight.lattice_points import (
        ....:     convert_lattice_points_to_monomials)
        sage: R = PolynomialRing(ZZ, 3, 'x')
        sage: convert_lattice_points_to_monomials(R, [(1, 0, 2), (0, 0, 0)])
        [x0*x2^2, 1]
    """
    return [ring.monomial(*a) for a in lattice_points]
