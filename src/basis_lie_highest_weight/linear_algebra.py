r"""
Incremental row echelon forms

The span of the vectors found so far in a weight space is kept as a sparse
matrix in row echelon form over `\QQ`. Inserting a vector reduces it by the
pivot rows and reports whether it was linearly independent.
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
from sage.rings.rational_field import QQ


class SparseRowSpan(SageObject):
    r"""
    The span of sparse vectors over `\QQ` in row echelon form.

    Each row is stored as a dictionary ``{position: coefficient}`` whose
    smallest position is its pivot, with coefficient `1` there.

    EXAMPLES::

        sage: from basis_lie_highest_weight.linear_algebra import SparseRowSpan
        sage: S = SparseRowSpan()
        sage: S.insert({0: 1, 3: 2})
        True
        sage: S.insert({0: 3, 3: 6})
        False
        sage: S.insert(vector(ZZ, [0, 2, 0, 0]))
        True
        sage: S.insert({0: 1, 1: 1, 3: 2})
        False
        sage: S.rank()
        2
        sage: S.insert({})
        False
    """
    def __init__(self):
        """
        Initialize ``self``.
        """
        self._rows = {}

    def _repr_(self):
        """
        Return a string representation of ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.linear_algebra import SparseRowSpan
            sage: SparseRowSpan()
            Span of rank 0 over Rational Field
        """
        return "Span of rank {} over {}".format(self.rank(), QQ)

    def rank(self):
        """
        Return the dimension of ``self``.
        """
        return len(self._rows)

    def reduce(self, vec):
        """
        Return the reduction of ``vec`` by the rows of ``self``.

        The result is a dictionary, which is empty if and only if ``vec``
        lies in ``self``.

        EXAMPLES::

            sage: from basis_lie_highest_weight.linear_algebra import SparseRowSpan
            sage: S = SparseRowSpan()
            sage: S.insert({1: 2, 2: 1})
            True
            sage: sorted(S.reduce({1: 1, 4: 1}).items())
            [(2, -1/2), (4, 1)]
        """
        if not isinstance(vec, dict):
            vec = vec.dict()
        row = {k: QQ(c) for k, c in vec.items() if c}
        rows = self._rows
        while True:
            pivots = [k for k in row if k in rows]
            if not pivots:
                return row
            # Reducing by a pivot row only changes larger positions.
            p = min(pivots)
            c = row[p]
            for k, d in rows[p].items():
                v = row.get(k, 0) - c * d
                if v:
                    row[k] = v
                else:
                    del row[k]

    def insert(self, vec):
        """
        Add ``vec`` to ``self`` and return whether the rank increased.
        """
        row = self.reduce(vec)
        if not row:
            return False
        p = min(row)
        c = ~row[p]
        self._rows[p] = {k: c * d for k, d in row.items()}
        return True
