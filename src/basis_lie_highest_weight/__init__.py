r"""
Monomial bases of highest weight modules of simple Lie algebras
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

from basis_lie_highest_weight.monomial_basis import MonomialBasis
from basis_lie_highest_weight.module_data import SimpleModuleData, DemazureModuleData
from basis_lie_highest_weight.user_functions import (basis_lie_highest_weight,
                                                     basis_lie_highest_weight_operators,
                                                     basis_lie_highest_weight_lusztig,
                                                     basis_lie_highest_weight_string,
                                                     basis_lie_highest_weight_ffl,
                                                     basis_lie_highest_weight_nz,
                                                     basis_lie_highest_weight_demazure,
                                                     basis_coordinate_ring_kodaira,
                                                     basis_coordinate_ring_kodaira_ffl)

__all__ = ['MonomialBasis', 'SimpleModuleData', 'DemazureModuleData',
           'basis_lie_highest_weight', 'basis_lie_highest_weight_operators',
           'basis_lie_highest_weight_lusztig', 'basis_lie_highest_weight_string',
           'basis_lie_highest_weight_ffl', 'basis_lie_highest_weight_nz',
           'basis_lie_highest_weight_demazure', 'basis_coordinate_ring_kodaira',
           'basis_coordinate_ring_kodaira_ffl']
