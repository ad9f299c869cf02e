# ****************************************************************************
#       Copyright (C) 2024 The BasisLieHighestWeight developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 2 of the License, or
# (at your option) any later version.
#                  https://www.gnu.org/licenses/
# ****************************************************************************

# Initialize the Sage library before any test module is imported.
import sage.all  # noqa: F401
