#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyPureFluid - Pure Fluid Equation of State Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import numpy as np

def convert_to_numpy(input_data):
    # Convert input data to a float numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data.astype(float)
    else:
        # Convert list, tuple, scalar, or other types to numpy array
        # Ensuring even scalars become arrays with one element
        return np.atleast_1d(np.asarray(input_data, dtype=float))

def process_input(input_data):
    # Hand back a plain float for single values, the array otherwise
    if isinstance(input_data, np.ndarray):
        if input_data.size == 1:
            return input_data.item()
        else:
            return input_data
    elif isinstance(input_data, list):
        if len(input_data) == 1:
            return input_data[0]
        else:
            return np.array(input_data)
    else:
        return input_data

def is_finite(*values) -> bool:
    """ True if every value is a finite real number """
    return all(np.isfinite(v) for v in values)
