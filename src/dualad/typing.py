"""
#############################
Typing (:mod:`dualad.typing`)
#############################

This module provides type definitions commonly used between modules.

.. py:type:: RealLike

    Plain real number accepted wherever a dual number is expected. It is lifted
    into the algebra as a constant.

.. py:type:: FloatType

    Floating type of the components of a dual number.

"""

import numpy as np

type RealLike = int | float | np.floating
type FloatType = type[np.floating]
