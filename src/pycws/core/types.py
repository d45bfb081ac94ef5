"""Type aliases for PyCWS."""

from typing import TypeAlias
import numpy as np
from numpy.typing import NDArray

# Normalised label matrices hold Python str objects
LabelArray: TypeAlias = NDArray[np.object_]

# Label -> number of occurrences
FrequencyTable: TypeAlias = dict[str, int]
