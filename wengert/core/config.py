# wengert/core/config.py
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class TapeConfig:
    """Configuration for a Tape."""
    # Scalar type of every value, partial and adjoint recorded on the tape
    dtype: type = np.float64

    # Validate same-tape and same-generation use of handles.
    # Turning this off skips the checks; misuse is then unspecified.
    check_handles: bool = True

    # Label shown in reprs and log records
    name: Optional[str] = None

    def __post_init__(self):
        if not (isinstance(self.dtype, type) and issubclass(self.dtype, np.floating)):
            raise TypeError(
                f"TapeConfig.dtype must be a numpy floating type "
                f"(np.float32, np.float64, np.longdouble), but got {self.dtype!r}"
            )
