from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Leading character on the sole argument that points at a params file.
PARAMS_FILE_MARKER: str = '@'

# Separator and escape used by `importpath=id` pairs.
PAIR_DELIM: str = '='
PAIR_ESCAPE: str = '\\'

GO_SUFFIX: str = '.go'
