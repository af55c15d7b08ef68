"""Common literal values used across pagekit.

These constants keep the hiding convention and default locations in one place
so loaders, configuration, and tests can import the same values without
drifting. Intended for internal use within the pagekit package.

Examples
--------
>>> from pagekit import _constants
>>> "_drafts".startswith(_constants.HIDDEN_PREFIXES)
True
>>> _constants.DEFAULT_COMPONENTS_DIR
'_components'
"""

from pathlib import Path

HIDDEN_PREFIXES = (".", "_")
DEFAULT_CONFIG = Path("pagekit.yaml")
DEFAULT_SRC_DIR = "."
DEFAULT_COMPONENTS_DIR = "_components"
DEFAULT_PYGMENTS_STYLE = "monokai"
FRONT_MATTER_DELIMITER = "---"
