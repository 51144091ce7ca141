"""
package: mstair.vardump.base
"""

# <AUTOGEN_INIT>
from mstair.vardump.base import (
    config,
    constants,
    types,
)


__all__ = [
    "config",
    "constants",
    "types",
]
# </AUTOGEN_INIT>
