"""
package: mstair.vardump
"""

# <AUTOGEN_INIT>
from mstair.vardump import (
    base,
    dumper,
    xlogging,
)


__all__ = [
    "base",
    "dumper",
    "xlogging",
]
# </AUTOGEN_INIT>

from mstair.vardump.dumper.dumper_api import (
    DumpMode,
    dump,
    dump_as_json,
    dump_as_string,
    export,
)
from mstair.vardump.dumper.errors import (
    InvalidDebugFieldProviderError,
    InvalidModeError,
    VarDumpError,
)


__all__ += [
    "DumpMode",
    "InvalidDebugFieldProviderError",
    "InvalidModeError",
    "VarDumpError",
    "dump",
    "dump_as_json",
    "dump_as_string",
    "export",
]

__version__ = "0.1.0"
