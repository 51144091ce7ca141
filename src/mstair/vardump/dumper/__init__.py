"""
package: mstair.vardump.dumper
"""

# <AUTOGEN_INIT>
from mstair.vardump.dumper import dumper_api
from mstair.vardump.dumper import errors
from mstair.vardump.dumper import escape_codec
from mstair.vardump.dumper import export_engine
from mstair.vardump.dumper import function_source
from mstair.vardump.dumper import highlighter
from mstair.vardump.dumper import identity_registry
from mstair.vardump.dumper import json_renderer
from mstair.vardump.dumper import model
from mstair.vardump.dumper import structural

__all__ = ['dumper_api', 'errors', 'escape_codec', 'export_engine',
           'function_source', 'highlighter', 'identity_registry',
           'json_renderer', 'model', 'structural']
# </AUTOGEN_INIT>
