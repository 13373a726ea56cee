"""Extension layer — import-site extractors and lifecycle hooks via pluggy.

Discovery: built-ins, entry points (``gointernal.plugins`` group) and
local files in ``.gointernal/plugins/``.
INVARIANT: Lifecycle plugin failures are warnings, never errors.
"""

from gointernal.plugins.hookspecs import hookimpl
from gointernal.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
