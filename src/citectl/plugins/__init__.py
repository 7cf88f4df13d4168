"""Extension layer — third-party laws via pluggy.

Discovery: entry_points (pip-installed) in the ``citectl.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from citectl.plugins.manager import PluginManager

__all__ = ["PluginManager"]
