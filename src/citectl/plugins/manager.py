"""Plugin discovery, law collection, and hook dispatch.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``citectl.plugins`` group, plus direct registration.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from citectl.plugins.hookspecs import CitectlHookSpec

if TYPE_CHECKING:
    from citectl.domain.clock import Clock
    from citectl.domain.laws import Law

PROJECT_NAME = "citectl"
ENTRY_POINT_GROUP = "citectl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CitectlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names of all registered plugins."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_laws(self, clock: Clock) -> list[Law]:
        """Gather law instances contributed by plugins, in registration order.

        A plugin that raises or returns something other than a list of
        :class:`Law` instances is skipped with a warning.
        """
        from citectl.domain.laws import Law

        laws: list[Law] = []
        for impl in self._pm.hook.register_laws.get_hookimpls():
            plugin_name = impl.plugin_name
            try:
                contributed = impl.function(clock=clock)
            except Exception:
                logger.warning("Failed to collect laws from plugin %s", plugin_name, exc_info=True)
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, list):
                logger.warning("Plugin %s returned non-list law registrations", plugin_name)
                continue
            for law in contributed:
                if not isinstance(law, Law):
                    logger.warning("Skipping non-Law object %r from plugin %s", law, plugin_name)
                    continue
                laws.append(law)
        return laws

    def notify_evaluated(self, issuer_name: str, citee_name: str, citation_count: int) -> None:
        """Dispatch ``post_evaluate``. Failures are logged, never raised."""
        try:
            self._pm.hook.post_evaluate(
                issuer_name=issuer_name,
                citee_name=citee_name,
                citation_count=citation_count,
            )
        except Exception:
            logger.warning("post_evaluate hook failed", exc_info=True)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly, which
        leaves ``self`` unbound when hooks are called.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
