"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Capabilities: named transformers added to the domain registry.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from strctl.plugins.hookspecs import StrctlHookSpec

PROJECT_NAME = "strctl"
ENTRY_POINT_GROUP = "strctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and transformer registration."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(StrctlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, builtins: bool = True) -> list[str]:
        """Discover entry-point plugins, register builtins, and load transformers.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if builtins:
            from strctl.plugins.builtins.case_plugin import CaseTransformPlugin

            if not self._pm.has_plugin("case"):
                self._pm.register(CaseTransformPlugin(), name="case")
        self._register_transformers()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._register_plugin_transformers(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
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

    def _register_transformers(self) -> None:
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            self._register_plugin_transformers(plugin, plugin_name)

    @staticmethod
    def _register_plugin_transformers(plugin: object, plugin_name: str) -> None:
        """Push the transformers exposed by one plugin into the domain registry."""
        from strctl.domain.transform import register_transformer

        hook = getattr(plugin, "register_transformers", None)
        if hook is None:
            return

        try:
            mapping = hook()
        except Exception:
            logger.warning(
                "Failed to collect transformers from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return

        if mapping is None:
            return
        if not isinstance(mapping, dict):
            logger.warning("Plugin %s returned non-dict transformer registrations", plugin_name)
            return

        for name, transformer in mapping.items():
            try:
                register_transformer(name, transformer)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping transformer registration %r from plugin %s",
                    name,
                    plugin_name,
                    exc_info=True,
                )
