"""
typeid_sdk._registry
─────────────────────
Internal module registry — the single source of truth for which modules
exist and which names each one exports.

Adding a new module:
  1. Implement it in the right tier
  2. Add ``__sdk_export__`` to the module
  3. Add one tuple to TIER_MODULES below
  4. Re-export its names from ``typeid_sdk/__init__.py``
"""
from __future__ import annotations

import importlib
from typing import Any

# ---------------------------------------------------------------------------
# Ordered list of (tier_path, module_name) for all implemented modules.
# ---------------------------------------------------------------------------
TIER_MODULES: list[tuple[str, str]] = [
    # tier0_core — leaf modules, no dependency on the identifier layer
    ("tier0_core", "errors"),
    ("tier0_core", "config"),
    ("tier0_core", "logging"),
    ("tier0_core", "ids"),
    ("tier0_core", "base32"),
    # tier1_runtime — identifier grammar and integrations
    ("tier1_runtime", "typeid"),
    ("tier1_runtime", "validate"),
]


def collect_exports() -> dict[str, list[str]]:
    """
    Import every registered module and return its declared exports.

    Returns:
        Mapping of qualified module name to the ``exports`` list from its
        ``__sdk_export__``.

    Raises:
        LookupError: a registered module has no ``__sdk_export__`` or
        declares a name it does not define.
    """
    exports: dict[str, list[str]] = {}

    for tier_path, module_name in TIER_MODULES:
        qualified = f"typeid_sdk.{tier_path}.{module_name}"
        mod = importlib.import_module(qualified)

        export_meta: dict[str, Any] | None = getattr(mod, "__sdk_export__", None)
        if not export_meta:
            raise LookupError(f"{qualified} has no __sdk_export__")

        missing = [name for name in export_meta["exports"] if not hasattr(mod, name)]
        if missing:
            raise LookupError(f"{qualified} declares undefined exports: {missing}")

        exports[qualified] = list(export_meta["exports"])

    return exports
