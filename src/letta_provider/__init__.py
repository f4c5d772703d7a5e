"""Letta agents as a language-model backend for chat UI SDKs."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from letta_provider.core.interface.transpilers import (
        convert_to_letta_messages as convert_to_letta_messages,
    )
    from letta_provider.core.interface.transpilers import (
        convert_to_ui_messages as convert_to_ui_messages,
    )
    from letta_provider.provider import create_letta as create_letta

_LAZY_EXPORTS = {
    "convert_to_letta_messages": "letta_provider.core.interface.transpilers",
    "convert_to_ui_messages": "letta_provider.core.interface.transpilers",
    "create_letta": "letta_provider.provider",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'letta_provider' has no attribute {name!r}")
