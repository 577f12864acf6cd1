"""Command auto-discovery and registration.

Scans rime_scheme/commands/ for modules that define a `command` object
of type Command. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing, falls back to explicit
imports from commands/__init__.py).
"""

import importlib
import pkgutil

from rime_scheme.core.types import Command, UnknownNameError

_registry: dict[str, Command] = {}

# Known command module names, used when frozen binaries hide the package
_COMMAND_MODULES = [
    'blend',
    'convert',
    'export',
    'import_color',
    'load',
    'platform',
    'prefs',
    'preview',
    'remove',
    'save',
    'saved',
    'set',
    'show',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import rime_scheme.commands as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _COMMAND_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'rime_scheme.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise UnknownNameError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()


def module_for(name: str) -> str:
    """Module name of a command (command names use '-', modules use '_')."""
    return name.replace('-', '_')
