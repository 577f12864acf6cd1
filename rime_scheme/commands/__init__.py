"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by rime_scheme.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with command modules
import rime_scheme.commands.blend as _blend  # noqa: F401
import rime_scheme.commands.convert as _convert  # noqa: F401
import rime_scheme.commands.export as _export  # noqa: F401
import rime_scheme.commands.import_color as _import_color  # noqa: F401
import rime_scheme.commands.load as _load  # noqa: F401
import rime_scheme.commands.platform as _platform  # noqa: F401
import rime_scheme.commands.prefs as _prefs  # noqa: F401
import rime_scheme.commands.preview as _preview  # noqa: F401
import rime_scheme.commands.remove as _remove  # noqa: F401
import rime_scheme.commands.save as _save  # noqa: F401
import rime_scheme.commands.saved as _saved  # noqa: F401
import rime_scheme.commands.set as _set  # noqa: F401
import rime_scheme.commands.show as _show  # noqa: F401
