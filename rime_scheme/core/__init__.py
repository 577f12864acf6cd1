"""rime_scheme.core — Foundation layer.

Contains the color codec, scheme types, derivation and (de)serialization,
preferences, reports and the preview renderer.
This module has NO dependencies on rime_scheme.commands or rime_scheme.registry.
Only stdlib and PIL are allowed here.
"""
