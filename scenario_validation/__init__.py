"""Scenario-aware attribute validation engine.

Validators are built by a factory from a name, a data object, a set of
attribute names and parameters. Each validator decides whether it applies
to the object's current scenario, runs its rule per attribute, and routes
failures either to the object's own error list or to a pluggable error
sink.
"""

__version__ = "1.0.0"
