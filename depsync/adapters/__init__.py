"""
Adapters — the narrow capabilities the pin pipeline needs from its caller.

    from depsync.adapters import Reporter, Prompter, NullReporter, StaticPrompter
"""

from depsync.adapters.base import NullReporter, Prompter, Reporter, StaticPrompter

__all__ = ["NullReporter", "Prompter", "Reporter", "StaticPrompter"]
