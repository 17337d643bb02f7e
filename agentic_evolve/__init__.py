"""Pattern library engine: crystallize, store, match and compose code patterns."""

__version__ = "0.1.0"