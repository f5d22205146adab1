#
# PROJECT: term3d
# MODULE: term3d/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class Term3DError(Exception):
    """Base error for the renderer."""


class ConfigError(Term3DError, ValueError):
    """Invalid RenderConfig value."""


class MeshError(Term3DError, ValueError):
    """Malformed mesh: wrong face arity, bad index or missing color."""


class DisplayInitError(Term3DError):
    """The display surface could not be initialised. Not recoverable."""
