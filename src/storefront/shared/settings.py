"""Access to the ``[custom]`` table of ``domain.toml``.

``domain.toml`` is the only place these values are defined.
"""

from protean.utils.globals import current_domain


def setting(key: str):
    """Return a custom setting of the active domain."""
    return current_domain.config["custom"][key]
