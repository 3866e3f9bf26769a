"""Error raised for documentation model input that cannot be read."""


class ModelError(ValueError):
    """The YAML documentation model is malformed (missing root, bad def id, ...)."""
