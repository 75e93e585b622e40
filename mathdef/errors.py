"""Exceptions raised by the framework and the games."""


class ConfigurationError(ValueError):
    """Invalid settings supplied when a game or generator is built.

    Raised from constructors only; a game that was built successfully
    never raises this during a tick.
    """
