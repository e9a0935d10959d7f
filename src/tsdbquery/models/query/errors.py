class InvalidConfigurationError(ValueError):
    """
    Raised when a query component is built or validated with an illegal
    combination of fields.

    The message names the offending field and the rule it broke. There is no
    partial success: the caller must fix the configuration and build again.
    """

    pass
