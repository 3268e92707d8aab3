"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the board voting rules that span more than one
    entity (a suggestion and its board, a vote and its suggestion).
    """

    pass
