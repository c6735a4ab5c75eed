"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold board rules that span several entities or need a
    repository, such as slug allocation, thread assembly and reaction toggles.
    """

    pass
