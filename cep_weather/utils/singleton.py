class Singleton:
    """
    Base class for process-wide service instances.

    Subclasses are instantiated once and the same object is returned on every
    later construction, keyed by class in ``_instances``.
    """

    _instances = {}

    def __new__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__new__(cls)
        return cls._instances[cls]
