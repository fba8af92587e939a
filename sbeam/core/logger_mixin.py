import logging
from tabulate import tabulate

from typing import Any


class LoggerMixin:
    """
    A mixin class providing a configurable logger to any subclass.

    The logger is named after the module and class of the instance. By
    default it only carries a ``NullHandler`` and the level ``WARNING``. When
    ``debug`` is set, a formatted ``StreamHandler`` is attached once and the
    level drops to ``DEBUG``. The logger is shared by all instances
    of a class: instances without ``debug`` keep the current level and
    handlers, so debug output stays on for the class once enabled.
    Dataclasses declaring a ``debug`` field are initialised through their
    ``__post_init__``.

    Parameters
    ----------
    *args : Any
        Positional arguments passed to the parent class (if any).
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.
    **kwargs : Any
        Additional keyword arguments passed to the parent class (if any).

    Attributes
    ----------
    logger : logging.Logger
        A logger instance configured for the specific subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # shared by all instances of the class, set the default only once
        if self._logger.level == logging.NOTSET:
            self._logger.setLevel(logging.WARNING)

        if debug:
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            # __init__ of the mixin was bypassed
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        has_debug = "debug" in getattr(cls, "__annotations__", {})

        # Dataclass with a debug field: hook into __post_init__
        orig_post = cls.__dict__.get("__post_init__")
        if orig_post is not None and has_debug:
            def wrapped_post(self, *a, **k):
                LoggerMixin.__init__(self, debug=getattr(self, "debug", False))
                return orig_post(self, *a, **k)

            cls.__post_init__ = wrapped_post
            return

        # Plain class with its own __init__
        orig_init = cls.__dict__.get("__init__")
        if orig_init is not None and orig_init is not LoggerMixin.__init__:

            def wrapped_init(self, *a, **k):
                LoggerMixin.__init__(self, debug=k.get("debug", False))
                return orig_init(self, *a, **k)

            cls.__init__ = wrapped_init


def table_samples(xs, ys, header=("x", "y"), decimals: int = 6):
    """Grid table of sampled ``(x, y)`` pairs of a response curve."""
    data = [[x, y] for x, y in zip(xs, ys)]
    return tabulate(data, headers=list(header), tablefmt="grid",
                    floatfmt=f".{decimals}f")


def table_values(values: dict, decimals: int = 6):
    """Grid table with one row per named scalar, e.g. support reactions."""
    data = [[name, value] for name, value in values.items()]
    return tabulate(data, headers=["Quantity", "Value"], tablefmt="grid",
                    floatfmt=f".{decimals}f")
