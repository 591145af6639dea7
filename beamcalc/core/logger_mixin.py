import logging

from tabulate import tabulate


class LoggerMixin:
    """
    A mixin class providing a configurable logger to any subclass.

    The logger is created lazily on first access and is named after the
    concrete class (``<module>.<class>``). Without further configuration it
    only carries a :any:`logging.NullHandler` and the WARNING level. If the
    instance has a truthy ``debug`` attribute, a
    :any:`logging.StreamHandler` with the shared formatter is attached and
    the level is lowered to DEBUG.

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

    def _setup_logger(self, debug: bool = False) -> logging.Logger:
        logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        logger.propagate = False

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        logger.setLevel(logging.WARNING)

        if debug:
            # Ensure a StreamHandler exists only once
            if not any(isinstance(h, logging.StreamHandler)
                       for h in logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                logger.addHandler(sh)
            logger.setLevel(logging.DEBUG)

        logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )
        return logger

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if "_logger" not in self.__dict__:
            self.__dict__["_logger"] = self._setup_logger(
                debug=getattr(self, "debug", False)
            )
        return self.__dict__["_logger"]


def table_reactions(reactions, decimals: int = 6):
    header = ["M1 (kN-m)", "R1 (kN)", "R2 (kN)", "R3 (kN)", "Sum (kN)"]
    data = [[reactions.M1, reactions.R1, reactions.R2, reactions.R3,
             reactions.total]]
    return tabulate(data, headers=header, tablefmt="grid",
                    floatfmt=f".{decimals}f")


def table_points(x, y, label: str = "y", decimals: int = 6):
    header = ["x (m)", label]
    data = [[xi, yi] for xi, yi in zip(x, y)]
    return tabulate(data, headers=header, tablefmt="grid",
                    floatfmt=f".{decimals}f")
