"""Base context for all operations."""

from dataclasses import dataclass, field

from elitescope.core.logging import ContextualLogger


@dataclass
class BaseContext:
    """Base context carrying a contextual logger.

    ``logger`` defaults to the module logger when omitted.
    """

    logger: ContextualLogger = field(default=None, kw_only=True, repr=False)

    def __post_init__(self):
        """Fall back to the base logger if none was provided."""
        if self.logger is None:
            from elitescope.core.logging import logger as base_logger

            self.logger = base_logger
