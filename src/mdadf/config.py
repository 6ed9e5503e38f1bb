"""Converter configuration for mdadf.

:class:`MdAdfConfig` is a plain dataclass holding the few knobs of
:class:`~mdadf.converter.md_to_adf.MarkdownToAdfConverter`.  Conversion
itself has no tunable behaviour; the options select the default input
interpretation and control diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Level names accepted by ``log_level``."""


@dataclass
class MdAdfConfig:
    """Configuration for a converter.

    Parameters
    ----------
    markdown:
        Default interpretation of input text when a call does not pass an
        explicit flag.

        * ``True`` — parse the markdown dialect (headings, fences, lists,
          inline marks).
        * ``False`` — one literal paragraph per non-blank line.
    debug_dump_document:
        Log the wire JSON of every converted document at ``DEBUG`` level
        on the ``mdadf.converter`` logger.
    log_level:
        Minimum level of the records this converter emits.  Each converter
        filters its own records, so converters with different levels can
        share the ``mdadf.converter`` logger.  One of :data:`LOG_LEVELS`,
        case-insensitive.
    """

    markdown: bool = False

    debug_dump_document: bool = False

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("markdown", "debug_dump_document"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a bool, got {value!r}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

    @property
    def log_level_number(self) -> int:
        """``log_level`` as a :mod:`logging` level number."""
        return logging.getLevelName(self.log_level)
