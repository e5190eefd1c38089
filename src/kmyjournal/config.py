"""Conversion settings loaded from the environment."""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from kmyjournal.domain.errors import ConfigurationError, invalid_setting
from kmyjournal.utils.fraction import DEFAULT_MAX_SCALE, DEFAULT_MIN_SCALE
from kmyjournal.utils.text_normalizer import NEWLINE_SEPARATOR

NEWLINE_SEPARATOR_ENVVAR = "KMYJOURNAL_NEWLINE_SEPARATOR"
JOURNAL_EXTENSION_ENVVAR = "KMYJOURNAL_JOURNAL_EXTENSION"
AMOUNT_SCALE_ENVVAR = "KMYJOURNAL_AMOUNT_SCALE"

JOURNAL_EXTENSION = ".journal"
PAYEE_SEPARATOR = " | "


@dataclass(frozen=True)
class ConversionSettings:
    """Settings shared by every document converted in a run."""

    newline_separator: str = NEWLINE_SEPARATOR
    payee_separator: str = PAYEE_SEPARATOR
    journal_extension: str = JOURNAL_EXTENSION
    min_amount_scale: int = DEFAULT_MIN_SCALE
    max_amount_scale: int = DEFAULT_MAX_SCALE
    include_payees: bool = False

    def __post_init__(self):
        if not isinstance(self.min_amount_scale, int) or self.min_amount_scale < 0:
            raise ConfigurationError(
                invalid_setting("amount scale", self.min_amount_scale, "a non-negative integer")
            )
        if self.max_amount_scale < self.min_amount_scale:
            raise ConfigurationError(
                invalid_setting(
                    "maximum amount scale",
                    self.max_amount_scale,
                    f"at least the amount scale ({self.min_amount_scale})",
                )
            )
        if not self.journal_extension:
            raise ConfigurationError(
                invalid_setting("journal extension", self.journal_extension, "a non-empty suffix")
            )


def _parse_scale(value: Any) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError(
            invalid_setting("amount scale", value, "a non-negative integer")
        )


def load_settings(
    environ: Optional[Mapping[str, str]] = None, **overrides: Any
) -> ConversionSettings:
    """Build settings from environment variables and explicit overrides.

    Overrides whose value is None are ignored, so CLI options that were not
    given fall back to the environment and then to the defaults.

    Raises:
        ConfigurationError: If a value is invalid
    """
    environ = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    if NEWLINE_SEPARATOR_ENVVAR in environ:
        values["newline_separator"] = environ[NEWLINE_SEPARATOR_ENVVAR]
    if environ.get(JOURNAL_EXTENSION_ENVVAR):
        values["journal_extension"] = environ[JOURNAL_EXTENSION_ENVVAR]
    if environ.get(AMOUNT_SCALE_ENVVAR):
        values["min_amount_scale"] = environ[AMOUNT_SCALE_ENVVAR]

    values.update({key: value for key, value in overrides.items() if value is not None})

    if "min_amount_scale" in values:
        values["min_amount_scale"] = _parse_scale(values["min_amount_scale"])
        values.setdefault(
            "max_amount_scale", max(DEFAULT_MAX_SCALE, values["min_amount_scale"])
        )
    return replace(ConversionSettings(), **values)
