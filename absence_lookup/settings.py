"""Runtime settings resolved from the environment.

Forms the boundary between the process environment (including an optional
project ``.env`` file) and the strongly-typed runtime settings consumed by
the CLI and the Textual app. Defaults come from ``absence_lookup.config``.

Examples
--------
>>> from absence_lookup.settings import LookupSettings
>>> settings = LookupSettings.from_env()
>>> settings.fetch_timeout > 0
True
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

import absence_lookup.config as _project_config
from absence_lookup.config import (
    DEFAULT_CSV_SOURCE,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_OUTPUT_DIR,
    ENV_CSV_SOURCE,
    ENV_FETCH_TIMEOUT,
    ENV_OUTPUT_DIR,
)
from absence_lookup.exceptions import DataValidationError


@dataclass(frozen=True)
class LookupSettings:
    r"""Resolved runtime settings.

    Attributes
    ----------
    csv_source : str
        Local path or ``http(s)://`` URL of the district CSV.
    output_dir : Path
        Directory for exported charts and reports.
    fetch_timeout : float
        Total timeout in seconds for a remote fetch.
    """

    csv_source: str = DEFAULT_CSV_SOURCE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    @classmethod
    def from_env(cls, csv_source: str | None = None) -> LookupSettings:
        r"""Build settings from environment variables and the project ``.env``.

        Parameters
        ----------
        csv_source : str | None, optional
            Explicit source that takes precedence over the environment.

        Returns
        -------
        LookupSettings
            Settings with defaults filled in.

        Raises
        ------
        DataValidationError
            If ``ABSENCE_FETCH_TIMEOUT`` is not a positive number.
        """
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
        raw_timeout = os.getenv(ENV_FETCH_TIMEOUT, str(DEFAULT_FETCH_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            timeout = -1.0
        if timeout <= 0:
            raise DataValidationError(
                f"{ENV_FETCH_TIMEOUT} must be a positive number",
                context={"value": raw_timeout},
            )
        return cls(
            csv_source=csv_source or os.getenv(ENV_CSV_SOURCE) or DEFAULT_CSV_SOURCE,
            output_dir=Path(os.getenv(ENV_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR),
            fetch_timeout=timeout,
        )
