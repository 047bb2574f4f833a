"""
Run configuration for the Lox driver.

Immutable once created; the scanner itself takes no configuration.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class RunConfig:
    """Immutable driver configuration.

    Attributes:
        prompt: Prompt printed before each interactive line
        reset_errors_per_line: In the REPL, forget errors after each line
            so one bad line does not taint the rest of the session
        print_tokens: Print each scanned token to the output stream
        log_level: Level name passed to logging.basicConfig
    """

    prompt: str = "> "
    reset_errors_per_line: bool = True
    print_tokens: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "RunConfig":
        """Create a RunConfig from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})
