"""Color choice enum deciding when styled output is produced."""

import os
from enum import Enum
from typing import Any, Mapping, Optional


class ColorChoice(str, Enum):
    """When to emit ANSI styling.

    Values:
        ALWAYS: Always style output.
        AUTO: Style output only when writing to a terminal and NO_COLOR is unset.
        NEVER: Never style output.
    """

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    def resolve(self, stream: Any = None, environ: Optional[Mapping[str, str]] = None) -> bool:
        """Decide whether styling is enabled for a given output stream.

        Args:
            stream: The stream output is written to. Only consulted for AUTO.
            environ: Environment to read NO_COLOR from. Defaults to os.environ.

        Returns:
            True if output should be styled.
        """
        if self is ColorChoice.ALWAYS:
            return True
        if self is ColorChoice.NEVER:
            return False
        env = os.environ if environ is None else environ
        if env.get("NO_COLOR"):
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())
