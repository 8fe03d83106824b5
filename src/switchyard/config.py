"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from switchyard.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict=True, param_open="{", param_close="}")
    """

    # Pattern syntax: a segment starting with param_open is a parameter,
    # its name is the segment with both delimiters removed.
    param_open: str = "("
    param_close: str = ")"

    # Registering the same method + pattern twice raises instead of overwriting
    strict: bool = False

    # The first dispatch freezes the route table
    freeze_on_dispatch: bool = True

    # Status of the fallback response when nothing matches
    not_found_status: int = 404

    def __post_init__(self) -> None:
        for name in ("param_open", "param_close"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                msg = f"{name} must be a single character, got {value!r}"
                raise ConfigurationError(msg)
