"""Store configuration for pycarousel."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycarousel.exceptions import CarouselConfigError
from pycarousel.state.policy import ReentrancyPolicy, parse_reentrancy_policy

_TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_WORDS:
        return True
    if normalized in _FALSE_WORDS:
        return False
    raise CarouselConfigError(f"{name} must be a boolean word, got {value!r}")


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Carousel store configuration.

    Parameters
    ----------
    reentrancy : ReentrancyPolicy
        What happens when a subscriber calls ``set_state`` or
        ``notify_all`` while a notification pass is running.
        Defaults to queueing the nested notification.
    copy_state : bool
        When ``True`` (default), ``get_state()`` hands out a shallow
        copy of the state bag so callers cannot mutate the store
        behind its back.  Set to ``False`` to return the live dict.
    """

    reentrancy: ReentrancyPolicy = ReentrancyPolicy.QUEUE
    copy_state: bool = True

    def __post_init__(self) -> None:
        # Accept plain strings ("queue") from callers and env parsing.
        object.__setattr__(self, "reentrancy", parse_reentrancy_policy(self.reentrancy))

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads ``CAROUSEL_REENTRANCY`` and ``CAROUSEL_COPY_STATE``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        CarouselConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        reentrancy_env = env.get("CAROUSEL_REENTRANCY")
        if reentrancy_env is not None and "reentrancy" not in overrides:
            config_kwargs["reentrancy"] = parse_reentrancy_policy(reentrancy_env)

        if "copy_state" not in overrides:
            config_kwargs["copy_state"] = _env_bool("CAROUSEL_COPY_STATE", env.get("CAROUSEL_COPY_STATE"), True)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
