# nanograd/core/config.py
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class EngineConfig:
    """
    Engine-wide switches.

    Attributes
    ----------
    strict : bool
        If True, a backward rule whose weakly-held operand or output has been
        reclaimed raises DanglingReferenceError. If False (default) the
        contribution is skipped.
    """
    strict: bool = False


# Global active configuration (swapped by use_config)
active_config = EngineConfig()


def get_config() -> EngineConfig:
    return active_config


def set_config(cfg: EngineConfig) -> EngineConfig:
    """Install `cfg` as the active configuration and return the previous one."""
    global active_config
    if not isinstance(cfg, EngineConfig):
        raise TypeError(f"set_config expects an EngineConfig, but got {type(cfg)}")
    prev = active_config
    active_config = cfg
    return prev


@contextmanager
def use_config(cfg: Optional[EngineConfig] = None, **overrides):
    """
    Context manager to temporarily switch the active configuration:
        with use_config(strict=True):
            ... build computation ...
            y.backward()
    """
    base = cfg or active_config
    prev = set_config(replace(base, **overrides) if overrides else base)
    try:
        yield active_config
    finally:
        set_config(prev)
