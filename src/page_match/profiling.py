"""Profiling utilities for development."""

import inspect
from collections.abc import Callable
from datetime import UTC, datetime
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import structlog

log = structlog.get_logger()

F = TypeVar("F", bound=Callable[..., Any])

# Global flag - set by create_app() based on settings
_profiling_enabled = False
_profiles_dir: Path | None = None


def configure_profiling(enabled: bool, profiles_dir: Path | None = None) -> None:
    """Configure profiling settings.

    Args:
        enabled: Whether profiling is enabled.
        profiles_dir: Directory to save profile reports. Defaults to ./profiles.
    """
    global _profiling_enabled, _profiles_dir
    _profiling_enabled = enabled
    _profiles_dir = profiles_dir or Path("profiles")

    if enabled:
        _profiles_dir.mkdir(parents=True, exist_ok=True)
        log.info("profiling_enabled", profiles_dir=str(_profiles_dir))


def is_profiling_enabled() -> bool:
    return _profiling_enabled


def profile(name: str) -> Callable[[F], F]:
    """Decorator to profile a sync or async function.

    When profiling is enabled, runs the function under a pyinstrument
    profiler and saves the text report to the profiles directory.

    Args:
        name: Name for the profile output file.

    Returns:
        Decorator function.
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                if not _profiling_enabled:
                    return await func(*args, **kwargs)

                profiler = _start_profiler(async_mode="enabled")
                try:
                    return await func(*args, **kwargs)
                finally:
                    profiler.stop()
                    _save_profile(profiler, name)

            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not _profiling_enabled:
                return func(*args, **kwargs)

            profiler = _start_profiler(async_mode="disabled")
            try:
                return func(*args, **kwargs)
            finally:
                profiler.stop()
                _save_profile(profiler, name)

        return wrapper  # type: ignore[return-value]

    return decorator


def _start_profiler(async_mode: str):
    # Import here to avoid loading pyinstrument when not profiling
    from pyinstrument import Profiler  # noqa: PLC0415

    profiler = Profiler(async_mode=async_mode)
    profiler.start()
    return profiler


def _save_profile(profiler, name: str) -> None:
    """Save profiler output to a text file.

    Args:
        profiler: The pyinstrument Profiler instance.
        name: Base name for the output file.
    """
    if _profiles_dir is None:
        return

    timestamp = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S_%f")
    filepath = _profiles_dir / f"{name}_{timestamp}.txt"
    filepath.write_text(profiler.output_text(unicode=True, color=False))
    log.debug("profile_saved", path=str(filepath))
