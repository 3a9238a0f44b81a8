"""
Centralized logging using Loguru with context-aware verbosity.

LOG() consults the ProgramState connected to the current context, so the
classifier, document reader and output table can report progress without
being handed the state. When no state is connected (library use) LOG() is
silent.

Usage:
    from mdweb.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Writing code to hello.c", level=1)        # default
    LOG("Classifying notes.md", level=2)           # -v
    LOG("Directive <<#-->>: mode=boilerplate", level=3)  # -vv
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# ProgramState of the running pipeline, if any
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <12}</cyan>:"
    "<cyan>{function: <20}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: Object with a ``verbosity`` attribute (normally ProgramState)
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Extra values passed through to loguru
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
