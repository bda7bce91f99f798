"""Bot Commander — block program compiler and grid robot step engine."""

from .compiler import compile_program  # noqa: F401
from .executor import initial_state, step  # noqa: F401
from .run import Playback, execute_program  # noqa: F401
from .api import (  # noqa: F401
    compile_source,
    dump_trace,
    dump_grid,
    instruction_stats,
)
