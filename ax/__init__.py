__title__ = 'ax'
__license__ = 'MIT'

try:
    __version__ = __import__("importlib.metadata").metadata.version("ax-runner")
except __import__("importlib.metadata").metadata.PackageNotFoundError:
    __version__ = "0.0.0"

from .faults import *
from .scripts import *
from .workspace import *
from .registry import *
from .completion import complete, polarity

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "complete",
    "polarity",
)

# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[name-defined]
# Load the exposed API of the scripts
__all__ += scripts.__all__  # type: ignore[name-defined]
# Load the exposed API of the workspace
__all__ += workspace.__all__  # type: ignore[name-defined]
# Load the exposed API of the registry
__all__ += registry.__all__  # type: ignore[name-defined]
