from .base import JobSource
from .mock import MockSource
from .zippia import ZippiaSource

from jobboard.config import Settings
from jobboard.log import get_logger

log = get_logger(__name__)

__all__ = ["JobSource", "MockSource", "ZippiaSource", "SOURCES", "get_source"]

SOURCES: dict[str, type[JobSource]] = {
    ZippiaSource.name: ZippiaSource,
    MockSource.name: MockSource,
}


def get_source(settings: Settings) -> JobSource:
    try:
        cls = SOURCES[settings.source]
    except KeyError:
        raise ValueError(
            f"Unknown job source {settings.source!r} (choose from: {', '.join(SOURCES)})"
        ) from None
    log.debug("Using source: %s", cls.__name__)
    return cls(settings)
