from abc import ABC, abstractmethod

from jobboard.models import JobFeed


class JobSource(ABC):
    name: str = "unknown"

    @abstractmethod
    def fetch(self) -> JobFeed:
        pass
