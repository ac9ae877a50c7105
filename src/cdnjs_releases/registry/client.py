from abc import ABC, abstractmethod
from typing import Any

class RegistryClient(ABC):
    @abstractmethod
    def get_library(self, package_name: str) -> Any:
        """Fetch the decoded library document for a package.

        Raises a RegistryError subclass when the request fails.
        """
        pass
