"""Resource locator for files shipped inside the package."""
from pathlib import Path


class ResourceManager:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._package_root = Path(__file__).parent
        return cls._instance

    @property
    def themes_dir(self) -> Path:
        # May be missing from stripped installs; callers check exists()
        return self._package_root / "theme" / "themes"


# Singleton instance
resources = ResourceManager()
