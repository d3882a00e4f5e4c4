"""
Configuration management for catalog_facets.

Loads settings from YAML config file and provides typed access.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
import yaml

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()


def _project_root() -> Path:
    """Return project root (parent of catalog_facets package)."""
    return Path(__file__).resolve().parent.parent.parent


DEFAULT_CONFIG_PATH = _project_root() / "config" / "default.yaml"


@dataclass
class FacetConfig:
    """Configuration for the filter engine."""

    # Availability
    status_field: str = "status"            # Entity field holding the lifecycle status
    available_status: str = "available"     # Status value that means "listed"
    missing_status_is_available: bool = False

    # Sorting
    default_sort: str = "newest"

    # HTTP adapter
    default_kind: str = "pets"

    # Per-kind overrides of the free-text search fields, e.g. {"pets": ["name", "breed"]}
    search_fields: Dict[str, List[str]] = field(default_factory=dict)
    backend_search_fields: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FacetConfig":
        """Load configuration from YAML file."""
        path = config_path or DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        availability_config = data.get('availability', {})
        sorting_config = data.get('sorting', {})
        api_config = data.get('api', {})
        search_config = data.get('search', {})

        return cls(
            status_field=availability_config.get('status_field', 'status'),
            available_status=availability_config.get('available_status', 'available'),
            missing_status_is_available=availability_config.get('missing_status_is_available', False),
            default_sort=sorting_config.get('default', 'newest'),
            default_kind=api_config.get('default_kind', 'pets'),
            search_fields=search_config.get('fields', {}) or {},
            backend_search_fields=search_config.get('backend_fields', {}) or {},
        )


# Global config instance
_config: Optional[FacetConfig] = None


def get_config() -> FacetConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = FacetConfig.from_yaml()
    return _config


def set_config(config: FacetConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
