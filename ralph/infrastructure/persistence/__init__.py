from ralph.infrastructure.persistence.config_loader import (
    config_path,
    load_config,
    write_default_config,
)
from ralph.infrastructure.persistence.json_state_repo import JsonStateRepo

__all__ = ["JsonStateRepo", "config_path", "load_config", "write_default_config"]
