from .base_uris import ENVIRONMENT_PRESETS, BaseUris, preset_for
from .service import Environment, ServiceName

__all__ = ["BaseUris", "ENVIRONMENT_PRESETS", "preset_for", "Environment", "ServiceName"]
