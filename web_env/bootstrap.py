"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from web_env.api import create_api_application
from web_env.config import AppSettings, config_load_settings
from web_env.environment import ProcessEnvironmentSnapshotService
from web_env.rendering import EnvironmentPageRenderer


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings. Loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    snapshot_service = ProcessEnvironmentSnapshotService(
        publish_to_process_environment=resolved_settings.publish_to_process_environment,
    )
    return create_api_application(
        settings=resolved_settings,
        snapshot_service=snapshot_service,
        page_renderer=EnvironmentPageRenderer(),
    )
