"""
Config provider - builds the static dashboard configuration.

No inputs, no failure mode: the document is assembled from
:class:`~hostboard.core.settings.HostboardSettings` on every call.
"""

from __future__ import annotations

from hostboard.core.logging import get_logger
from hostboard.core.models import ApiEndpoint, ConfigDocument
from hostboard.core.settings import HostboardSettings

logger = get_logger(__name__)


def get_config(settings: HostboardSettings) -> ConfigDocument:
    """Return the API location, inventory path and widget mapping."""
    config = ConfigDocument(
        api=ApiEndpoint(host=settings.api_host, port=settings.api_port),
        inventory_path=settings.inventory_path,
        widgets={name: widget.model_copy() for name, widget in settings.widgets.items()},
    )
    logger.info("sending_config", widgets=sorted(config.widgets))
    return config
