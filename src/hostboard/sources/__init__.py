"""
Dashboard data sources.

The API never checks a "sample mode" flag at each endpoint; it asks
:func:`create_source` for one :class:`DashboardSource` and calls it.

Usage:
    from hostboard.sources import create_source

    source = create_source(settings)
    config = await source.get_config()
"""

from hostboard.sources.live import LiveSource
from hostboard.sources.protocol import DashboardSource, create_source
from hostboard.sources.remote import RemoteSource
from hostboard.sources.sample import SampleSource

__all__ = ["DashboardSource", "LiveSource", "RemoteSource", "SampleSource", "create_source"]
