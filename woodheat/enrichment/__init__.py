"""Location and weather enrichment for the selected country."""

from woodheat.enrichment.coordinator import EnrichmentCoordinator, RequestToken
from woodheat.enrichment.open_meteo import Forecaster, Geocoder, OpenMeteoClient

__all__ = [
    "EnrichmentCoordinator",
    "Forecaster",
    "Geocoder",
    "OpenMeteoClient",
    "RequestToken",
]
