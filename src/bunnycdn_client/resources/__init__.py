"""Resource-specific convenience wrappers."""
from .abuse_cases import AbuseCasesResource
from .billing import BillingResource
from .countries import CountriesResource
from .dns_zones import DnsZonesResource
from .regions import RegionsResource
from .support import SupportResource
from .video_libraries import VideoLibrariesResource

__all__ = [
    "AbuseCasesResource",
    "BillingResource",
    "CountriesResource",
    "DnsZonesResource",
    "RegionsResource",
    "SupportResource",
    "VideoLibrariesResource",
]
