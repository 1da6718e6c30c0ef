"""Record shapes returned by the BunnyCDN API.

Every shape is declared with ``total=False``: the API omits fields freely and
callers should not assume presence. Timestamp fields hold ISO-8601 strings, or
``datetime`` values once the client runs with ``parse_dates`` enabled.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import TypedDict, Union

DateTime = Union[str, datetime]


class BillingRecordType(IntEnum):
    """Payment record type codes used by ``BillingRecord.Type``."""

    PayPal = 0
    Bitcoin = 1
    CreditCard = 2
    MonthlyUsage = 3
    Refund = 4
    CouponCode = 5
    BankTransfer = 6
    AffiliateCredits = 7


class Url(TypedDict, total=False):
    Url: str
    Status: int


class AbuseCase(TypedDict, total=False):
    Id: int
    ActualUrl: str
    DateCreated: DateTime
    DateUpdated: DateTime
    Deadline: DateTime
    PullZoneId: int
    PullZoneName: str
    Path: str
    Message: str
    Status: int
    Urls: list[Url]


class AbuseCasePage(TypedDict, total=False):
    Items: list[AbuseCase]
    CurrentPage: int
    TotalItems: int
    HasMoreItems: bool


class Country(TypedDict, total=False):
    Name: str
    IsoCode: str
    IsEU: bool
    TaxRate: float
    TaxPrefix: str
    FlagUrl: str
    PopList: list[str]


class BillingRecord(TypedDict, total=False):
    Id: int
    PaymentId: str
    Amount: float
    Payer: str
    Timestamp: DateTime
    InvoiceAvailable: bool
    Type: int
    TypeName: str


class BillingDetails(TypedDict, total=False):
    Balance: float
    ThisMonthCharges: float
    BillingRecords: list[BillingRecord]
    MonthlyChargesStorage: float
    MonthlyChargesEUTraffic: float
    MonthlyChargesUSTraffic: float
    MonthlyChargesASIATraffic: float
    MonthlyChargesAFTraffic: float
    MonthlyChargesSATraffic: float


class AffiliateDetails(TypedDict, total=False):
    AffiliateBalance: float
    AffiliateUrl: str
    AffiliateBandwidthChart: dict[str, float]


class BillingSummaryItem(TypedDict, total=False):
    PullZoneId: int
    MonthlyUsage: float
    MonthlyBandwidthUsed: int


class TicketComment(TypedDict, total=False):
    Id: int
    Comment: str
    DateCreated: DateTime
    AuthorName: str
    IsStaff: bool


class Ticket(TypedDict, total=False):
    Id: int
    Subject: str
    Status: str
    DateCreated: DateTime
    DateUpdated: DateTime
    LinkedPullZone: int
    LinkedStorageZone: int
    Comments: list[TicketComment]


class TicketPage(TypedDict, total=False):
    Items: list[Ticket]
    CurrentPage: int
    TotalItems: int
    HasMoreItems: bool


class Region(TypedDict, total=False):
    Id: int
    Name: str
    PricePerGigabyte: float
    RegionCode: str
    ContinentCode: str
    CountryCode: str
    Latitude: float
    Longitude: float


class VideoLibrary(TypedDict, total=False):
    Id: int
    Name: str
    VideoCount: int
    TrafficUsage: int
    StorageUsage: int
    DateCreated: DateTime
    ApiKey: str
    ReadOnlyApiKey: str
    PullZoneId: int
    StorageZoneId: int
    AllowedReferrers: list[str]
    BlockedReferrers: list[str]
    EnabledResolutions: str


class VideoLibraryPage(TypedDict, total=False):
    Items: list[VideoLibrary]
    CurrentPage: int
    TotalItems: int
    HasMoreItems: bool


class DnsRecord(TypedDict, total=False):
    Id: int
    Type: int
    Ttl: int
    Value: str
    Name: str
    Weight: int
    Priority: int
    Disabled: bool


class DnsZone(TypedDict, total=False):
    Id: int
    Domain: str
    Records: list[DnsRecord]
    DateCreated: DateTime
    DateModified: DateTime
    NameserversDetected: bool
    NameserversNextCheck: DateTime
    CustomNameserversEnabled: bool
    LoggingEnabled: bool


class DnsZonePage(TypedDict, total=False):
    Items: list[DnsZone]
    CurrentPage: int
    TotalItems: int
    HasMoreItems: bool
