"""Domain enumerations."""

import enum


class ConnectorType(str, enum.Enum):
    CCS2 = "CCS2"
    CHADEMO = "CHAdeMO"
    TESLA = "Tesla"
    TYPE2 = "Type2"
    GBT = "GBT"


class Network(str, enum.Enum):
    DEWA = "DEWA"
    ADDC = "ADDC"
    SEWA = "SEWA"
    TESLA = "Tesla"
    OTHER = "Other"


class UpdateType(str, enum.Enum):
    STATION_STATUS = "Station Status"
    TRAFFIC = "Traffic"
    WEATHER = "Weather"
    ROUTE_CHANGE = "Route Change"


class UpdatePriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


# Fast / major networks preferred when picking charging stops
PRIORITY_NETWORKS: frozenset[str] = frozenset({Network.TESLA.value, Network.DEWA.value})
