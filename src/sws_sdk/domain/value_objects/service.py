from enum import Enum


class ServiceName(str, Enum):
    """SWS services a client can be created for"""

    ID = "id"
    LICENSE = "license"
    PROFILE = "profile"
    ECOM = "ecom"


class Environment(str, Enum):
    """SWS deployment tiers with preset base URIs"""

    PRODUCTION = "production"
    STAGING = "staging"
