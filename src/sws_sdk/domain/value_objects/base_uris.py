from dataclasses import dataclass

from sws_sdk.domain.value_objects.service import Environment, ServiceName


@dataclass(frozen=True)
class BaseUris:
    """Value object holding the base URI of every SWS service"""

    id: str
    license: str
    profile: str
    ecom: str

    def for_service(self, service: ServiceName) -> str:
        """Base URI of a single service"""
        return getattr(self, ServiceName(service).value)

    def to_dict(self) -> dict[str, str]:
        return {service.value: self.for_service(service) for service in ServiceName}


ENVIRONMENT_PRESETS: dict[Environment, BaseUris] = {
    Environment.STAGING: BaseUris(
        id="https://staging-id.serato.net",
        license="https://staging-license.serato.net",
        profile="https://staging-profile.serato.net",
        ecom="https://staging-ecom.serato.net",
    ),
    Environment.PRODUCTION: BaseUris(
        id="https://id.serato.com",
        license="https://license.serato.com",
        profile="https://profile.serato.com",
        ecom="https://ecom.serato.com",
    ),
}


def preset_for(env: Environment) -> BaseUris:
    """Get the hardcoded base URIs of an environment"""
    return ENVIRONMENT_PRESETS[Environment(env)]
