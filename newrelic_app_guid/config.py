from dataclasses import dataclass

from newrelic_app_guid.errors import ConfigError

# GitHub exposes action inputs as INPUT_<NAME> environment variables
ENV_API_KEY = "INPUT_NEWRELICAPIKEY"
ENV_REGION = "INPUT_NEWRELICREGION"
ENV_APP_ID = "INPUT_NEWRELICAPPID"

DEFAULT_REGION = "US"

ENDPOINTS = {
    "US": "https://api.newrelic.com/graphql",
    "EU": "https://api.eu.newrelic.com/graphql",
}


@dataclass(frozen=True)
class ActionConfig:
    """
    Inputs for a single lookup run.

    Built once at startup by load_config() and passed to every later stage.
    """
    api_key: str
    region: str
    app_id: str

    @property
    def endpoint(self):
        return resolve_endpoint(self.region)


def resolve_endpoint(region):
    """
    Map a region code to its New Relic GraphQL endpoint.

    Args:
        region (str): Either "US" or "EU". Matching is case-sensitive.

    Returns:
        str: The endpoint URL.

    Raises:
        ConfigError: If the region is not one of the known codes.
    """
    try:
        return ENDPOINTS[region]
    except KeyError:
        raise ConfigError("Invalid NewRelic region specified.") from None


def load_config(environ, api_key=None, region=None, app_id=None):
    """
    Build an ActionConfig from an environment mapping.

    Explicit keyword values take precedence over the mapping. The region
    falls back to US when neither source provides one.

    Args:
        environ (Mapping[str, str]): Usually os.environ.
        api_key (str, optional): Overrides INPUT_NEWRELICAPIKEY.
        region (str, optional): Overrides INPUT_NEWRELICREGION.
        app_id (str, optional): Overrides INPUT_NEWRELICAPPID.

    Returns:
        ActionConfig: The validated configuration.

    Raises:
        ConfigError: If the API key or app ID is empty, or the region is unknown.
    """
    api_key = api_key or environ.get(ENV_API_KEY, "")
    region = region or environ.get(ENV_REGION, "") or DEFAULT_REGION
    app_id = app_id or environ.get(ENV_APP_ID, "")

    if not api_key:
        raise ConfigError("NewRelic API key not specified.")

    if not app_id:
        raise ConfigError("NewRelic app ID not specified.")

    # Validate eagerly so a bad region fails before any request is built
    resolve_endpoint(region)

    return ActionConfig(api_key=api_key, region=region, app_id=app_id)
