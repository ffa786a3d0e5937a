import sys
from dataclasses import dataclass, field

from newrelic_app_guid.client import NewRelicClient
from newrelic_app_guid.errors import (
    GraphQLError,
    LookupFailedError,
    NoEntityFoundError,
    ResponseDecodeError,
)

ENTITY_SEARCH_QUERY = (
    '{ actor { entitySearch(query: "domainId=%s") '
    '{ count query results { entities { entityType name guid } } } } }\n'
)


@dataclass
class Entity:
    entity_type: str
    guid: str
    name: str


@dataclass
class QueryResult:
    """The entitySearch block of a NerdGraph response."""
    count: int
    query: str
    entities: list = field(default_factory=list)


def build_entity_search_query(app_id):
    """
    Build the entity search query filtering on domainId.

    Args:
        app_id (str): The APM application ID.

    Returns:
        str: The GraphQL query string.
    """
    escaped = app_id.replace("\\", "\\\\").replace('"', '\\"')
    return ENTITY_SEARCH_QUERY % escaped


def parse_query_result(body):
    """
    Pull data.actor.entitySearch out of a decoded response body.

    Raises:
        ResponseDecodeError: If any level of the expected structure is missing,
            or an entity has no usable guid.
    """
    try:
        search = body["data"]["actor"]["entitySearch"]
        entities = [
            Entity(
                entity_type=item.get("entityType", ""),
                guid=item["guid"],
                name=item.get("name", ""),
            )
            for item in search["results"]["entities"]
        ]
    except (AttributeError, KeyError, TypeError) as e:
        raise ResponseDecodeError(f"Unexpected response structure: missing {e}") from e

    for entity in entities:
        if not isinstance(entity.guid, str) or not entity.guid:
            raise ResponseDecodeError(f"Unexpected response structure: invalid guid {entity.guid!r}")

    return QueryResult(
        count=search.get("count") or 0,
        query=search.get("query") or "",
        entities=entities,
    )


def extract_app_guid(result, app_id=None):
    """
    Return the GUID of the first entity in the result.

    Entity order is whatever the API returns; when several entities match,
    the first one wins.

    Args:
        result (QueryResult): The parsed entity search.
        app_id (str, optional): Used only in the error message.

    Returns:
        str: The entity GUID.

    Raises:
        NoEntityFoundError: If the entity list is empty.
    """
    if not result.entities:
        raise NoEntityFoundError(f"No matching app found for domainId={app_id}" if app_id
                                 else f"No matching app found for {result.query}")

    if len(result.entities) > 1:
        print(f"Warning: {len(result.entities)} entities matched, using the first one.", file=sys.stderr)

    return result.entities[0].guid


def fetch_app_guid(config, client=None):
    """
    Look up the application GUID described by config.

    Transport errors from requests are not caught and reach the caller.

    Args:
        config (ActionConfig): The run configuration.
        client (NewRelicClient, optional): Defaults to a client built from config.

    Returns:
        tuple: (guid, None) on success, (None, error message) otherwise.
    """
    if client is None:
        client = NewRelicClient(config.api_key, config.endpoint)

    try:
        body = client.execute(build_entity_search_query(config.app_id))
        result = parse_query_result(body)
        return extract_app_guid(result, config.app_id), None
    except (LookupFailedError, GraphQLError, ResponseDecodeError, NoEntityFoundError) as e:
        return None, str(e)
