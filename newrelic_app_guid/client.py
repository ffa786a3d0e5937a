import sys

import requests

from newrelic_app_guid.errors import GraphQLError, LookupFailedError, ResponseDecodeError


class NewRelicClient:
    """
    A client for the New Relic NerdGraph (GraphQL) API.

    This client handles the Api-Key header and executing GraphQL queries.
    """
    def __init__(self, api_key, endpoint, timeout=None):
        """
        Initialize the New Relic client.

        Args:
            api_key (str): A New Relic user API key.
            endpoint (str): The regional GraphQL endpoint URL.
            timeout (float, optional): Request timeout in seconds. None waits indefinitely.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.headers = {
            "Api-Key": api_key,
            "Content-Type": "application/json",
        }

    def execute(self, query, variables=None):
        """
        Executes a GraphQL query against the New Relic API.

        Transport errors (requests.RequestException) are not caught here.

        Args:
            query (str): The GraphQL query string.
            variables (dict, optional): A dictionary of variables for the query.

        Returns:
            dict: The decoded JSON response body.

        Raises:
            LookupFailedError: If the API did not answer with HTTP 200.
            ResponseDecodeError: If the body is not valid JSON.
            GraphQLError: If the body reports GraphQL errors.
        """
        payload = {"query": query, "variables": variables}

        with requests.post(self.endpoint, json=payload, headers=self.headers, timeout=self.timeout) as response:
            print(f"HTTP status: {response.status_code}", file=sys.stderr)

            if response.status_code != 200:
                raise LookupFailedError(response.status_code)

            try:
                data = response.json()
            except ValueError as e:
                raise ResponseDecodeError(f"Could not decode response body: {e}") from e

        if not isinstance(data, dict):
            raise ResponseDecodeError("Response body is not a JSON object")

        if data.get("errors"):
            messages = "; ".join(str(err.get("message", err)) if isinstance(err, dict) else str(err)
                                 for err in data["errors"])
            raise GraphQLError(f"GraphQL Errors: {messages}")

        return data
