import argparse
import os
import sys

import requests
from dotenv import load_dotenv

from newrelic_app_guid.config import load_config
from newrelic_app_guid.errors import ConfigError
from newrelic_app_guid.lookup import fetch_app_guid
from newrelic_app_guid.output import write_output


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Look up a New Relic application GUID by app ID.")
    parser.add_argument("--api-key", help="New Relic API key (or set INPUT_NEWRELICAPIKEY).")
    parser.add_argument("--region", help="New Relic region, US or EU (or set INPUT_NEWRELICREGION, default: US).")
    parser.add_argument("--app-id", help="APM application ID (or set INPUT_NEWRELICAPPID).")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    load_dotenv()

    try:
        config = load_config(os.environ, api_key=args.api_key, region=args.region, app_id=args.app_id)
    except ConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    try:
        guid, error = fetch_app_guid(config)
    except requests.exceptions.RequestException as e:
        print(f"API Request Failed: {e}", file=sys.stderr)
        sys.exit(1)

    if error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)

    write_output(guid)


if __name__ == "__main__":
    main()
