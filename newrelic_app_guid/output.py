import sys

OUTPUT_NAME = "appGUID"


def format_output(name, value):
    """Format a GitHub Actions workflow command setting an output."""
    return f"::set-output name={name}::{value}"


def write_output(guid, stream=None):
    """
    Write the appGUID output line.

    Args:
        guid (str): The application GUID.
        stream (file, optional): Defaults to sys.stdout.
    """
    stream = stream or sys.stdout
    print(format_output(OUTPUT_NAME, guid), file=stream)
