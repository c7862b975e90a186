"""
Print the OpenAPI schema of the rideshare service.

Used to generate client types for the frontend.
"""

import json

from services.rideshare_service.app.main import app


def build_openapi_schema() -> dict:
    """Return the service schema with paths sorted for stable diffs."""
    schema = app.openapi()
    schema["paths"] = dict(sorted(schema.get("paths", {}).items()))
    return schema


if __name__ == "__main__":
    print(json.dumps(build_openapi_schema(), indent=2))
