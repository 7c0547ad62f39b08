#!/usr/bin/env python3
"""Example: Quickstart — metatype

Minimal working example: build a schema, describe a meta query, and
compute the type annotations the query asks for.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install metatype
"""
from __future__ import annotations

import json

import metatype
from metatype.query import parse_query
from metatype.schema import parse_schema
from metatype.sources import PropertyResolutionError

SCHEMA = '''
classes:
  - class: City
    properties:
      - name: population
        dataType: [int]
      - name: InCountry
        dataType: [Country, WeaviateB/Country]
  - class: Country
    properties:
      - name: name
        dataType: [string]
'''

QUERY = '''
class: City
properties:
  - name: meta
    analyses: [count]
  - name: InCountry
    analyses: [pointingTo, type, count]
  - name: population
    analyses: [mean, type, pointingTo]
'''


def main() -> None:
    print(f"metatype version: {metatype.__version__}")

    # Step 1: Load the schema and the query
    schema = parse_schema(SCHEMA)
    query = parse_query(QUERY)
    print(f"Schema classes: {schema.class_names()}")
    print(f"Query on {query.class_name!r}: {query.property_names()}")

    # Step 2: Annotate; count/mean are left to the aggregation engine
    annotations = metatype.inspect_types(query, schema)
    print(json.dumps(annotations, indent=2))

    # Step 3: Unknown properties surface as resolution errors
    try:
        metatype.inspect_types(parse_query(QUERY.replace("population", "area")), schema)
    except PropertyResolutionError as error:
        print(f"Resolution error: {error}")


if __name__ == "__main__":
    main()
