"""
Shared pieces for the catalog API and the launcher: data types, place-id
helpers, params.yaml loading and JSON logging.
"""
