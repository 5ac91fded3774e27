"""Resolver package for the GraphQL schema.

Resolvers read the record store and the request auth context from
``info.context`` and return GraphQL types.
"""
