"""Resolver package for the GraphQL schema.

Each module holds the query resolvers, relationship field resolvers and
mutation handlers for one entity kind. All of them take their store
handles from the per-request context (see ``graphql.context``).
"""
