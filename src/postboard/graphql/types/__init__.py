"""Strawberry types exposed by the GraphQL schema."""
