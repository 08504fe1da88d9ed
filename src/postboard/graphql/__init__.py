"""GraphQL schema, types and resolvers for the Postboard API."""
