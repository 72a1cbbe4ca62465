"""
GraphQL package: schema, types and resolvers
"""
