"""
GraphQL resolvers

Every resolver takes the per-request GraphQLContext as its first argument.
"""
