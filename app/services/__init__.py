"""
Services Package
Business logic between the API blueprints and the MVola provider
"""
