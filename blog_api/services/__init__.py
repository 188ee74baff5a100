"""Business logic services.

Services contain all business logic and are called by routes.
Services accept the database explicitly and raise ApiError subclasses
for anything the caller did wrong.
"""
