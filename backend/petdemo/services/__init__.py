# Services package init
"""
PetDemo: Services Layer
=======================

Service Inventory:
    - CatService: most recent name, list, create, search, bed increment
    - DogService: list, create, search-and-age
    - fields: presence and integer checks shared by both

Services are stateless singletons. Each call receives the request's
AsyncSession, so tests can hand in a mock session without a database.
"""
