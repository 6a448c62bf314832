# Importing this package registers every model on Base.metadata
from petdemo.models.cat import Cat
from petdemo.models.dog import Dog

__all__ = ["Cat", "Dog"]
