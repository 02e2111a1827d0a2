"""
Domain Layer - Geometric Value Objects

This layer contains the immutable value objects and the error types they raise.
It has no dependency on configuration, logging or any presentation concern.
"""
