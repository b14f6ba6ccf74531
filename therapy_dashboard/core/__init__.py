"""Core domain: exceptions and scheduling policy."""
