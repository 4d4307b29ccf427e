"""Core building blocks: domain types, services and transport adapters."""
