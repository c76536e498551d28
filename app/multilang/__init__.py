"""multilang - locale text resolution backed by a cache and a durable store.

Main packages:
- configuration: pydantic settings for cache, store, locales and runtime
- logging: structlog setup and request context binding
- operations: OperationResult/OperationStatus returned by integrations
- texts: TextRegistry, MissingKeyReconciler, LocaleDetector and backends
- services: application-scoped providers for settings and backends
"""
