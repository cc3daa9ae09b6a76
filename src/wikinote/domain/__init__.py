"""Domain layer — note parsing core.

This layer depends only on stdlib, pydantic and ruamel.yaml.
The markdown tokenizer is reached through :class:`EventSource`; the
default implementation lives in :mod:`wikinote.infrastructure.markdown`.
"""
