"""Test package for schemas.

Contains unit tests for:
- SourceMetadata
- Citation and ChicagoFormatter
- CitedContent with [^N] markers
- Finding and Violation models

Pattern: TDD (RED → GREEN → REFACTOR)
Reference: WBS-AGT4
"""
